"""Construct moving averages from a type tag."""

from streamdesk.indicators.base import InvalidConfiguration
from .base import MovingAverage, MovingAverageType
from .dema import DoubleExponentialMovingAverage
from .ema import ExponentialMovingAverage
from .sma import SimpleMovingAverage
from .wilder import WilderMovingAverage


class MovingAverageFactory:
    """
    Builds a concrete MovingAverage for a MovingAverageType.

    New smoothing algorithms are added by registering them in `_VARIANTS`.

    Example:
        ma = MovingAverageFactory.create("exponential", 20)
        ma.update_raw(1.2345)
    """

    _VARIANTS: dict[MovingAverageType, type[MovingAverage]] = {
        MovingAverageType.SIMPLE: SimpleMovingAverage,
        MovingAverageType.EXPONENTIAL: ExponentialMovingAverage,
        MovingAverageType.WILDER: WilderMovingAverage,
        MovingAverageType.DOUBLE_EXPONENTIAL: DoubleExponentialMovingAverage,
    }

    @staticmethod
    def parse_type(ma_type: MovingAverageType | str) -> MovingAverageType:
        """
        Resolve a tag or its case-insensitive name.

        Raises:
            InvalidConfiguration: If the tag is not a known variant
        """
        if isinstance(ma_type, MovingAverageType):
            return ma_type
        if isinstance(ma_type, str):
            try:
                return MovingAverageType[ma_type.strip().upper()]
            except KeyError:
                pass
        valid = ", ".join(t.value for t in MovingAverageType)
        raise InvalidConfiguration(
            f"Unknown moving average type {ma_type!r} (expected one of: {valid})"
        )

    @classmethod
    def create(cls, ma_type: MovingAverageType | str, period: int) -> MovingAverage:
        return cls._VARIANTS[cls.parse_type(ma_type)](period)
