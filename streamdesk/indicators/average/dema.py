"""Double Exponential Moving Average (DEMA) implementation."""

from .base import MovingAverage, MovingAverageType
from .ema import ExponentialMovingAverage


class DoubleExponentialMovingAverage(MovingAverage):
    """
    DEMA = 2 * EMA(x) - EMA(EMA(x))

    Both inner EMAs share the configured period.
    """

    ma_type = MovingAverageType.DOUBLE_EXPONENTIAL

    def __init__(self, period: int = 14):
        super().__init__(period)
        self._ema1 = ExponentialMovingAverage(self.period)
        self._ema2 = ExponentialMovingAverage(self.period)

    def _update(self, value: float) -> None:
        self._ema1.update_raw(value)
        self._ema2.update_raw(self._ema1.value)
        self._value = 2.0 * self._ema1.value - self._ema2.value

    def _reset(self) -> None:
        self._ema1.reset()
        self._ema2.reset()
