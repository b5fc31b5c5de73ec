"""Average True Range (ATR) indicator implementation."""

import math

from streamdesk.marketdata import Candle, QuoteTick, TradeTick
from .average import MovingAverageFactory, MovingAverageType
from .average.base import validate_period
from .base import Indicator, InvalidConfiguration


class AverageTrueRange(Indicator):
    """
    ATR (Average True Range) over a pluggable moving average.

    True Range (TR), with use_previous:
      TR = max(prev_close, high) - min(low, prev_close)
    which equals max(high - low, |high - prev_close|, |low - prev_close|)
    whenever high >= low. On the first bar prev_close is seeded with that
    bar's close, so the first TR is high - low.

    Without use_previous:
      TR = high - low

    ATR is TR smoothed by the configured moving average. A non-zero
    `value_floor` pins the reported value to the floor whenever the average
    does not exceed it; the average itself is left untouched.

    Args:
        period: Window length, also the number of bars before initialization
        ma_type: Smoothing algorithm (default: SIMPLE)
        use_previous: Include the previous close in TR (default: True)
        value_floor: Minimum reported value, 0.0 disables the floor

    Example:
        atr = AverageTrueRange(14, value_floor=0.0001)

        for candle in candles:
            atr.handle_bar(candle)
            if atr.is_initialized():
                stop_distance = 2 * atr.value
    """

    def __init__(
        self,
        period: int = 14,
        ma_type: MovingAverageType | str = MovingAverageType.SIMPLE,
        use_previous: bool = True,
        value_floor: float = 0.0,
    ):
        self.period = validate_period(period)
        self.ma_type = MovingAverageFactory.parse_type(ma_type)
        self.use_previous = self._validate_use_previous(use_previous)
        self.value_floor = self._validate_floor(value_floor)

        self.value: float = 0.0
        self.count: int = 0
        self._has_inputs: bool = False
        self._is_initialized: bool = False
        self._previous_close: float = 0.0
        self._ma = MovingAverageFactory.create(self.ma_type, self.period)

    @staticmethod
    def _validate_use_previous(use_previous: bool) -> bool:
        if not isinstance(use_previous, bool):
            raise InvalidConfiguration(
                f"use_previous must be a bool, got {use_previous!r}"
            )
        return use_previous

    @staticmethod
    def _validate_floor(value_floor: float) -> float:
        if isinstance(value_floor, bool) or not isinstance(value_floor, (int, float)):
            raise InvalidConfiguration(
                f"value_floor must be a number, got {value_floor!r}"
            )
        value_floor = float(value_floor)
        if not math.isfinite(value_floor) or value_floor < 0.0:
            raise InvalidConfiguration("value_floor must be a finite number >= 0")
        return value_floor

    def update_raw(self, high: float, low: float, close: float) -> None:
        if self.use_previous:
            if not self._has_inputs:
                self._previous_close = close
            self._ma.update_raw(
                max(self._previous_close, high) - min(low, self._previous_close)
            )
            self._previous_close = close
        else:
            self._ma.update_raw(high - low)

        self._floor_value()
        self._increment_count()

    def _floor_value(self) -> None:
        if self.value_floor == 0.0 or self.value_floor < self._ma.value:
            self.value = self._ma.value
        else:
            self.value = self.value_floor

    def _increment_count(self) -> None:
        self.count += 1

        if not self._is_initialized:
            self._has_inputs = True
            if self.count >= self.period:
                self._is_initialized = True

    def has_inputs(self) -> bool:
        return self._has_inputs

    def is_initialized(self) -> bool:
        return self._is_initialized

    def handle_quote_tick(self, tick: QuoteTick) -> None:
        # ATR is computed from bars only
        pass

    def handle_trade_tick(self, tick: TradeTick) -> None:
        pass

    def handle_bar(self, bar: Candle) -> None:
        self.update_raw(float(bar.high), float(bar.low), float(bar.close))

    def reset(self) -> None:
        self._ma.reset()
        self._previous_close = 0.0
        self.value = 0.0
        self.count = 0
        self._has_inputs = False
        self._is_initialized = False

    def warmup_periods(self) -> int:
        return self.period

    def __repr__(self) -> str:
        return (
            f"{self.name}({self.period},{self.ma_type.value},"
            f"{self.use_previous},{self.value_floor})"
        )
