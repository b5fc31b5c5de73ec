"""Exponential Moving Average (EMA) implementation."""

from .base import MovingAverage, MovingAverageType


class ExponentialMovingAverage(MovingAverage):
    """Exponential Moving Average with alpha = 2 / (period + 1)."""

    ma_type = MovingAverageType.EXPONENTIAL

    def __init__(self, period: int = 14):
        super().__init__(period)
        self.alpha = self._alpha()

    def _alpha(self) -> float:
        return 2.0 / (self.period + 1.0)

    def _update(self, value: float) -> None:
        if not self._has_inputs:
            # Seed with the first input
            self._value = value
        else:
            self._value = (value - self._value) * self.alpha + self._value

    def _reset(self) -> None:
        pass
