"""Wilder's smoothing (RMA)."""

from .base import MovingAverageType
from .ema import ExponentialMovingAverage


class WilderMovingAverage(ExponentialMovingAverage):
    """
    Wilder's moving average.

    Equivalent to:
      avg = (prev_avg * (period - 1) + x) / period
    i.e. an exponential average with alpha = 1 / period.
    """

    ma_type = MovingAverageType.WILDER

    def _alpha(self) -> float:
        return 1.0 / self.period
