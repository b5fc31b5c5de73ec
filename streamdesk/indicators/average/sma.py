"""Simple Moving Average (SMA) implementation."""

import math
from collections import deque

from .base import MovingAverage, MovingAverageType


class SimpleMovingAverage(MovingAverage):
    """
    Arithmetic mean over the last `period` inputs.

    Until the window fills, the value is the mean of the inputs seen so far.
    The window is summed with math.fsum on every update, so the result is
    correctly rounded: no drift after a spike leaves the window, and a window
    of non-negative inputs never averages below zero.
    """

    ma_type = MovingAverageType.SIMPLE

    def __init__(self, period: int = 14):
        super().__init__(period)
        self._inputs: deque[float] = deque(maxlen=self.period)

    def _update(self, value: float) -> None:
        self._inputs.append(value)
        self._value = math.fsum(self._inputs) / len(self._inputs)

    def _reset(self) -> None:
        self._inputs.clear()
