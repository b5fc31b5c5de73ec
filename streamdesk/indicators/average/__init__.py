"""
Moving averages used as smoothing engines inside indicators.

Example:
    from streamdesk.indicators.average import MovingAverageFactory, MovingAverageType

    ma = MovingAverageFactory.create(MovingAverageType.WILDER, 14)
    for tr in true_ranges:
        ma.update_raw(tr)
    print(ma.value)
"""

from .base import MovingAverage, MovingAverageType
from .dema import DoubleExponentialMovingAverage
from .ema import ExponentialMovingAverage
from .factory import MovingAverageFactory
from .sma import SimpleMovingAverage
from .wilder import WilderMovingAverage

__all__ = [
    "MovingAverage",
    "MovingAverageType",
    "MovingAverageFactory",
    "SimpleMovingAverage",
    "ExponentialMovingAverage",
    "WilderMovingAverage",
    "DoubleExponentialMovingAverage",
]
