# streamdesk/indicators/__init__.py
"""
Streaming technical indicators.

Indicators are stateful: feed them events one at a time and read the
running value back.

Example:
    from streamdesk.indicators import AverageTrueRange, MovingAverageType

    atr = AverageTrueRange(period=14, ma_type=MovingAverageType.WILDER)

    # Update with each completed candle
    atr.handle_bar(candle)
    if atr.is_initialized():
        print(atr.value)
"""

from .base import Indicator, InvalidConfiguration
from .average import MovingAverage, MovingAverageFactory, MovingAverageType
from .atr import AverageTrueRange

__all__ = [
    "Indicator",
    "InvalidConfiguration",
    "MovingAverage",
    "MovingAverageFactory",
    "MovingAverageType",
    "AverageTrueRange",
]
