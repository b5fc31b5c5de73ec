# streamdesk/__init__.py
"""
Streamdesk - streaming technical indicators for market data.

Indicators consume candles and ticks one at a time and keep a running
value without re-scanning history.

Example:
    from streamdesk import AverageTrueRange, IndicatorHub, CandleClose

    hub = IndicatorHub()
    atr = AverageTrueRange(period=14, ma_type="wilder", value_floor=0.0001)
    hub.register("CS.D.GBPUSD.TODAY.IP", "5MINUTE", atr)

    # From your market data feed
    hub.handle(CandleClose("CS.D.GBPUSD.TODAY.IP", "5MINUTE", candle))
    if atr.is_initialized():
        size = risk_amount / atr.value
"""

from .marketdata import Candle, CandleClose, QuoteTick, TradeTick
from .indicators import (
    AverageTrueRange,
    Indicator,
    InvalidConfiguration,
    MovingAverage,
    MovingAverageFactory,
    MovingAverageType,
)
from .hub import IndicatorHub
from .config import settings, load_indicator_config, build_indicator, build_hub
from .log import configure_logging

__version__ = "0.1.0"
__all__ = [
    "Candle",
    "CandleClose",
    "QuoteTick",
    "TradeTick",
    "Indicator",
    "InvalidConfiguration",
    "MovingAverage",
    "MovingAverageFactory",
    "MovingAverageType",
    "AverageTrueRange",
    "IndicatorHub",
    "settings",
    "load_indicator_config",
    "build_indicator",
    "build_hub",
    "configure_logging",
]
