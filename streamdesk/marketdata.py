# streamdesk/marketdata.py
"""
Market data events consumed by indicators.

Feeds hand these to an IndicatorHub (or directly to an indicator's
handle_* methods): completed candles, quote ticks and trade ticks.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class QuoteTick:
    """Represents a top-of-book quote update."""

    epic: str
    bid: float
    offer: float
    timestamp: str
    raw: dict[str, Any] = field(default_factory=dict)

    @property
    def mid(self) -> float:
        return (self.bid + self.offer) / 2


@dataclass(frozen=True)
class TradeTick:
    """Represents a single executed trade."""

    epic: str
    price: float
    size: float
    timestamp: str


@dataclass
class Candle:
    """
    Represents a single OHLCV candle (bar).

    Attributes:
        timestamp: ISO 8601 timestamp or Unix timestamp string
        open: Opening price
        high: Highest price during period
        low: Lowest price during period
        close: Closing price
        volume: Trading volume (or 0 if unavailable)
        tick_count: Number of ticks/updates during period
    """

    timestamp: str
    open: float
    high: float
    low: float
    close: float
    volume: float = 0.0
    tick_count: int = 0

    @property
    def range(self) -> float:
        """Calculate candle range (high - low)."""
        return self.high - self.low

    def __repr__(self) -> str:
        return (
            f"Candle(timestamp={self.timestamp}, "
            f"O={self.open:.5f}, H={self.high:.5f}, "
            f"L={self.low:.5f}, C={self.close:.5f}, "
            f"V={self.volume:.0f})"
        )


@dataclass(frozen=True)
class CandleClose:
    """A completed candle for a given epic/timeframe."""

    epic: str
    period: str
    candle: Candle
