# tests/conftest.py
import pytest

from streamdesk.marketdata import Candle


def make_candle(i: int) -> Candle:
    """
    Deterministic candle series with monotonically increasing prices.
    """
    base = 100.0 + i
    return Candle(
        timestamp=f"2025-01-01T00:{i:02d}:00Z",
        open=base,
        high=base + 0.5,
        low=base - 0.5,
        close=base + 0.2,
        volume=1000.0,
        tick_count=10,
    )


@pytest.fixture
def candle_factory():
    """
    Returns a function: (i:int) -> Candle
    """
    return make_candle


@pytest.fixture
def make_candles(candle_factory):
    """
    Returns a function: (n:int, start:int=0) -> list[Candle]
    """
    def _make(n: int, start: int = 0) -> list[Candle]:
        return [candle_factory(i) for i in range(start, start + n)]

    return _make


@pytest.fixture
def hlc_series():
    """A volatile, deterministic (high, low, close) series including gaps."""
    return [
        (10.0, 8.0, 9.0),
        (11.0, 9.0, 10.0),
        (12.0, 10.0, 11.0),
        (13.0, 10.0, 12.0),
        (12.5, 11.0, 11.5),
        (15.0, 13.5, 14.0),  # gap up
        (14.5, 12.0, 12.5),
        (11.0, 9.5, 10.0),  # gap down
        (10.5, 9.0, 10.2),
        (10.8, 10.1, 10.4),
    ]
