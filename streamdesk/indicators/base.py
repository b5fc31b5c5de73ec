"""Base class for technical indicators."""

import abc

from streamdesk.marketdata import Candle, QuoteTick, TradeTick


class InvalidConfiguration(ValueError):
    """Raised when an indicator or moving average is built with bad parameters."""


class Indicator(abc.ABC):
    """Abstract base class for all streaming indicators."""

    @property
    def name(self) -> str:
        return type(self).__name__

    @abc.abstractmethod
    def has_inputs(self) -> bool:
        """Return True once the indicator has received at least one input."""
        raise NotImplementedError

    @abc.abstractmethod
    def is_initialized(self) -> bool:
        """Return True when the indicator has enough data to produce valid outputs."""
        raise NotImplementedError

    @abc.abstractmethod
    def handle_quote_tick(self, tick: QuoteTick) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    def handle_trade_tick(self, tick: TradeTick) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    def handle_bar(self, bar: Candle) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    def reset(self) -> None:
        """Reset indicator internal state to its initial (empty) condition."""
        raise NotImplementedError

    @abc.abstractmethod
    def warmup_periods(self) -> int:
        """Number of bars required before is_initialized() becomes True."""
        raise NotImplementedError
