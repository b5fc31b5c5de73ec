# streamdesk/hub.py
"""
Event routing from a market data feed to registered indicators.

Feeds push QuoteTick, TradeTick and CandleClose events into an
IndicatorHub; the hub forwards each event to the indicators registered
for its instrument.
"""

import logging

from streamdesk.indicators.base import Indicator
from streamdesk.marketdata import Candle, CandleClose, QuoteTick, TradeTick

log = logging.getLogger(__name__)


class IndicatorHub:
    """
    Holds indicators keyed by (epic, period) and dispatches events to them.

    Example:
        hub = IndicatorHub()
        atr = AverageTrueRange(14)
        hub.register("CS.D.GBPUSD.TODAY.IP", "5MINUTE", atr)

        hub.handle(CandleClose(epic, "5MINUTE", candle))
        if atr.is_initialized():
            ...
    """

    def __init__(self):
        self._indicators: dict[tuple[str, str], list[Indicator]] = {}

    def register(self, epic: str, period: str, indicator: Indicator) -> None:
        """Register an indicator against a chart (epic, period)."""
        self._indicators.setdefault((epic, period), []).append(indicator)
        log.debug("Registered %r for %s %s", indicator, epic, period)

    def indicators(self, epic: str, period: str) -> list[Indicator]:
        return list(self._indicators.get((epic, period), []))

    def keys(self) -> list[tuple[str, str]]:
        return list(self._indicators)

    def _for_epic(self, epic: str) -> list[Indicator]:
        return [
            ind
            for (key_epic, _period), inds in self._indicators.items()
            if key_epic == epic
            for ind in inds
        ]

    def handle(self, event: QuoteTick | TradeTick | CandleClose) -> None:
        """
        Dispatch one event.

        Candles go to the indicators of their (epic, period); ticks go to
        every indicator registered for the tick's epic.
        """
        if isinstance(event, CandleClose):
            for ind in self._indicators.get((event.epic, event.period), []):
                ind.handle_bar(event.candle)
            return

        if isinstance(event, QuoteTick):
            for ind in self._for_epic(event.epic):
                ind.handle_quote_tick(event)
            return

        if isinstance(event, TradeTick):
            for ind in self._for_epic(event.epic):
                ind.handle_trade_tick(event)
            return

        raise TypeError(f"Unsupported event type: {type(event)!r}")

    def required_warmup(self, epic: str, period: str) -> int:
        """
        Return the number of completed candles required to warm up all
        indicators registered for the chart.
        """
        indicators = self._indicators.get((epic, period), [])
        return max((ind.warmup_periods() for ind in indicators), default=0)

    def warmup_plan(self) -> dict[tuple[str, str], int]:
        """
        Build a warmup plan.

        Returns:
            A dict keyed by (epic, period) with the number of completed candles
            required to warm up that chart's indicators.
        """
        return {key: self.required_warmup(*key) for key in self._indicators}

    def prime(self, epic: str, period: str, candles: list[Candle]) -> None:
        """
        Feed historical candles (oldest -> newest) to a chart's indicators.
        """
        indicators = self._indicators.get((epic, period), [])
        for candle in candles:
            for ind in indicators:
                ind.handle_bar(candle)

        log.debug(
            "Primed %d indicator(s) for %s %s with %d candle(s)",
            len(indicators),
            epic,
            period,
            len(candles),
        )

    def warmup_from_history(self, history: dict[tuple[str, str], list[Candle]]) -> None:
        """
        Prime every planned chart from supplied historical candles.

        Notes:
            - Charts missing from `history` are skipped.
            - Entries in `history` with no registered indicators are ignored.
        """
        for (epic, period), warmup in self.warmup_plan().items():
            candles = history.get((epic, period))
            if not candles:
                if warmup > 0:
                    log.warning(
                        "No history for %s %s; indicators need %d candle(s) to warm up",
                        epic,
                        period,
                        warmup,
                    )
                continue

            self.prime(epic, period, candles)

    def reset(self) -> None:
        for inds in self._indicators.values():
            for ind in inds:
                ind.reset()

    def __repr__(self) -> str:
        total = sum(len(inds) for inds in self._indicators.values())
        return f"IndicatorHub(charts={len(self._indicators)}, indicators={total})"
