"""ATR-based position sizing example."""
import logging

from streamdesk import (
    AverageTrueRange,
    Candle,
    CandleClose,
    IndicatorHub,
    configure_logging,
)

log = logging.getLogger(__name__)

EPIC = "CS.D.GBPUSD.TODAY.IP"
PERIOD = "5MINUTE"
RISK_PER_TRADE = 50.0  # account currency


def main() -> None:
    configure_logging()

    hub = IndicatorHub()
    # Floor keeps the divisor strictly positive on flat markets
    atr = AverageTrueRange(period=5, ma_type="wilder", value_floor=0.0001)
    hub.register(EPIC, PERIOD, atr)

    closes = [1.2701, 1.2712, 1.2698, 1.2725, 1.2731, 1.2719, 1.2740, 1.2752]
    for i, close in enumerate(closes):
        candle = Candle(
            timestamp=f"2025-01-01T00:{i * 5:02d}:00Z",
            open=close - 0.0003,
            high=close + 0.0008,
            low=close - 0.0009,
            close=close,
        )
        hub.handle(CandleClose(EPIC, PERIOD, candle))

        if not atr.is_initialized():
            log.info("%s warming up (%d/%d)", atr, atr.count, atr.period)
            continue

        stop_distance = 2 * atr.value
        size = RISK_PER_TRADE / stop_distance
        log.info("ATR=%.5f stop=%.5f size=%.1f", atr.value, stop_distance, size)


if __name__ == "__main__":
    main()
