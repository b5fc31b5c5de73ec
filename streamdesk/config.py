# streamdesk/config.py
"""
Configuration management for streamdesk.

Defaults are loaded from environment variables or a .env file.

Optional environment variables:
    LOG_LEVEL        - Logging level (default: INFO)
    ATR_PERIOD       - Default ATR period (default: 14)
    ATR_MA_TYPE      - Default ATR smoothing: SIMPLE, EXPONENTIAL, WILDER,
                       DOUBLE_EXPONENTIAL (default: SIMPLE)
    ATR_VALUE_FLOOR  - Default ATR floor, 0 disables it (default: 0.0)

Indicators can also be declared in YAML:

    indicators:
      - epic: CS.D.GBPUSD.TODAY.IP
        period: 5MINUTE
        indicator:
          type: atr
          period: 14
          ma_type: wilder
          value_floor: 0.0001
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from streamdesk.hub import IndicatorHub
from streamdesk.indicators import AverageTrueRange, Indicator, InvalidConfiguration
from streamdesk.indicators.average import MovingAverageFactory

cwd_env = Path.cwd() / ".env"
if cwd_env.exists():
    load_dotenv(dotenv_path=cwd_env)
else:
    # Fallback to standard behavior (searches parents)
    load_dotenv()


@dataclass
class Settings:
    """
    Global defaults for streamdesk.

    Values are loaded from environment variables on initialization.
    Users can override these programmatically if needed:

        from streamdesk.config import settings
        settings.atr_period = 20
    """

    log_level: str = "INFO"
    atr_period: int = 14
    atr_ma_type: str = "SIMPLE"
    atr_value_floor: float = 0.0

    def __post_init__(self):
        """
        Refresh values from environment after load_dotenv has run.
        """
        self.log_level = os.getenv("LOG_LEVEL", self.log_level)
        self.atr_ma_type = os.getenv("ATR_MA_TYPE", self.atr_ma_type)
        self.atr_period = _env_number("ATR_PERIOD", self.atr_period, int)
        self.atr_value_floor = _env_number(
            "ATR_VALUE_FLOOR", self.atr_value_floor, float
        )

    def validate(self) -> None:
        """
        Validate the configured defaults.

        Raises:
            InvalidConfiguration: If any default is invalid
        """
        # Building one indicator runs the same checks callers would hit
        AverageTrueRange(
            period=self.atr_period,
            ma_type=self.atr_ma_type,
            value_floor=self.atr_value_floor,
        )


def _env_number(name: str, default, cast):
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return cast(raw)
    except ValueError:
        raise InvalidConfiguration(f"{name} must be a number, got {raw!r}")


def load_indicator_config(config_path: str | Path) -> dict:
    """
    Load indicator configuration from YAML file.

    Args:
        config_path: Path to YAML config file

    Returns:
        Dictionary containing configuration
    """
    config_file = Path(config_path)
    if not config_file.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        with open(config_file) as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise InvalidConfiguration(f"Invalid YAML in {config_path}: {e}")

    if config is None:
        raise InvalidConfiguration(f"Empty config file: {config_path}")
    if not isinstance(config, dict):
        raise InvalidConfiguration(f"Config root must be a mapping: {config_path}")

    return config


def build_indicator(cfg: dict[str, Any]) -> Indicator:
    """
    Build an indicator from a config mapping.

    Missing keys fall back to the global `settings` defaults.
    """
    kind = str(cfg.get("type", "atr")).strip().lower()
    if kind != "atr":
        raise InvalidConfiguration(f"Unknown indicator type: {cfg.get('type')!r}")

    return AverageTrueRange(
        period=cfg.get("period", settings.atr_period),
        ma_type=MovingAverageFactory.parse_type(
            cfg.get("ma_type", settings.atr_ma_type)
        ),
        use_previous=cfg.get("use_previous", True),
        value_floor=cfg.get("value_floor", settings.atr_value_floor),
    )


def build_hub(config: dict[str, Any]) -> IndicatorHub:
    """
    Build an IndicatorHub from a loaded config.

    Each entry of `config["indicators"]` needs `epic`, `period` and an
    `indicator` mapping accepted by build_indicator().
    """
    entries = config.get("indicators") or []
    if not isinstance(entries, list):
        raise InvalidConfiguration("'indicators' must be a list")

    hub = IndicatorHub()
    for i, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise InvalidConfiguration(f"indicators[{i}] must be a mapping")
        missing = [k for k in ("epic", "period") if k not in entry]
        if missing:
            raise InvalidConfiguration(
                f"indicators[{i}] missing required keys: {', '.join(missing)}"
            )
        hub.register(
            str(entry["epic"]),
            str(entry["period"]),
            build_indicator(entry.get("indicator") or {}),
        )

    return hub


# Global settings instance - loaded when module is imported
settings = Settings()
