# streamdesk/log.py
"""
Logging setup for applications embedding streamdesk.

Library modules only create module loggers (`logging.getLogger(__name__)`);
installing handlers is left to the application, optionally via
configure_logging().
"""

import logging
import sys

from streamdesk.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str | None = None, force: bool = False) -> None:
    """
    Configure root logger with console output.

    Non-destructive by default: if the root logger already has handlers,
    the application owns logging and nothing is changed.

    Args:
        level: Logging level name; defaults to settings.log_level (LOG_LEVEL)
        force: If True, clear existing handlers and force this configuration
    """
    root_logger = logging.getLogger()

    if root_logger.hasHandlers() and not force:
        return

    root_logger.setLevel((level or settings.log_level).upper())

    if force:
        root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    root_logger.addHandler(handler)
