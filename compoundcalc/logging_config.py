"""
Logging configuration for compoundcalc.

Library modules only create loggers (logging.getLogger(__name__)); they never
attach handlers. Applications, such as the CLI, call setup_logging() once.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone

__all__ = ["JSONFormatter", "setup_logging"]

ROOT_LOGGER = "compoundcalc"
TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class JSONFormatter(logging.Formatter):
    """One JSON object per record, for machine-readable logs."""

    def format(self, record):
        entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def setup_logging(level: str = "WARNING", json_format: bool = False) -> logging.Logger:
    """
    Configure the package logger.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR)
        json_format: Emit JSON lines instead of plain text

    Returns:
        The configured "compoundcalc" logger
    """
    logger = logging.getLogger(ROOT_LOGGER)

    # Replace handlers so repeated calls do not duplicate output
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter() if json_format else logging.Formatter(TEXT_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper()))
    logger.propagate = False
    return logger
