"""Logging setup for the ``intcalc`` logger tree.

Modules log through ``get_logger(<module>)``. Calculator faults are logged
with an ``error_code`` extra, which the formatter appends to the line.
Defaults for level and log file come from ``config`` (``INTCALC_LOG_LEVEL``,
``INTCALC_LOG_FILE``).
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime

from . import config

LOGGER_NAME = "intcalc"


class StructuredFormatter(logging.Formatter):
    """``<timestamp> [LEVEL] intcalc.<module>: message (ERROR_CODE)``."""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).isoformat(timespec="milliseconds")
        line = f"{timestamp} [{record.levelname}] {record.name}: {record.getMessage()}"
        error_code = getattr(record, "error_code", None)
        if error_code:
            line = f"{line} ({error_code})"
        return line


def _resolve_level(level: str | None) -> int:
    """Map a level name to its number, falling back to WARNING for unknown names."""
    value = logging.getLevelName((level or config.LOG_LEVEL).upper())
    return value if isinstance(value, int) else logging.WARNING


def setup_logging(level: str | None = None, log_file: str | None = None) -> logging.Logger:
    """Configure the ``intcalc`` logger.

    Args:
        level: Level name; defaults to ``config.LOG_LEVEL``
        log_file: Extra file to log to; defaults to ``config.LOG_FILE``

    Returns:
        The configured ``intcalc`` logger

    Calling it again replaces the handlers installed by the previous call.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(_resolve_level(level))

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    log_file = log_file or config.LOG_FILE
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(StructuredFormatter())
        logger.addHandler(handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Return the ``intcalc.<name>`` child logger."""
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
