"""Logging configuration for the root finder.

The library is silent by default (NullHandler on the ``brent`` logger).
Enable output explicitly:

    from brent.logging_config import enable_console_logging
    enable_console_logging(level="DEBUG")   # one line per iteration
"""

from __future__ import annotations

import logging
from typing import Literal

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOGGER_NAME = "brent"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


def _get_level(level: str | int) -> int:
    """Convert a level string or int to a logging level constant."""
    if isinstance(level, int):
        return level
    return getattr(logging, level.upper(), logging.INFO)


def _get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def enable_console_logging(
    level: LogLevel | int = "INFO",
    format: str = DEFAULT_FORMAT,
    date_format: str = DEFAULT_DATE_FORMAT,
) -> logging.StreamHandler:
    """Attach a stderr handler to the ``brent`` logger and return it."""
    logger = _get_logger()
    logger.setLevel(_get_level(level))

    handler = logging.StreamHandler()
    handler.setLevel(_get_level(level))
    handler.setFormatter(logging.Formatter(format, date_format))

    logger.addHandler(handler)
    return handler


def set_level(level: LogLevel | int) -> None:
    _get_logger().setLevel(_get_level(level))


def disable_logging() -> None:
    """Remove all handlers except the NullHandler and silence the logger."""
    logger = _get_logger()
    for handler in logger.handlers[:]:
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(logging.CRITICAL + 1)
