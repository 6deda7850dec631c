"""Logging setup for the spansink package logger."""

from __future__ import annotations

import logging
from enum import Enum

PACKAGE_LOGGER_NAME = "spansink"


class LogLevel(str, Enum):
    """Log levels accepted by configure_logger and set_log_level."""

    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"
    SILENT = "silent"


_LEVEL_MAP = {
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARN: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
    # Above CRITICAL so nothing gets through
    LogLevel.SILENT: logging.CRITICAL + 10,
}

_current_level = LogLevel.WARN
_handler: logging.Handler | None = None


def parse_log_level(value: str | LogLevel) -> LogLevel:
    """Parse a level name (case-insensitive). Raises ValueError on unknown names."""
    if isinstance(value, LogLevel):
        return value
    normalized = value.strip().lower()
    if normalized == "warning":
        normalized = "warn"
    return LogLevel(normalized)


def configure_logger(log_level: str | LogLevel = LogLevel.WARN, prefix: str = "SpanSink") -> logging.Logger:
    """
    Install a single stream handler on the package logger.

    Calling this again replaces the previous handler.
    """
    global _handler

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    if _handler is not None:
        package_logger.removeHandler(_handler)

    _handler = logging.StreamHandler()
    _handler.setFormatter(logging.Formatter(f"[{prefix}] %(levelname)s %(name)s: %(message)s"))
    package_logger.addHandler(_handler)

    set_log_level(log_level)
    return package_logger


def set_log_level(log_level: str | LogLevel) -> None:
    global _current_level

    level = parse_log_level(log_level)
    logging.getLogger(PACKAGE_LOGGER_NAME).setLevel(_LEVEL_MAP[level])
    _current_level = level


def get_log_level() -> LogLevel:
    return _current_level
