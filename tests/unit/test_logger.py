"""Tests for logger.py - package logger configuration."""

from __future__ import annotations

import logging

import pytest

from spansink.core.logger import (
    PACKAGE_LOGGER_NAME,
    LogLevel,
    configure_logger,
    get_log_level,
    parse_log_level,
    set_log_level,
)


@pytest.mark.usefixtures("restore_log_level")
class TestLogLevel:
    """Tests for level parsing and setting."""

    def test_parse_is_case_insensitive(self):
        assert parse_log_level("INFO") == LogLevel.INFO
        assert parse_log_level(" debug ") == LogLevel.DEBUG
        assert parse_log_level(LogLevel.ERROR) == LogLevel.ERROR

    def test_parse_rejects_unknown(self):
        with pytest.raises(ValueError):
            parse_log_level("verbose")

    def test_set_and_get(self):
        set_log_level("info")

        assert get_log_level() == LogLevel.INFO
        assert logging.getLogger(PACKAGE_LOGGER_NAME).level == logging.INFO

    def test_silent_suppresses_critical(self):
        set_log_level(LogLevel.SILENT)

        assert not logging.getLogger(PACKAGE_LOGGER_NAME).isEnabledFor(logging.CRITICAL)


@pytest.mark.usefixtures("restore_log_level")
class TestConfigureLogger:
    """Tests for configure_logger."""

    def test_installs_single_handler(self):
        """Should replace rather than stack handlers."""
        package_logger = configure_logger(LogLevel.DEBUG)
        count = len(package_logger.handlers)

        configure_logger(LogLevel.DEBUG, prefix="Other")

        assert len(package_logger.handlers) == count
        assert get_log_level() == LogLevel.DEBUG

    def test_uses_prefix_in_format(self):
        package_logger = configure_logger("warn", prefix="Sink")

        record = logging.LogRecord(
            name="spansink.core.config",
            level=logging.WARNING,
            pathname=__file__,
            lineno=1,
            msg="hello",
            args=None,
            exc_info=None,
        )
        formatted = package_logger.handlers[-1].format(record)

        assert formatted == "[Sink] WARNING spansink.core.config: hello"
