"""Pytest configuration and fixtures for spansink tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from opentelemetry.sdk.trace import Tracer

    from spansink.core.tracing.adapters import InMemorySpanAdapter


@pytest.fixture
def in_memory_adapter() -> InMemorySpanAdapter:
    """Create a fresh InMemorySpanAdapter for testing."""
    from spansink.core.tracing.adapters import InMemorySpanAdapter

    return InMemorySpanAdapter()


@pytest.fixture
def otel_tracer(in_memory_adapter: InMemorySpanAdapter) -> Generator[Tracer, None, None]:
    """A real OpenTelemetry tracer whose finished spans land in in_memory_adapter."""
    from opentelemetry.sdk.trace import TracerProvider
    from opentelemetry.sdk.trace.export import SimpleSpanProcessor

    from spansink.core.tracing import OTelSpanExporter

    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(OTelSpanExporter(in_memory_adapter)))
    yield provider.get_tracer("spansink-tests")
    provider.shutdown()


@pytest.fixture
def restore_log_level() -> Generator[None, None, None]:
    """Save and restore the package logger's level and handlers."""
    from spansink.core import logger as logger_module

    package_logger = logging.getLogger(logger_module.PACKAGE_LOGGER_NAME)
    level = package_logger.level
    handlers = list(package_logger.handlers)
    current = logger_module._current_level
    installed = logger_module._handler
    yield
    package_logger.setLevel(level)
    package_logger.handlers[:] = handlers
    logger_module._current_level = current
    logger_module._handler = installed
