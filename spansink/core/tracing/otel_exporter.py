"""OpenTelemetry SpanExporter that forwards into a span export adapter."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from opentelemetry.sdk.trace.export import SpanExporter, SpanExportResult

from .otel_converter import otel_span_to_finished_span

if TYPE_CHECKING:
    from opentelemetry.sdk.trace import ReadableSpan

    from .adapters.base import SpanExportAdapter

logger = logging.getLogger(__name__)


class OTelSpanExporter(SpanExporter):
    """
    Plugs a span export adapter into an OpenTelemetry TracerProvider.

    Usage:
        adapter = InMemorySpanAdapter()
        provider = TracerProvider()
        provider.add_span_processor(SimpleSpanProcessor(OTelSpanExporter(adapter)))
    """

    def __init__(self, adapter: "SpanExportAdapter") -> None:
        self._adapter = adapter

    @property
    def adapter(self) -> "SpanExportAdapter":
        return self._adapter

    def export(self, spans: Sequence["ReadableSpan"]) -> SpanExportResult:
        try:
            finished = [otel_span_to_finished_span(span) for span in spans]
        except ValueError as e:
            logger.error(f"Failed to convert OpenTelemetry spans: {e}")
            return SpanExportResult.FAILURE

        result = self._adapter.export_spans(finished)
        if not result.is_success:
            logger.debug(f"Adapter {self._adapter.name} returned {result.name} for {len(finished)} spans")
            return SpanExportResult.FAILURE
        return SpanExportResult.SUCCESS

    def shutdown(self) -> None:
        self._adapter.shutdown()

    def force_flush(self, timeout_millis: int = 30000) -> bool:
        return True
