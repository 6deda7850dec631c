"""Tracing infrastructure for spansink."""

from .adapters import ExportResultCode, InMemorySpanAdapter, SpanExportAdapter
from .otel_converter import (
    format_span_id,
    format_trace_id,
    otel_span_kind_to_span_kind,
    otel_span_to_finished_span,
    otel_status_to_span_status,
)
from .otel_exporter import OTelSpanExporter

__all__ = [
    # Adapters
    "SpanExportAdapter",
    "ExportResultCode",
    "InMemorySpanAdapter",
    # OpenTelemetry integration
    "OTelSpanExporter",
    # Converters
    "otel_span_to_finished_span",
    "otel_span_kind_to_span_kind",
    "otel_status_to_span_status",
    "format_trace_id",
    "format_span_id",
]
