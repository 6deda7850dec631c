"""In-memory sink for finished trace spans, for testing telemetry pipelines."""

from .core import (
    INVALID_SPAN_ID,
    INVALID_TRACE_ID,
    BatchSpanProcessor,
    BatchSpanProcessorConfig,
    FinishedSpan,
    LogLevel,
    SimpleSpanProcessor,
    SpanKind,
    SpanSinkConfig,
    SpanStatus,
    StatusCode,
    configure_from_env,
    configure_logger,
    get_log_level,
    load_config,
    set_log_level,
)
from .core.tracing import (
    ExportResultCode,
    InMemorySpanAdapter,
    OTelSpanExporter,
    SpanExportAdapter,
    otel_span_to_finished_span,
)

__version__ = "0.1.0"

__all__ = [
    # Types
    "FinishedSpan",
    "SpanKind",
    "SpanStatus",
    "StatusCode",
    "INVALID_TRACE_ID",
    "INVALID_SPAN_ID",
    # Adapters
    "SpanExportAdapter",
    "ExportResultCode",
    "InMemorySpanAdapter",
    # Processors
    "SimpleSpanProcessor",
    "BatchSpanProcessor",
    "BatchSpanProcessorConfig",
    # OpenTelemetry
    "OTelSpanExporter",
    "otel_span_to_finished_span",
    # Config
    "SpanSinkConfig",
    "load_config",
    "configure_from_env",
    # Logger
    "LogLevel",
    "configure_logger",
    "set_log_level",
    "get_log_level",
]
