"""Core module for spansink."""

from .types import (
    INVALID_SPAN_ID,
    INVALID_TRACE_ID,
    FinishedSpan,
    SpanKind,
    SpanStatus,
    StatusCode,
)
from .batch_processor import BatchSpanProcessor, BatchSpanProcessorConfig
from .span_processor import SimpleSpanProcessor
from .config import SpanSinkConfig, configure_from_env, load_config
from .logger import LogLevel, configure_logger, get_log_level, set_log_level

__all__ = [
    # Types
    "FinishedSpan",
    "SpanKind",
    "SpanStatus",
    "StatusCode",
    "INVALID_TRACE_ID",
    "INVALID_SPAN_ID",
    # Processors
    "SimpleSpanProcessor",
    "BatchSpanProcessor",
    "BatchSpanProcessorConfig",
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
