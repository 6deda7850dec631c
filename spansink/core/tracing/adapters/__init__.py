"""Span export adapters for spansink."""

from .base import ExportResultCode, SpanExportAdapter
from .memory import InMemorySpanAdapter

__all__ = [
    # Base
    "SpanExportAdapter",
    "ExportResultCode",
    # Adapters
    "InMemorySpanAdapter",
]
