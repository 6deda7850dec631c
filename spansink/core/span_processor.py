"""Synchronous span processor that exports each span as soon as it ends."""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from .tracing.adapters.base import ExportResultCode

if TYPE_CHECKING:
    from .tracing.adapters.base import SpanExportAdapter
    from .types import FinishedSpan

logger = logging.getLogger(__name__)


class SimpleSpanProcessor:
    """
    Hands every finished span to one adapter as a single-element batch.

    Once the adapter answers FAILED_NOT_RETRYABLE the processor stops
    forwarding and drops all later spans.
    """

    def __init__(self, adapter: "SpanExportAdapter") -> None:
        self._adapter = adapter
        self._stopped = False
        self._shutdown_done = False
        self._lock = threading.Lock()

    @property
    def is_stopped(self) -> bool:
        return self._stopped

    def on_end(self, span: "FinishedSpan") -> bool:
        """
        Export a finished span.

        Returns:
            True if the adapter accepted the span, False otherwise
        """
        if self._stopped:
            return False

        try:
            result = self._adapter.export_spans([span])
        except Exception as e:
            logger.error(f"Failed to export span '{span.name}' via {self._adapter.name}: {e}")
            return False

        if result is ExportResultCode.FAILED_NOT_RETRYABLE:
            with self._lock:
                if not self._stopped:
                    self._stopped = True
                    logger.warning(
                        f"Adapter {self._adapter.name} rejected export permanently; "
                        "dropping all further spans"
                    )
            return False

        return result.is_success

    def force_flush(self) -> bool:
        return True

    def shutdown(self) -> None:
        """Stop forwarding and shut the adapter down. Idempotent."""
        with self._lock:
            if self._shutdown_done:
                return
            self._shutdown_done = True
            self._stopped = True
        self._adapter.shutdown()
