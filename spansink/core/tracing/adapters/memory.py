"""In-memory span adapter for testing and development."""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable
from typing import TYPE_CHECKING, override

from .base import ExportResultCode, SpanExportAdapter

if TYPE_CHECKING:
    from ...types import FinishedSpan, SpanKind

logger = logging.getLogger(__name__)


class InMemorySpanAdapter(SpanExportAdapter):
    """
    Stores finished spans in memory - useful for testing and development.

    Spans are kept in arrival order until reset() or shutdown(). Once shut
    down the adapter stays empty and rejects every export with
    FAILED_NOT_RETRYABLE; reset() cannot bring it back.

    All operations hold a single lock, so a snapshot never shows part of a
    batch and no export lands after shutdown has started.
    """

    def __init__(self) -> None:
        self._spans: list[FinishedSpan] = []
        self._is_shutdown = False
        self._lock = threading.Lock()

    @classmethod
    def create(cls) -> InMemorySpanAdapter:
        return cls()

    def __repr__(self) -> str:
        with self._lock:
            return f"InMemorySpanAdapter(spans={len(self._spans)}, shutdown={self._is_shutdown})"

    def __len__(self) -> int:
        with self._lock:
            return len(self._spans)

    @property
    @override
    def name(self) -> str:
        return "in-memory"

    @property
    def is_shutdown(self) -> bool:
        with self._lock:
            return self._is_shutdown

    @override
    def export_spans(self, spans: Iterable["FinishedSpan"]) -> ExportResultCode:
        """Append the batch after all previously stored spans."""
        # Materialize before taking the lock so a lazy iterable cannot
        # leave a partial batch behind.
        try:
            batch = list(spans)
        except TypeError:
            # Not iterable (e.g. None): treated as an empty batch
            logger.debug("Export called with a non-iterable batch %r; treating it as empty", spans)
            batch = []
        with self._lock:
            if self._is_shutdown:
                logger.debug("Rejected export of %d spans: adapter is shut down", len(batch))
                return ExportResultCode.FAILED_NOT_RETRYABLE
            self._spans.extend(batch)
        return ExportResultCode.SUCCESS

    export = export_spans

    def get_finished_spans(self) -> list["FinishedSpan"]:
        """Get a copy of all stored spans in arrival order."""
        with self._lock:
            return list(self._spans)

    snapshot = get_finished_spans

    def get_spans_by_name(self, name: str) -> list["FinishedSpan"]:
        """Get spans with exactly this name."""
        return [span for span in self.get_finished_spans() if span.name == name]

    def get_spans_by_kind(self, kind: "SpanKind") -> list["FinishedSpan"]:
        """Get spans of a specific kind."""
        return [span for span in self.get_finished_spans() if span.kind == kind]

    def reset(self) -> None:
        """Drop all stored spans. Does nothing once shut down."""
        with self._lock:
            if self._is_shutdown:
                return
            self._spans.clear()

    clear = reset

    @override
    def shutdown(self) -> None:
        """Shut down permanently, discarding stored spans."""
        with self._lock:
            if not self._is_shutdown:
                logger.debug("Shutting down; discarding %d stored spans", len(self._spans))
            self._is_shutdown = True
            self._spans.clear()


__all__ = ["InMemorySpanAdapter", "ExportResultCode"]
