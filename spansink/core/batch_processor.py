"""Batch span processor for handing spans to adapters in groups."""

from __future__ import annotations

import logging
import math
import threading
from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .tracing.adapters.base import ExportResultCode

if TYPE_CHECKING:
    from .tracing.adapters.base import SpanExportAdapter
    from .types import FinishedSpan

logger = logging.getLogger(__name__)


@dataclass
class BatchSpanProcessorConfig:
    """Configuration for the batch span processor."""

    # Maximum queue size before spans are dropped
    max_queue_size: int = 2048
    # Maximum batch size per export
    max_export_batch_size: int = 512
    # Interval between scheduled exports (in seconds)
    scheduled_delay_seconds: float = 2.0
    # Maximum time to wait for the export thread on stop (in seconds)
    export_timeout_seconds: float = 30.0

    def __post_init__(self) -> None:
        if self.max_queue_size <= 0:
            raise ValueError(f"max_queue_size must be positive, got {self.max_queue_size}")
        if self.max_export_batch_size <= 0:
            raise ValueError(f"max_export_batch_size must be positive, got {self.max_export_batch_size}")
        if self.max_export_batch_size > self.max_queue_size:
            raise ValueError(
                f"max_export_batch_size ({self.max_export_batch_size}) must not exceed "
                f"max_queue_size ({self.max_queue_size})"
            )
        if not math.isfinite(self.scheduled_delay_seconds) or self.scheduled_delay_seconds < 0:
            raise ValueError(f"scheduled_delay_seconds must be finite and >= 0, got {self.scheduled_delay_seconds}")
        if not math.isfinite(self.export_timeout_seconds) or self.export_timeout_seconds < 0:
            raise ValueError(f"export_timeout_seconds must be finite and >= 0, got {self.export_timeout_seconds}")


class BatchSpanProcessor:
    """
    Batches spans and exports them periodically or when batch size is reached.

    Follows OpenTelemetry's BatchSpanProcessor:
    - Queues spans in memory
    - Exports in batches at regular intervals or when max batch size is reached
    - Drops spans if queue is full
    - Flushes the queue on stop

    An adapter that answers FAILED_NOT_RETRYABLE gets no further batches.
    """

    def __init__(
        self,
        adapters: Iterable["SpanExportAdapter"],
        config: BatchSpanProcessorConfig | None = None,
    ) -> None:
        """
        Initialize the batch processor.

        Args:
            adapters: Adapters to export spans to
            config: Optional configuration (uses defaults if not provided)
        """
        self._all_adapters = list(adapters)
        self._adapters = list(self._all_adapters)
        self._config = config or BatchSpanProcessorConfig()
        self._queue: deque[FinishedSpan] = deque()
        self._lock = threading.Lock()
        # Serializes export cycles so batches reach adapters in queue order
        self._export_lock = threading.Lock()
        self._shutdown_event = threading.Event()
        self._wakeup = threading.Event()
        self._export_thread: threading.Thread | None = None
        self._started = False
        self._is_shutdown = False
        self._dropped_spans = 0

    def start(self) -> None:
        """Start the background export thread."""
        with self._lock:
            if self._started or self._is_shutdown:
                return
            self._started = True

        self._shutdown_event.clear()
        self._export_thread = threading.Thread(
            target=self._export_loop,
            daemon=True,
            name="spansink-batch-exporter",
        )
        self._export_thread.start()
        logger.debug("BatchSpanProcessor started")

    def stop(self, timeout: float | None = None) -> None:
        """
        Stop the export thread and export remaining spans.

        Args:
            timeout: Maximum time to wait for the export thread
        """
        if self._started:
            self._shutdown_event.set()
            self._wakeup.set()

            if self._export_thread is not None:
                self._export_thread.join(
                    timeout=timeout if timeout is not None else self._config.export_timeout_seconds
                )
                self._export_thread = None

            self._started = False

        # Final export of remaining spans
        self.force_flush()
        logger.debug(f"BatchSpanProcessor stopped. Dropped {self._dropped_spans} spans total.")

    def shutdown(self, timeout: float | None = None) -> None:
        """Stop the processor, then shut down every adapter. Idempotent."""
        with self._lock:
            if self._is_shutdown:
                return
            self._is_shutdown = True

        self.stop(timeout=timeout)

        for adapter in self._all_adapters:
            try:
                adapter.shutdown()
            except Exception as e:
                logger.error(f"Failed to shut down adapter {adapter.name}: {e}")

    def add_span(self, span: "FinishedSpan") -> bool:
        """
        Add a span to the queue for export.

        Args:
            span: The span to add

        Returns:
            True if span was added, False if it was dropped
        """
        with self._lock:
            if self._is_shutdown:
                self._dropped_spans += 1
                logger.debug("BatchSpanProcessor is shut down, dropping span")
                return False

            if len(self._queue) >= self._config.max_queue_size:
                self._dropped_spans += 1
                logger.warning(
                    f"Span queue full ({self._config.max_queue_size}), dropping span. "
                    f"Total dropped: {self._dropped_spans}"
                )
                return False

            self._queue.append(span)

            if len(self._queue) >= self._config.max_export_batch_size:
                self._wakeup.set()

            return True

    def force_flush(self) -> None:
        """Export all queued spans now, in batches."""
        while True:
            with self._lock:
                if not self._queue:
                    break

            self._export_batch()

    def _export_loop(self) -> None:
        """Background thread that periodically exports spans."""
        while not self._shutdown_event.is_set():
            # Wait for scheduled delay, a full batch, or shutdown
            self._wakeup.wait(timeout=self._config.scheduled_delay_seconds)
            self._wakeup.clear()

            if self._shutdown_event.is_set():
                break

            self._export_batch()

            # Drain a backlog of full batches without waiting for the next tick
            while not self._shutdown_event.is_set() and self.queue_size >= self._config.max_export_batch_size:
                self._export_batch()

    def _export_batch(self) -> None:
        """Export a batch of spans from the queue."""
        with self._export_lock:
            batch: list[FinishedSpan] = []
            with self._lock:
                while self._queue and len(batch) < self._config.max_export_batch_size:
                    batch.append(self._queue.popleft())

            if not batch:
                return

            for adapter in list(self._adapters):
                try:
                    result = adapter.export_spans(batch)
                except Exception as e:
                    logger.error(f"Failed to export batch via {adapter.name}: {e}")
                    continue

                if result is ExportResultCode.FAILED_NOT_RETRYABLE:
                    logger.warning(
                        f"Adapter {adapter.name} rejected export permanently; removing it from the processor"
                    )
                    self._adapters.remove(adapter)
                elif not result.is_success:
                    logger.warning(f"Adapter {adapter.name} failed to export {len(batch)} spans")
                else:
                    logger.debug(f"Exported {len(batch)} spans via {adapter.name}")

    @property
    def adapters(self) -> list["SpanExportAdapter"]:
        """Adapters still receiving batches."""
        return list(self._adapters)

    @property
    def queue_size(self) -> int:
        """Get the current queue size."""
        with self._lock:
            return len(self._queue)

    @property
    def dropped_span_count(self) -> int:
        """Get the number of dropped spans."""
        return self._dropped_spans
