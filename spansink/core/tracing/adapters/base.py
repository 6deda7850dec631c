"""Base interface shared by all span export adapters."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ...types import FinishedSpan


class ExportResultCode(Enum):
    """
    Outcome of a single export call.

    FAILED_RETRYABLE is part of the contract so adapters stay interchangeable;
    the in-memory adapter never produces it.
    """

    SUCCESS = 0
    FAILED_RETRYABLE = 1
    FAILED_NOT_RETRYABLE = 2

    @property
    def is_success(self) -> bool:
        return self is ExportResultCode.SUCCESS

    @property
    def is_retryable(self) -> bool:
        return self is ExportResultCode.FAILED_RETRYABLE


class SpanExportAdapter(ABC):
    """
    Destination for finished spans.

    Processors call export_spans once per span or batch and branch on the
    returned code; adapters signal failure through the code, not by raising.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Short identifier used in log messages."""

    @abstractmethod
    def export_spans(self, spans: Iterable["FinishedSpan"]) -> ExportResultCode:
        """Export a batch of spans."""

    @abstractmethod
    def shutdown(self) -> None:
        """Release the adapter. Must be safe to call more than once."""
