"""Core types and data structures for spansink."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any

INVALID_TRACE_ID = "0" * 32
INVALID_SPAN_ID = "0" * 16

_TRACE_ID_RE = re.compile(r"[0-9a-f]{32}")
_SPAN_ID_RE = re.compile(r"[0-9a-f]{16}")


class SpanKind(Enum):
    """OpenTelemetry-compatible span kinds."""

    UNSPECIFIED = 0
    INTERNAL = 1
    SERVER = 2
    CLIENT = 3
    PRODUCER = 4
    CONSUMER = 5


class StatusCode(Enum):
    """Span status code."""

    UNSPECIFIED = 0
    OK = 1
    ERROR = 2


@dataclass(frozen=True)
class SpanStatus:
    """Span completion status."""

    code: StatusCode = StatusCode.UNSPECIFIED
    message: str = ""


@dataclass(frozen=True)
class FinishedSpan:
    """
    Immutable record of a completed span.

    Fields are validated on construction; a bad field raises ValueError
    naming the field. Exporters treat instances as opaque and hand them
    back unmodified.
    """

    # Identity
    trace_id: str
    span_id: str
    name: str

    # Classification
    kind: SpanKind = SpanKind.INTERNAL

    # Timing (nanoseconds since epoch)
    start_time_unix_nano: int = 0
    end_time_unix_nano: int = 0

    # Status
    status: SpanStatus = field(default_factory=SpanStatus)

    # Relationships and extra data
    parent_span_id: str = ""
    attributes: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        if not isinstance(self.trace_id, str) or not _TRACE_ID_RE.fullmatch(self.trace_id):
            raise ValueError(f"trace_id must be 32 lowercase hex characters, got {self.trace_id!r}")
        if not isinstance(self.span_id, str) or not _SPAN_ID_RE.fullmatch(self.span_id):
            raise ValueError(f"span_id must be 16 lowercase hex characters, got {self.span_id!r}")
        if self.parent_span_id and (
            not isinstance(self.parent_span_id, str) or not _SPAN_ID_RE.fullmatch(self.parent_span_id)
        ):
            raise ValueError(
                f"parent_span_id must be empty or 16 lowercase hex characters, got {self.parent_span_id!r}"
            )
        if not isinstance(self.name, str):
            raise ValueError(f"name must be a string, got {type(self.name).__name__}")
        if not isinstance(self.kind, SpanKind):
            raise ValueError(f"kind must be a SpanKind, got {self.kind!r}")
        if not isinstance(self.status, SpanStatus):
            raise ValueError(f"status must be a SpanStatus, got {self.status!r}")
        for attr in ("start_time_unix_nano", "end_time_unix_nano"):
            value = getattr(self, attr)
            if not isinstance(value, int) or isinstance(value, bool):
                raise ValueError(f"{attr} must be an int, got {value!r}")
        if self.start_time_unix_nano < 0:
            raise ValueError(f"start_time_unix_nano must be >= 0, got {self.start_time_unix_nano}")
        if self.end_time_unix_nano < self.start_time_unix_nano:
            raise ValueError(
                f"end_time_unix_nano ({self.end_time_unix_nano}) is before "
                f"start_time_unix_nano ({self.start_time_unix_nano})"
            )

        # Frozen dataclass: bypass __setattr__ to store a read-only copy
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))

    @property
    def duration_nanos(self) -> int:
        return self.end_time_unix_nano - self.start_time_unix_nano

    @property
    def is_root(self) -> bool:
        return not self.parent_span_id

    @property
    def has_valid_ids(self) -> bool:
        """True unless either id is the all-zero invalid id."""
        return self.trace_id != INVALID_TRACE_ID and self.span_id != INVALID_SPAN_ID
