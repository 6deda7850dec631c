"""Common test utilities for spansink tests."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from spansink.core.types import FinishedSpan


def create_test_span(
    trace_id: str | None = None,
    span_id: str | None = None,
    parent_span_id: str = "",
    name: str = "test-span",
    start_time_unix_nano: int = 100_000_000_100,
    end_time_unix_nano: int = 200_000_000_200,
    attributes: dict[str, Any] | None = None,
) -> FinishedSpan:
    """
    Create a minimal finished span for unit tests.

    Args:
        trace_id: 32-character hex string (default: 'a' * 32)
        span_id: 16-character hex string (default: 'b' * 16)
        parent_span_id: Parent span ID (default: empty string)
        name: Span name
        start_time_unix_nano: Start timestamp
        end_time_unix_nano: End timestamp
        attributes: Span attributes

    Returns:
        FinishedSpan instance for testing
    """
    from spansink.core.types import FinishedSpan, SpanKind, SpanStatus, StatusCode

    return FinishedSpan(
        trace_id=trace_id or "a" * 32,
        span_id=span_id or "b" * 16,
        parent_span_id=parent_span_id,
        name=name,
        kind=SpanKind.SERVER,
        start_time_unix_nano=start_time_unix_nano,
        end_time_unix_nano=end_time_unix_nano,
        status=SpanStatus(code=StatusCode.OK),
        attributes=attributes or {},
    )


def create_basic_span() -> FinishedSpan:
    """Span with the all-zero invalid ids, as produced outside of any trace."""
    from spansink.core.types import INVALID_SPAN_ID, INVALID_TRACE_ID

    return create_test_span(trace_id=INVALID_TRACE_ID, span_id=INVALID_SPAN_ID, name="span")


def span_names(spans: list[FinishedSpan]) -> list[str]:
    return [span.name for span in spans]
