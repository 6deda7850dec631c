"""Conversion from OpenTelemetry SDK spans to FinishedSpan records."""

from __future__ import annotations

from typing import TYPE_CHECKING

from opentelemetry.trace import SpanKind as OTelSpanKind
from opentelemetry.trace import StatusCode as OTelStatusCode

from ..types import FinishedSpan, SpanKind, SpanStatus, StatusCode

if TYPE_CHECKING:
    from opentelemetry.sdk.trace import ReadableSpan
    from opentelemetry.trace import Status

_SPAN_KIND_MAP = {
    OTelSpanKind.INTERNAL: SpanKind.INTERNAL,
    OTelSpanKind.SERVER: SpanKind.SERVER,
    OTelSpanKind.CLIENT: SpanKind.CLIENT,
    OTelSpanKind.PRODUCER: SpanKind.PRODUCER,
    OTelSpanKind.CONSUMER: SpanKind.CONSUMER,
}

_STATUS_CODE_MAP = {
    OTelStatusCode.UNSET: StatusCode.UNSPECIFIED,
    OTelStatusCode.OK: StatusCode.OK,
    OTelStatusCode.ERROR: StatusCode.ERROR,
}


def format_trace_id(trace_id: int) -> str:
    """Format an OpenTelemetry trace ID as 32 lowercase hex characters."""
    return format(trace_id, "032x")


def format_span_id(span_id: int) -> str:
    """Format an OpenTelemetry span ID as 16 lowercase hex characters."""
    return format(span_id, "016x")


def otel_span_kind_to_span_kind(kind: OTelSpanKind | None) -> SpanKind:
    if kind is None:
        return SpanKind.UNSPECIFIED
    return _SPAN_KIND_MAP.get(kind, SpanKind.UNSPECIFIED)


def otel_status_to_span_status(status: "Status | None") -> SpanStatus:
    if status is None:
        return SpanStatus()
    return SpanStatus(
        code=_STATUS_CODE_MAP.get(status.status_code, StatusCode.UNSPECIFIED),
        message=status.description or "",
    )


def otel_span_to_finished_span(span: "ReadableSpan") -> FinishedSpan:
    """
    Convert an OpenTelemetry ReadableSpan into a FinishedSpan.

    A span without a context maps to the all-zero invalid ids. Missing
    timestamps fall back to 0 for the start and to the start for the end.
    """
    context = span.context
    trace_id = context.trace_id if context is not None else 0
    span_id = context.span_id if context is not None else 0

    parent_span_id = ""
    if span.parent is not None:
        parent_span_id = format_span_id(span.parent.span_id)

    start = span.start_time or 0
    end = span.end_time if span.end_time is not None else start

    return FinishedSpan(
        trace_id=format_trace_id(trace_id),
        span_id=format_span_id(span_id),
        name=span.name,
        kind=otel_span_kind_to_span_kind(span.kind),
        start_time_unix_nano=start,
        end_time_unix_nano=end,
        status=otel_status_to_span_status(span.status),
        parent_span_id=parent_span_id,
        attributes=dict(span.attributes or {}),
    )
