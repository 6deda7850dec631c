"""Test utilities for spansink."""

from .test_helpers import create_basic_span, create_test_span, span_names

__all__ = [
    "create_test_span",
    "create_basic_span",
    "span_names",
]
