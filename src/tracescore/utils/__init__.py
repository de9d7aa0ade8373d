"""Utility helpers for TraceScore."""

from tracescore.utils.intervals import (
    count_active_at,
    max_active_between,
    merge_intervals,
)

__all__ = [
    "count_active_at",
    "max_active_between",
    "merge_intervals",
]
