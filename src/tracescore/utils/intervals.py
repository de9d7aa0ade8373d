# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Half-open interval arithmetic over integer microsecond timestamps.

All intervals are ``[start, end)``. Functions are pure and operate on plain
tuples and sorted sequences so they can back both the busy-interval and the
network-concurrency queries of the timeline model.

Usage:
    merged = merge_intervals([(0, 10), (5, 20), (20, 30), (40, 50)])
    # [(0, 30), (40, 50)]
"""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Iterable, Sequence


def merge_intervals(intervals: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    """Collapse possibly overlapping intervals into a sorted disjoint union.

    Standard interval merge: sort by start, extend the current interval while
    the next start is at or before its end, else start a new one. Adjacent
    intervals therefore merge.

    Args:
        intervals: (start, end) pairs in any order.

    Returns:
        Sorted, non-overlapping, non-adjacent (start, end) pairs.
    """
    merged: list[tuple[int, int]] = []
    for start, end in sorted(intervals):
        if merged and start <= merged[-1][1]:
            last_start, last_end = merged[-1]
            merged[-1] = (last_start, max(last_end, end))
        else:
            merged.append((start, end))
    return merged


def count_active_at(
    sorted_starts: Sequence[int], sorted_ends: Sequence[int], t: int
) -> int:
    """Count half-open intervals containing ``t``.

    Intervals may overlap; starts and ends are sorted independently. The
    count is the number of intervals started at or before ``t`` minus the
    number already ended at or before ``t``.
    """
    return bisect_right(sorted_starts, t) - bisect_right(sorted_ends, t)


def max_active_between(
    sorted_starts: Sequence[int],
    sorted_ends: Sequence[int],
    window_start: int,
    window_end: int,
) -> int:
    """Peak number of active intervals over ``[window_start, window_end)``.

    The active count is piecewise constant and only rises at an interval
    start, so it is enough to sample the window start and every interval
    start inside the window.
    """
    if window_end <= window_start:
        return 0
    peak = count_active_at(sorted_starts, sorted_ends, window_start)
    first = bisect_right(sorted_starts, window_start)
    last = bisect_left(sorted_starts, window_end)
    for start in sorted_starts[first:last]:
        peak = max(peak, count_active_at(sorted_starts, sorted_ends, start))
    return peak


__all__ = [
    "count_active_at",
    "max_active_between",
    "merge_intervals",
]
