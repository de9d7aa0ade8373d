"""Unit tests for half-open interval helpers."""

from __future__ import annotations

import pytest

from tracescore.utils.intervals import (
    count_active_at,
    max_active_between,
    merge_intervals,
)


@pytest.mark.unit
class TestMergeIntervals:
    """Tests for merge_intervals."""

    @pytest.mark.parametrize(
        ("intervals", "expected"),
        [
            ([], []),
            ([(0, 10)], [(0, 10)]),
            ([(0, 10), (5, 20), (20, 30), (40, 50)], [(0, 30), (40, 50)]),
            ([(40, 50), (0, 10), (2, 3)], [(0, 10), (40, 50)]),
            ([(0, 100), (10, 20), (30, 40)], [(0, 100)]),
            ([(5, 5), (5, 6)], [(5, 6)]),
        ],
    )
    def test_merge(
        self, intervals: list[tuple[int, int]], expected: list[tuple[int, int]]
    ) -> None:
        assert merge_intervals(intervals) == expected

    def test_accepts_any_iterable(self) -> None:
        assert merge_intervals((s, s + 1) for s in (3, 1, 2)) == [(1, 4)]


@pytest.mark.unit
class TestActiveCounts:
    """Tests for count_active_at and max_active_between."""

    STARTS = (0, 10, 10, 30)
    ENDS = (20, 25, 40, 50)

    @pytest.mark.parametrize(
        ("t", "expected"),
        [(-1, 0), (0, 1), (10, 3), (20, 2), (25, 1), (30, 2), (50, 0)],
    )
    def test_count_active_at(self, t: int, expected: int) -> None:
        assert count_active_at(self.STARTS, self.ENDS, t) == expected

    @pytest.mark.parametrize(
        ("window", "expected"),
        [((0, 10), 1), ((0, 11), 3), ((20, 30), 2), ((26, 30), 1), ((50, 60), 0)],
    )
    def test_max_active_between(
        self, window: tuple[int, int], expected: int
    ) -> None:
        assert max_active_between(self.STARTS, self.ENDS, *window) == expected

    def test_empty_window(self) -> None:
        assert max_active_between(self.STARTS, self.ENDS, 10, 10) == 0
