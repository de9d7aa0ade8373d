"""Per-thread timeline model for Timeline Model Compute."""

from __future__ import annotations

from bisect import bisect_right
from operator import attrgetter

from pydantic import BaseModel, Field

from tracescore.nodes.node_timeline_model_compute.models.model_time_interval import (
    ModelTimeInterval,
)

_START = attrgetter("start_micros")


class ModelThreadTimeline(BaseModel):
    """Top-level tasks and merged busy intervals of one thread."""

    process_id: int = Field(default=0)
    thread_id: int = Field(default=0)
    top_level_task_indices: tuple[int, ...] = Field(
        default=(), description="Arena indices of top-level tasks, in time order"
    )
    busy_intervals: tuple[ModelTimeInterval, ...] = Field(
        default=(), description="Disjoint union of all task spans, sorted"
    )

    model_config = {"frozen": True, "extra": "forbid"}

    @property
    def thread_key(self) -> tuple[int, int]:
        return (self.process_id, self.thread_id)

    def busy_interval_at(self, t: int) -> ModelTimeInterval | None:
        """Return the busy interval containing ``t`` (O(log n))."""
        index = bisect_right(self.busy_intervals, t, key=_START) - 1
        if index >= 0 and self.busy_intervals[index].contains(t):
            return self.busy_intervals[index]
        return None

    def is_busy_at(self, t: int) -> bool:
        return self.busy_interval_at(t) is not None


__all__ = ["ModelThreadTimeline"]
