# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Timeline model for Timeline Model Compute.

The timeline is derived once per parsed trace and is read-only afterwards,
so a single instance can be shared by every metric and worker thread that
needs it.
"""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterator
from operator import attrgetter

from pydantic import BaseModel, Field

from tracescore.constants import MICROS_PER_MILLISECOND
from tracescore.nodes.node_timeline_model_compute.models.model_network_request_interval import (
    ModelNetworkRequestInterval,
)
from tracescore.nodes.node_timeline_model_compute.models.model_task import ModelTask
from tracescore.nodes.node_timeline_model_compute.models.model_thread_timeline import (
    ModelThreadTimeline,
)
from tracescore.nodes.node_timeline_model_compute.models.model_time_interval import (
    ModelTimeInterval,
)
from tracescore.nodes.node_trace_event_parser_compute.models import ModelTraceAnomaly
from tracescore.utils.intervals import count_active_at, max_active_between

_START = attrgetter("start_micros")


class ModelTimelineModel(BaseModel):
    """Structured execution timeline of one trace.

    Attributes:
        tasks: Task arena; tasks reference each other by index.
        threads: One timeline per observed thread, sorted by (pid, tid).
        main_thread_key: (pid, tid) of the main thread.
        network_requests: Request intervals sorted by (start, end, id).
        request_start_micros: Sorted request starts (concurrency queries).
        request_end_micros: Sorted request ends (concurrency queries).
    """

    tasks: tuple[ModelTask, ...] = Field(default=())
    threads: tuple[ModelThreadTimeline, ...] = Field(default=())
    main_thread_key: tuple[int, int] = Field(...)
    network_requests: tuple[ModelNetworkRequestInterval, ...] = Field(default=())
    request_start_micros: tuple[int, ...] = Field(default=())
    request_end_micros: tuple[int, ...] = Field(default=())
    trace_start_micros: int = Field(default=0)
    trace_end_micros: int = Field(default=0)
    navigation_start_micros: int | None = Field(
        default=None, description="navigationStart on the main frame, if present"
    )
    dom_content_loaded_micros: int | None = Field(
        default=None, description="domContentLoadedEventEnd on the main frame"
    )
    anomalies: tuple[ModelTraceAnomaly, ...] = Field(
        default=(), description="Anomalies found while building the timeline"
    )

    model_config = {"frozen": True, "extra": "forbid"}

    # -- threads and tasks ---------------------------------------------------

    def thread(self, thread_key: tuple[int, int]) -> ModelThreadTimeline | None:
        for timeline in self.threads:
            if timeline.thread_key == thread_key:
                return timeline
        return None

    @property
    def main_thread(self) -> ModelThreadTimeline:
        timeline = self.thread(self.main_thread_key)
        if timeline is None:
            # build_timeline_model always creates the main thread entry
            return ModelThreadTimeline(
                process_id=self.main_thread_key[0],
                thread_id=self.main_thread_key[1],
            )
        return timeline

    def top_level_tasks(self, thread_key: tuple[int, int]) -> list[ModelTask]:
        timeline = self.thread(thread_key)
        if timeline is None:
            return []
        return [self.tasks[i] for i in timeline.top_level_task_indices]

    def children_of(self, task: ModelTask) -> list[ModelTask]:
        return [self.tasks[i] for i in task.child_indices]

    # -- CPU busy queries ----------------------------------------------------

    def busy_interval_at(self, t: int) -> ModelTimeInterval | None:
        """Main-thread busy interval containing ``t``, if any."""
        return self.main_thread.busy_interval_at(t)

    def is_busy_at(self, t: int) -> bool:
        """True if the main thread is running a task at ``t``."""
        return self.main_thread.is_busy_at(t)

    def long_tasks_after(
        self, t: int, threshold_ms: float
    ) -> Iterator[ModelTimeInterval]:
        """Lazily yield main-thread busy intervals longer than ``threshold_ms``.

        Only intervals starting at or after ``t`` are produced, in timestamp
        order.
        """
        threshold_micros = threshold_ms * MICROS_PER_MILLISECOND
        busy = self.main_thread.busy_intervals
        for i in range(bisect_left(busy, t, key=_START), len(busy)):
            if busy[i].duration_micros > threshold_micros:
                yield busy[i]

    # -- network queries -----------------------------------------------------

    def concurrent_requests_at(self, t: int) -> int:
        """Number of network requests in flight at ``t``."""
        return count_active_at(self.request_start_micros, self.request_end_micros, t)

    def max_concurrent_requests_between(self, start: int, end: int) -> int:
        """Peak number of requests in flight over ``[start, end)``."""
        return max_active_between(
            self.request_start_micros, self.request_end_micros, start, end
        )


__all__ = ["ModelTimelineModel"]
