# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Pure task-tree and busy-interval construction for Timeline Model Compute.

Task spans from the parser are nested per thread with an explicit stack and
stored in a flat arena; parents and children refer to each other by index.
Iteration order never depends on dict or set ordering, so building twice
from the same trace yields identical trees.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from tracescore.enums import EnumTraceAnomalyKind
from tracescore.nodes.node_timeline_model_compute.models import (
    ModelTask,
    ModelTimeInterval,
)
from tracescore.nodes.node_trace_event_parser_compute.models import (
    ModelTaskSpan,
    ModelTraceAnomaly,
)
from tracescore.utils.intervals import merge_intervals

logger = logging.getLogger(__name__)


@dataclass
class _TaskDraft:
    """Mutable task record used while the arena is being filled."""

    span: ModelTaskSpan
    depth: int
    parent_index: int | None
    child_indices: list[int] = field(default_factory=list)


@dataclass
class TaskTreeResult:
    """Result of build_task_trees."""

    tasks: list[ModelTask]
    top_level: dict[tuple[int, int], list[int]]
    anomalies: list[ModelTraceAnomaly]


def group_spans_by_thread(
    spans: Sequence[ModelTaskSpan],
) -> dict[tuple[int, int], list[ModelTaskSpan]]:
    """Group spans by (pid, tid); keys are inserted in sorted order."""
    grouped: dict[tuple[int, int], list[ModelTaskSpan]] = {}
    for span in sorted(spans, key=lambda s: (s.thread_key, s.index)):
        grouped.setdefault(span.thread_key, []).append(span)
    return grouped


def build_task_trees(
    spans: Sequence[ModelTaskSpan],
    *,
    correlation_id: str | None = None,
) -> TaskTreeResult:
    """Nest task spans into one tree per thread.

    Within a thread, spans are visited by ascending start, then descending
    end (enclosing spans first), then formation order. A span that starts
    inside an open task but ends after it cannot be nested; it is left out
    of the tree and recorded as an ``overlapping_task`` anomaly.

    Args:
        spans: Task spans from the parsed trace.
        correlation_id: Correlation ID for tracing.

    Returns:
        TaskTreeResult with the task arena, top-level indices per thread and
        any anomalies.
    """
    drafts: list[_TaskDraft] = []
    top_level: dict[tuple[int, int], list[int]] = {}
    anomalies: list[ModelTraceAnomaly] = []

    for thread_key, thread_spans in group_spans_by_thread(spans).items():
        roots = top_level.setdefault(thread_key, [])
        stack: list[int] = []
        ordered = sorted(
            thread_spans, key=lambda s: (s.start_micros, -s.end_micros, s.index)
        )
        for span in ordered:
            while stack and drafts[stack[-1]].span.end_micros <= span.start_micros:
                stack.pop()

            parent_index = stack[-1] if stack else None
            parent = drafts[parent_index].span if parent_index is not None else None
            if parent is not None and span.end_micros > parent.end_micros:
                message = (
                    f"Task '{span.name}' [{span.start_micros}, {span.end_micros}) "
                    f"overlaps '{parent.name}' [{parent.start_micros}, {parent.end_micros})"
                )
                logger.warning(
                    "Trace anomaly (%s): %s",
                    EnumTraceAnomalyKind.OVERLAPPING_TASK.value,
                    message,
                    extra={"correlation_id": correlation_id},
                )
                anomalies.append(
                    ModelTraceAnomaly(
                        kind=EnumTraceAnomalyKind.OVERLAPPING_TASK,
                        message=message,
                        event_name=span.name or None,
                        timestamp_micros=span.start_micros,
                        process_id=span.process_id,
                        thread_id=span.thread_id,
                    )
                )
                continue

            index = len(drafts)
            depth = 0 if parent_index is None else drafts[parent_index].depth + 1
            drafts.append(_TaskDraft(span=span, depth=depth, parent_index=parent_index))
            if parent_index is None:
                roots.append(index)
            else:
                drafts[parent_index].child_indices.append(index)
            stack.append(index)

    tasks = [
        ModelTask(
            index=index,
            span_index=draft.span.index,
            name=draft.span.name,
            process_id=draft.span.process_id,
            thread_id=draft.span.thread_id,
            start_micros=draft.span.start_micros,
            end_micros=draft.span.end_micros,
            depth=draft.depth,
            parent_index=draft.parent_index,
            child_indices=tuple(draft.child_indices),
        )
        for index, draft in enumerate(drafts)
    ]

    logger.debug(
        "Built task trees: threads=%d, tasks=%d, overlapping=%d",
        len(top_level),
        len(tasks),
        len(anomalies),
        extra={"correlation_id": correlation_id},
    )

    return TaskTreeResult(tasks=tasks, top_level=top_level, anomalies=anomalies)


def compute_busy_intervals(spans: Sequence[ModelTaskSpan]) -> list[ModelTimeInterval]:
    """Merge the spans of one thread into disjoint busy intervals.

    Every span takes part, including nested spans and spans left out of the
    task tree, so the busy predicate reflects all recorded work.
    """
    merged = merge_intervals((s.start_micros, s.end_micros) for s in spans)
    return [
        ModelTimeInterval(start_micros=start, end_micros=end) for start, end in merged
    ]


__all__ = [
    "TaskTreeResult",
    "build_task_trees",
    "compute_busy_intervals",
    "group_spans_by_thread",
]
