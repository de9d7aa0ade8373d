# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Timeline construction for Timeline Model Compute.

This module assembles a ModelTimelineModel from a parsed trace:
1. Identifies the main thread from its marker event
2. Nests task spans into per-thread task trees
3. Merges task spans into per-thread busy intervals
4. Pairs network request events into intervals
5. Locates navigation markers on the main thread

All functions are pure. The same trace always yields an identical model.
"""

from __future__ import annotations

import logging
from collections.abc import Collection

from tracescore.constants import (
    DOM_CONTENT_LOADED_EVENT,
    MAIN_FRAME_ARG,
    MAIN_FRAME_FALLBACK_EVENT,
    NAVIGATION_START_EVENT,
    REQUEST_END_EVENTS,
    REQUEST_START_EVENTS,
)
from tracescore.enums import EnumTracePhase
from tracescore.nodes.node_timeline_model_compute.handlers.exceptions import (
    MissingMainThreadError,
)
from tracescore.nodes.node_timeline_model_compute.handlers.handler_network_requests import (
    build_network_requests,
)
from tracescore.nodes.node_timeline_model_compute.handlers.handler_task_tree import (
    build_task_trees,
    compute_busy_intervals,
    group_spans_by_thread,
)
from tracescore.nodes.node_timeline_model_compute.models import (
    ModelThreadTimeline,
    ModelTimelineModel,
)
from tracescore.nodes.node_trace_event_parser_compute.models import ModelTrace

logger = logging.getLogger(__name__)


def find_main_thread_key(trace: ModelTrace) -> tuple[int, int]:
    """Return the (pid, tid) of the main thread.

    The main thread is the thread of the first event whose args carry
    ``isMainFrame: true``; failing that, the thread of the first
    ``TracingStartedInPage`` event.

    Raises:
        MissingMainThreadError: If neither marker is present.
    """
    for event in trace.events:
        if event.data_arg(MAIN_FRAME_ARG) is True:
            return event.thread_key
    for event in trace.events:
        if event.name == MAIN_FRAME_FALLBACK_EVENT:
            return event.thread_key
    raise MissingMainThreadError(
        f"no event carries '{MAIN_FRAME_ARG}' and no "
        f"'{MAIN_FRAME_FALLBACK_EVENT}' event found"
    )


def find_marker_micros(
    trace: ModelTrace,
    name: str,
    thread_key: tuple[int, int],
    *,
    not_before: int | None = None,
) -> int | None:
    """Timestamp of the first ``name`` event on ``thread_key``, if any."""
    for event in trace.events:
        if event.phase is EnumTracePhase.METADATA:
            continue
        if event.name != name or event.thread_key != thread_key:
            continue
        if not_before is not None and event.timestamp_micros < not_before:
            continue
        return event.timestamp_micros
    return None


def observed_thread_keys(trace: ModelTrace) -> list[tuple[int, int]]:
    """All (pid, tid) pairs that emitted at least one event, sorted."""
    return sorted({event.thread_key for event in trace.events})


def build_timeline_model(
    trace: ModelTrace,
    *,
    request_start_events: Collection[str] = REQUEST_START_EVENTS,
    request_end_events: Collection[str] = REQUEST_END_EVENTS,
    correlation_id: str | None = None,
) -> ModelTimelineModel:
    """Build the timeline model of a parsed trace.

    Args:
        trace: Parsed trace.
        request_start_events: Event names that open a network request.
        request_end_events: Event names that close a network request.
        correlation_id: Correlation ID for tracing.

    Returns:
        Frozen ModelTimelineModel.

    Raises:
        MissingMainThreadError: If the main thread cannot be identified.
    """
    main_thread_key = find_main_thread_key(trace)

    logger.debug(
        "Building timeline: main_thread=%s, spans=%d",
        main_thread_key,
        len(trace.task_spans),
        extra={"correlation_id": correlation_id},
    )

    tree = build_task_trees(trace.task_spans, correlation_id=correlation_id)
    spans_by_thread = group_spans_by_thread(trace.task_spans)

    thread_keys = set(observed_thread_keys(trace))
    thread_keys.add(main_thread_key)
    threads = [
        ModelThreadTimeline(
            process_id=key[0],
            thread_id=key[1],
            top_level_task_indices=tuple(tree.top_level.get(key, [])),
            busy_intervals=tuple(
                compute_busy_intervals(spans_by_thread.get(key, []))
            ),
        )
        for key in sorted(thread_keys)
    ]

    network = build_network_requests(
        trace,
        start_events=request_start_events,
        end_events=request_end_events,
        correlation_id=correlation_id,
    )

    navigation_start = find_marker_micros(
        trace, NAVIGATION_START_EVENT, main_thread_key
    )
    dom_content_loaded = find_marker_micros(
        trace,
        DOM_CONTENT_LOADED_EVENT,
        main_thread_key,
        not_before=navigation_start,
    )

    timeline = ModelTimelineModel(
        tasks=tuple(tree.tasks),
        threads=tuple(threads),
        main_thread_key=main_thread_key,
        network_requests=tuple(network.requests),
        request_start_micros=tuple(sorted(r.start_micros for r in network.requests)),
        request_end_micros=tuple(sorted(r.end_micros for r in network.requests)),
        trace_start_micros=trace.start_micros,
        trace_end_micros=trace.end_micros,
        navigation_start_micros=navigation_start,
        dom_content_loaded_micros=dom_content_loaded,
        anomalies=tuple(tree.anomalies + network.anomalies),
    )

    logger.debug(
        "Timeline built: threads=%d, tasks=%d, requests=%d, anomalies=%d",
        len(timeline.threads),
        len(timeline.tasks),
        len(timeline.network_requests),
        len(timeline.anomalies),
        extra={"correlation_id": correlation_id},
    )

    return timeline


__all__ = [
    "build_timeline_model",
    "find_main_thread_key",
    "find_marker_micros",
    "observed_thread_keys",
]
