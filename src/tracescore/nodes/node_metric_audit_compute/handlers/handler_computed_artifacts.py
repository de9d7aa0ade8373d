# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Lazily computed artifacts shared by every metric reading the same trace.

Each ``request_*`` function derives one artifact from the bag and memoizes
it in the supplied ComputedArtifactCache, keyed by the identity of the object
it was derived from:

    raw trace --request_trace--> ModelTrace
    ModelTrace --request_timeline_model--> ModelTimelineModel
    ModelTimelineModel (+ config) --request_first_interactive--> ModelFirstInteractive

Failures are memoized too, so a corrupt trace fails every dependent metric
the same way without being parsed twice.
"""

from __future__ import annotations

import logging

from tracescore.artifacts import ArtifactsBag, ComputedArtifactCache
from tracescore.constants import DEFAULT_PASS
from tracescore.nodes.node_metric_audit_compute.handlers.exceptions import (
    MetricUnavailableError,
)
from tracescore.nodes.node_quiet_window_compute.handlers import find_first_interactive
from tracescore.nodes.node_quiet_window_compute.models import (
    ModelFirstInteractive,
    ModelQuietWindowConfig,
)
from tracescore.nodes.node_timeline_model_compute.handlers import build_timeline_model
from tracescore.nodes.node_timeline_model_compute.models import ModelTimelineModel
from tracescore.nodes.node_trace_event_parser_compute.handlers import (
    parse_trace_events,
)
from tracescore.nodes.node_trace_event_parser_compute.models import ModelTrace

logger = logging.getLogger(__name__)

TRACE_ARTIFACT_NAME = "trace"
TIMELINE_MODEL_ARTIFACT_NAME = "timeline_model"
FIRST_INTERACTIVE_ARTIFACT_NAME = "first_interactive"


def request_trace(
    artifacts: ArtifactsBag,
    cache: ComputedArtifactCache,
    *,
    pass_name: str = DEFAULT_PASS,
    correlation_id: str | None = None,
) -> ModelTrace:
    """Return the parsed trace of ``pass_name``.

    Raises:
        MissingArtifactError: If the bag has no trace for the pass.
        TraceParseError: If the trace is unreadable.
    """
    raw_trace = artifacts.get_trace(pass_name)
    return cache.get_or_compute(
        TRACE_ARTIFACT_NAME,
        raw_trace,
        lambda: parse_trace_events(raw_trace, correlation_id=correlation_id),
    )


def request_timeline_model(
    artifacts: ArtifactsBag,
    cache: ComputedArtifactCache,
    *,
    pass_name: str = DEFAULT_PASS,
    correlation_id: str | None = None,
) -> ModelTimelineModel:
    """Return the timeline model of the trace of ``pass_name``.

    Raises:
        MissingArtifactError: If the bag has no trace for the pass.
        TraceParseError: If the trace is unreadable.
        MissingMainThreadError: If the trace has no identifiable main thread.
    """
    trace = request_trace(
        artifacts, cache, pass_name=pass_name, correlation_id=correlation_id
    )
    return cache.get_or_compute(
        TIMELINE_MODEL_ARTIFACT_NAME,
        trace,
        lambda: build_timeline_model(trace, correlation_id=correlation_id),
    )


def search_start_micros(timeline: ModelTimelineModel) -> int:
    """DOMContentLoaded, else navigationStart, else the first traced instant."""
    if timeline.dom_content_loaded_micros is not None:
        return timeline.dom_content_loaded_micros
    if timeline.navigation_start_micros is not None:
        return timeline.navigation_start_micros
    return timeline.trace_start_micros


def _compute_first_interactive(
    timeline: ModelTimelineModel,
    config: ModelQuietWindowConfig,
    correlation_id: str | None,
) -> ModelFirstInteractive:
    start_micros = search_start_micros(timeline)
    first_interactive = find_first_interactive(
        timeline,
        start_micros,
        config,
        origin_micros=timeline.navigation_start_micros or 0,
        correlation_id=correlation_id,
    )
    if first_interactive is None:
        raise MetricUnavailableError(
            FIRST_INTERACTIVE_ARTIFACT_NAME,
            f"no quiet window of {config.quiet_window_ms:g}ms found "
            f"after {start_micros} before trace end {timeline.trace_end_micros}",
        )
    return first_interactive


def request_first_interactive(
    artifacts: ArtifactsBag,
    cache: ComputedArtifactCache,
    config: ModelQuietWindowConfig | None = None,
    *,
    pass_name: str = DEFAULT_PASS,
    correlation_id: str | None = None,
) -> ModelFirstInteractive:
    """Return the first-interactive instant of the trace of ``pass_name``.

    Memoized per timeline model and config, so metrics sharing thresholds
    share one search.

    Raises:
        MissingArtifactError: If the bag has no trace for the pass.
        TraceParseError: If the trace is unreadable.
        MissingMainThreadError: If the trace has no identifiable main thread.
        MetricUnavailableError: If no quiet window exists before trace end.
    """
    config = config or ModelQuietWindowConfig()
    timeline = request_timeline_model(
        artifacts, cache, pass_name=pass_name, correlation_id=correlation_id
    )
    return cache.get_or_compute(
        FIRST_INTERACTIVE_ARTIFACT_NAME,
        timeline,
        lambda: _compute_first_interactive(timeline, config, correlation_id),
        variant=config,
    )


__all__ = [
    "FIRST_INTERACTIVE_ARTIFACT_NAME",
    "TIMELINE_MODEL_ARTIFACT_NAME",
    "TRACE_ARTIFACT_NAME",
    "request_first_interactive",
    "request_timeline_model",
    "request_trace",
    "search_start_micros",
]
