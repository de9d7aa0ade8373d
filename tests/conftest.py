"""
Pytest configuration and fixtures for tracescore tests.

Shared fixtures for all tests: correlation ids, canned raw traces and their
parsed/timeline forms.
"""

from typing import Any

import pytest

from tests.fixtures.trace_builders import (
    MS,
    WORKER_TID,
    complete,
    dom_content_loaded,
    main_frame_marker,
    navigation_start,
    request_finish,
    request_start,
    thread_name,
)
from tracescore.artifacts import ArtifactsBag, ComputedArtifactCache
from tracescore.nodes.node_timeline_model_compute.handlers import (
    build_timeline_model,
)
from tracescore.nodes.node_timeline_model_compute.models import ModelTimelineModel
from tracescore.nodes.node_trace_event_parser_compute.handlers import (
    parse_trace_events,
)
from tracescore.nodes.node_trace_event_parser_compute.models import ModelTrace

# =========================================================================
# Basic Sample Data Fixtures
# =========================================================================


@pytest.fixture
def correlation_id() -> str:
    """Provide a valid UUID test correlation ID for distributed tracing."""
    return "550e8400-e29b-41d4-a716-446655440000"


@pytest.fixture
def cache() -> ComputedArtifactCache:
    """Provide a fresh computed-artifact cache."""
    return ComputedArtifactCache()


# =========================================================================
# Raw Trace Fixtures
# =========================================================================


@pytest.fixture
def page_load_events() -> list[dict[str, Any]]:
    """A small page load.

    navigationStart at 1s, DOMContentLoaded at 1.5s, a 200 ms long task
    at 2s, two short requests and a worker thread. Interactive at 2.2s,
    i.e. 1200 ms after navigation start.
    """
    return [
        thread_name("CrRendererMain"),
        thread_name("DedicatedWorker", tid=WORKER_TID),
        main_frame_marker(ts=1000 * MS),
        navigation_start(1000 * MS),
        request_start("r1", 1100 * MS),
        complete("ParseHTML", 1200 * MS, 30 * MS),
        request_finish("r1", 1400 * MS),
        dom_content_loaded(1500 * MS),
        complete("EvaluateScript", 1600 * MS, 10 * MS, tid=WORKER_TID),
        complete("RunTask", 2000 * MS, 200 * MS),
        complete("FunctionCall", 2050 * MS, 100 * MS),
        request_start("r2", 2100 * MS),
        request_finish("r2", 2300 * MS),
        complete("RunTask", 3000 * MS, 20 * MS),
    ]


@pytest.fixture
def page_load_trace(page_load_events: list[dict[str, Any]]) -> dict[str, Any]:
    """The page load wrapped the way the gatherer delivers it."""
    return {"traceEvents": page_load_events, "metadata": {"source": "test"}}


@pytest.fixture
def parsed_page_load(page_load_trace: dict[str, Any]) -> ModelTrace:
    return parse_trace_events(page_load_trace)


@pytest.fixture
def page_load_timeline(parsed_page_load: ModelTrace) -> ModelTimelineModel:
    return build_timeline_model(parsed_page_load)


@pytest.fixture
def page_load_artifacts(page_load_trace: dict[str, Any]) -> ArtifactsBag:
    return ArtifactsBag.from_traces({"defaultPass": page_load_trace})
