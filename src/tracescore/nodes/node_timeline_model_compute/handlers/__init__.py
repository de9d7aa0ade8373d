"""Handlers for Timeline Model Compute Node.

Architecture:
    - handler_compute: Orchestration layer (never raises)
    - handler_timeline_build: Main thread, markers and model assembly
    - handler_task_tree: Per-thread task trees and busy intervals
    - handler_network_requests: Request start/end pairing
    - exceptions: Domain-specific errors
"""

from tracescore.nodes.node_timeline_model_compute.handlers.exceptions import (
    MissingMainThreadError,
)
from tracescore.nodes.node_timeline_model_compute.handlers.handler_compute import (
    handle_timeline_build_compute,
)
from tracescore.nodes.node_timeline_model_compute.handlers.handler_network_requests import (
    NetworkRequestsResult,
    build_network_requests,
    request_id_of,
)
from tracescore.nodes.node_timeline_model_compute.handlers.handler_task_tree import (
    TaskTreeResult,
    build_task_trees,
    compute_busy_intervals,
    group_spans_by_thread,
)
from tracescore.nodes.node_timeline_model_compute.handlers.handler_timeline_build import (
    build_timeline_model,
    find_main_thread_key,
    find_marker_micros,
    observed_thread_keys,
)

__all__ = [
    "MissingMainThreadError",
    "NetworkRequestsResult",
    "TaskTreeResult",
    "build_network_requests",
    "build_task_trees",
    "build_timeline_model",
    "compute_busy_intervals",
    "find_main_thread_key",
    "find_marker_micros",
    "group_spans_by_thread",
    "handle_timeline_build_compute",
    "observed_thread_keys",
    "request_id_of",
]
