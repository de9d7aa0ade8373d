"""Handlers for Trace Event Parser Compute Node.

Architecture:
    - handler_compute: Orchestration layer (never raises)
    - handler_event_parsing: Pure event validation and Begin/End pairing
    - exceptions: Domain-specific errors
"""

from tracescore.nodes.node_trace_event_parser_compute.handlers.exceptions import (
    TraceParseError,
)
from tracescore.nodes.node_trace_event_parser_compute.handlers.handler_compute import (
    handle_trace_parsing_compute,
)
from tracescore.nodes.node_trace_event_parser_compute.handlers.handler_event_parsing import (
    PARSER_VERSION,
    coerce_raw_events,
    compute_trace_bounds,
    parse_phase,
    parse_raw_event,
    parse_trace_events,
)

__all__ = [
    "PARSER_VERSION",
    "TraceParseError",
    "coerce_raw_events",
    "compute_trace_bounds",
    "handle_trace_parsing_compute",
    "parse_phase",
    "parse_raw_event",
    "parse_trace_events",
]
