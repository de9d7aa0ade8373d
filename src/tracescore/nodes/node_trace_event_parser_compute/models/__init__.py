"""Models for Trace Event Parser Compute Node.

All models use strong typing with Pydantic BaseModel for type safety.
"""

from tracescore.nodes.node_trace_event_parser_compute.models.model_trace import (
    ModelTaskSpan,
    ModelTrace,
    ModelTraceAnomaly,
)
from tracescore.nodes.node_trace_event_parser_compute.models.model_trace_event import (
    ModelTraceEvent,
)
from tracescore.nodes.node_trace_event_parser_compute.models.model_trace_parsing_input import (
    ModelTraceParsingInput,
)
from tracescore.nodes.node_trace_event_parser_compute.models.model_trace_parsing_output import (
    ModelTraceParsingMetadata,
    ModelTraceParsingOutput,
)

__all__ = [
    "ModelTaskSpan",
    "ModelTrace",
    "ModelTraceAnomaly",
    "ModelTraceEvent",
    "ModelTraceParsingInput",
    "ModelTraceParsingMetadata",
    "ModelTraceParsingOutput",
]
