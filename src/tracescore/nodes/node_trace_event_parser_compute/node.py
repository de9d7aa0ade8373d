"""Trace Event Parser Compute Node.

Thin shell compute node for parsing browser traces. All logic is
delegated to the handler function.
"""

from __future__ import annotations

from tracescore.nodes.node_trace_event_parser_compute.handlers import (
    handle_trace_parsing_compute,
)
from tracescore.nodes.node_trace_event_parser_compute.models import (
    ModelTraceParsingInput,
    ModelTraceParsingOutput,
)


class NodeTraceEventParserCompute:
    """Pure compute node for parsing raw trace-event streams.

    This node validates a raw trace and reconstructs:
    - Typed events in original order
    - Task spans from Begin/End pairs and Complete events
    - Non-fatal anomalies (unmatched or unterminated events)
    """

    async def compute(
        self, input_data: ModelTraceParsingInput
    ) -> ModelTraceParsingOutput:
        """Parse a raw trace by delegating to handler function.

        Args:
            input_data: Input containing the raw trace.

        Returns:
            ModelTraceParsingOutput with the parsed trace or a rejection reason.
        """
        return handle_trace_parsing_compute(input_data)


__all__ = ["NodeTraceEventParserCompute"]
