# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Orchestration handler for Trace Event Parser Compute.

This module coordinates the parsing workflow:
1. Parses and validates the raw event stream
2. Builds parsing metadata
3. Constructs output model

Error Handling: Returns structured error output, never raises.
Correlation ID: Threaded through all operations for end-to-end tracing.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from tracescore.nodes.node_trace_event_parser_compute.handlers.exceptions import (
    TraceParseError,
)
from tracescore.nodes.node_trace_event_parser_compute.handlers.handler_event_parsing import (
    PARSER_VERSION,
    parse_trace_events,
)
from tracescore.nodes.node_trace_event_parser_compute.models import (
    ModelTraceParsingMetadata,
    ModelTraceParsingOutput,
)

if TYPE_CHECKING:
    from tracescore.nodes.node_trace_event_parser_compute.models import (
        ModelTraceParsingInput,
    )

logger = logging.getLogger(__name__)


def handle_trace_parsing_compute(
    input_data: ModelTraceParsingInput,
) -> ModelTraceParsingOutput:
    """Handle trace parsing compute operation.

    Args:
        input_data: Input containing the raw trace.

    Returns:
        ModelTraceParsingOutput with the parsed trace, or success=False and
        the reason the trace was rejected.

    Note:
        This function never raises for a corrupt trace. Callers that prefer
        an exception should use parse_trace_events directly.
    """
    start_time = time.perf_counter()
    correlation_id = input_data.correlation_id

    try:
        trace = parse_trace_events(input_data.raw_trace, correlation_id=correlation_id)
    except TraceParseError as e:
        logger.error(
            "Trace rejected: %s",
            str(e),
            extra={"correlation_id": correlation_id},
        )
        return ModelTraceParsingOutput(
            success=False,
            error_message=str(e),
            metadata=ModelTraceParsingMetadata(
                parser_version=PARSER_VERSION,
                parse_time_ms=_elapsed_time_ms(start_time),
            ),
        )

    return ModelTraceParsingOutput(
        success=True,
        trace=trace,
        metadata=ModelTraceParsingMetadata(
            parser_version=PARSER_VERSION,
            parse_time_ms=_elapsed_time_ms(start_time),
            event_count=len(trace.events),
            task_count=len(trace.task_spans),
            anomaly_count=len(trace.anomalies),
            ignored_event_count=trace.ignored_event_count,
        ),
    )


def _elapsed_time_ms(start_time: float) -> float:
    """Calculate elapsed time in milliseconds since time.perf_counter()."""
    return (time.perf_counter() - start_time) * 1000


__all__ = ["handle_trace_parsing_compute"]
