"""Orchestration handler for Timeline Model Compute.

Error Handling: Returns structured error output, never raises for a trace
without a main thread.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tracescore.nodes.node_timeline_model_compute.handlers.exceptions import (
    MissingMainThreadError,
)
from tracescore.nodes.node_timeline_model_compute.handlers.handler_timeline_build import (
    build_timeline_model,
)
from tracescore.nodes.node_timeline_model_compute.models import (
    ModelTimelineBuildOutput,
)

if TYPE_CHECKING:
    from tracescore.nodes.node_timeline_model_compute.models import (
        ModelTimelineBuildInput,
    )

logger = logging.getLogger(__name__)


def handle_timeline_build_compute(
    input_data: ModelTimelineBuildInput,
) -> ModelTimelineBuildOutput:
    """Handle timeline build compute operation.

    Args:
        input_data: Input containing the parsed trace and request event names.

    Returns:
        ModelTimelineBuildOutput with the timeline, or success=False when the
        main thread cannot be identified.
    """
    try:
        timeline = build_timeline_model(
            input_data.trace,
            request_start_events=input_data.request_start_events,
            request_end_events=input_data.request_end_events,
            correlation_id=input_data.correlation_id,
        )
    except MissingMainThreadError as e:
        logger.warning(
            "Timeline build failed: %s",
            str(e),
            extra={"correlation_id": input_data.correlation_id},
        )
        return ModelTimelineBuildOutput(success=False, error_message=str(e))

    return ModelTimelineBuildOutput(success=True, timeline=timeline)


__all__ = ["handle_timeline_build_compute"]
