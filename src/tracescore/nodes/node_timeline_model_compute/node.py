"""Timeline Model Compute Node.

Thin shell compute node that derives a structured timeline from a parsed
trace. All logic is delegated to the handler function.
"""

from __future__ import annotations

from tracescore.nodes.node_timeline_model_compute.handlers import (
    handle_timeline_build_compute,
)
from tracescore.nodes.node_timeline_model_compute.models import (
    ModelTimelineBuildInput,
    ModelTimelineBuildOutput,
)


class NodeTimelineModelCompute:
    """Pure compute node for timeline construction.

    Produces per-thread task trees, main-thread busy intervals and network
    request intervals from a parsed trace.
    """

    async def compute(
        self, input_data: ModelTimelineBuildInput
    ) -> ModelTimelineBuildOutput:
        """Build the timeline by delegating to handler function."""
        return handle_timeline_build_compute(input_data)


__all__ = ["NodeTimelineModelCompute"]
