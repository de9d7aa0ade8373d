"""Orchestration handler for Quiet Window Compute."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tracescore.nodes.node_quiet_window_compute.handlers.handler_first_interactive import (
    find_first_interactive,
)
from tracescore.nodes.node_quiet_window_compute.models import ModelQuietWindowOutput

if TYPE_CHECKING:
    from tracescore.nodes.node_quiet_window_compute.models import (
        ModelQuietWindowInput,
    )


def handle_quiet_window_compute(
    input_data: ModelQuietWindowInput,
) -> ModelQuietWindowOutput:
    """Run the first-interactive search; NotFound is reported as found=False.

    Args:
        input_data: Timeline, search start and thresholds.

    Returns:
        ModelQuietWindowOutput with the first interactive instant, if any.
    """
    first_interactive = find_first_interactive(
        input_data.timeline,
        input_data.start_micros,
        input_data.config,
        correlation_id=input_data.correlation_id,
    )
    return ModelQuietWindowOutput(
        found=first_interactive is not None,
        first_interactive=first_interactive,
    )


__all__ = ["handle_quiet_window_compute"]
