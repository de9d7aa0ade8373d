"""Quiet Window Compute Node.

Thin shell compute node locating the first-interactive instant of a
timeline. All logic is delegated to the handler function.
"""

from __future__ import annotations

from tracescore.nodes.node_quiet_window_compute.handlers import (
    handle_quiet_window_compute,
)
from tracescore.nodes.node_quiet_window_compute.models import (
    ModelQuietWindowInput,
    ModelQuietWindowOutput,
)


class NodeQuietWindowCompute:
    """Pure compute node for the first-interactive quiet-window search."""

    async def compute(
        self, input_data: ModelQuietWindowInput
    ) -> ModelQuietWindowOutput:
        """Search for the first quiet window by delegating to handler function."""
        return handle_quiet_window_compute(input_data)


__all__ = ["NodeQuietWindowCompute"]
