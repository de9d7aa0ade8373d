"""Handlers for Quiet Window Compute Node.

Architecture:
    - handler_compute: Orchestration layer (NotFound as found=False)
    - handler_first_interactive: Pure candidate scan and window checks
"""

from tracescore.nodes.node_quiet_window_compute.handlers.handler_compute import (
    handle_quiet_window_compute,
)
from tracescore.nodes.node_quiet_window_compute.handlers.handler_first_interactive import (
    find_first_interactive,
    iter_candidates,
    window_disqualifier,
)

__all__ = [
    "find_first_interactive",
    "handle_quiet_window_compute",
    "iter_candidates",
    "window_disqualifier",
]
