"""Models for Quiet Window Compute Node."""

from tracescore.nodes.node_quiet_window_compute.models.model_first_interactive import (
    ModelFirstInteractive,
    ModelQuietWindow,
    ModelQuietWindowInput,
    ModelQuietWindowOutput,
)
from tracescore.nodes.node_quiet_window_compute.models.model_quiet_window_config import (
    DEFAULT_LONG_TASK_THRESHOLD_MS,
    DEFAULT_MAX_CONCURRENT_REQUESTS,
    DEFAULT_QUIET_WINDOW_MS,
    ModelQuietWindowConfig,
    QuietWindowSettings,
)

__all__ = [
    "DEFAULT_LONG_TASK_THRESHOLD_MS",
    "DEFAULT_MAX_CONCURRENT_REQUESTS",
    "DEFAULT_QUIET_WINDOW_MS",
    "ModelFirstInteractive",
    "ModelQuietWindow",
    "ModelQuietWindowConfig",
    "ModelQuietWindowInput",
    "ModelQuietWindowOutput",
    "QuietWindowSettings",
]
