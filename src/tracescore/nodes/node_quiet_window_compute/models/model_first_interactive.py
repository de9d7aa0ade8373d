"""First-interactive result models for Quiet Window Compute."""

from __future__ import annotations

from pydantic import BaseModel, Field

from tracescore.nodes.node_quiet_window_compute.models.model_quiet_window_config import (
    ModelQuietWindowConfig,
)
from tracescore.nodes.node_timeline_model_compute.models import (
    ModelTimeInterval,
    ModelTimelineModel,
)


class ModelQuietWindow(ModelTimeInterval):
    """An interval with no long main-thread task and bounded network load."""


class ModelFirstInteractive(BaseModel):
    """The first instant at which the page is interactive.

    ``time_in_ms`` is ``(timestamp_micros - origin_micros) / 1000``. The
    origin is 0 unless the caller measures from navigation start.
    """

    time_in_ms: float = Field(..., description="Interactive instant in ms")
    origin_micros: int = Field(default=0, description="Time origin of time_in_ms")
    timestamp_micros: int = Field(..., description="Interactive instant in micros")
    start_micros: int = Field(..., description="Where the search started")
    quiet_window: ModelQuietWindow = Field(..., description="The qualifying window")

    model_config = {"frozen": True, "extra": "forbid"}


class ModelQuietWindowInput(BaseModel):
    """Input model for the quiet-window search."""

    timeline: ModelTimelineModel = Field(...)
    start_micros: int = Field(..., description="Search start, e.g. DOMContentLoaded")
    config: ModelQuietWindowConfig = Field(default_factory=ModelQuietWindowConfig)
    correlation_id: str | None = Field(default=None)

    model_config = {"frozen": True, "extra": "forbid"}


class ModelQuietWindowOutput(BaseModel):
    """Output model for the quiet-window search."""

    found: bool = Field(..., description="Whether a qualifying window exists")
    first_interactive: ModelFirstInteractive | None = Field(default=None)

    model_config = {"frozen": True, "extra": "forbid"}


__all__ = [
    "ModelFirstInteractive",
    "ModelQuietWindow",
    "ModelQuietWindowInput",
    "ModelQuietWindowOutput",
]
