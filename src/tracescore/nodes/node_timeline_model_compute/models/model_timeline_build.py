"""Input and output models for Timeline Model Compute."""

from __future__ import annotations

from typing import Self

from pydantic import BaseModel, Field, model_validator

from tracescore.constants import REQUEST_END_EVENTS, REQUEST_START_EVENTS
from tracescore.nodes.node_timeline_model_compute.models.model_timeline_model import (
    ModelTimelineModel,
)
from tracescore.nodes.node_trace_event_parser_compute.models import ModelTrace


class ModelTimelineBuildInput(BaseModel):
    """Input model for timeline construction."""

    trace: ModelTrace = Field(..., description="Parsed trace")
    request_start_events: tuple[str, ...] = Field(default=REQUEST_START_EVENTS)
    request_end_events: tuple[str, ...] = Field(default=REQUEST_END_EVENTS)
    correlation_id: str | None = Field(default=None)

    model_config = {"frozen": True, "extra": "forbid"}


class ModelTimelineBuildOutput(BaseModel):
    """Output model for timeline construction."""

    success: bool = Field(..., description="Whether the timeline was built")
    timeline: ModelTimelineModel | None = Field(default=None)
    error_message: str | None = Field(default=None)

    @model_validator(mode="after")
    def validate_timeline_matches_success(self) -> Self:
        if self.success and self.timeline is None:
            raise ValueError("timeline is required when success=True")
        return self

    model_config = {"frozen": True, "extra": "forbid"}


__all__ = ["ModelTimelineBuildInput", "ModelTimelineBuildOutput"]
