"""Output model for Trace Event Parser Compute."""

from __future__ import annotations

from typing import Self

from pydantic import BaseModel, Field, model_validator

from tracescore.nodes.node_trace_event_parser_compute.models.model_trace import (
    ModelTrace,
)


class ModelTraceParsingMetadata(BaseModel):
    """Metadata about the parsing process."""

    parser_version: str | None = Field(default=None, description="Parser version used")
    parse_time_ms: float | None = Field(
        default=None, description="Time taken to parse in ms"
    )
    event_count: int = Field(default=0, ge=0, description="Accepted events")
    task_count: int = Field(default=0, ge=0, description="Reconstructed task spans")
    anomaly_count: int = Field(default=0, ge=0, description="Recorded anomalies")
    ignored_event_count: int = Field(
        default=0, ge=0, description="Events skipped for an unknown phase"
    )

    model_config = {"frozen": True, "extra": "forbid"}


class ModelTraceParsingOutput(BaseModel):
    """Output model for trace parsing operations."""

    success: bool = Field(..., description="Whether trace parsing succeeded")
    trace: ModelTrace | None = Field(
        default=None, description="Parsed trace, present on success"
    )
    error_message: str | None = Field(
        default=None, description="Reason the trace was rejected"
    )
    metadata: ModelTraceParsingMetadata = Field(
        default_factory=ModelTraceParsingMetadata,
        description="Additional metadata about the parsing",
    )

    @model_validator(mode="after")
    def validate_trace_matches_success(self) -> Self:
        """A successful parse carries a trace; a failed one carries a reason."""
        if self.success and self.trace is None:
            raise ValueError("trace is required when success=True")
        if not self.success and not self.error_message:
            raise ValueError("error_message is required when success=False")
        return self

    model_config = {"frozen": True, "extra": "forbid"}


__all__ = ["ModelTraceParsingMetadata", "ModelTraceParsingOutput"]
