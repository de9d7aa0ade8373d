"""Input model for Metric Audit Compute."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from tracescore.artifacts import ArtifactsBag


class ModelMetricAuditInput(BaseModel):
    """Input model for one metric evaluation."""

    model_config = ConfigDict(
        frozen=True, extra="forbid", arbitrary_types_allowed=True
    )

    metric_name: str = Field(..., min_length=1)
    artifacts: ArtifactsBag = Field(..., description="Read-only gathered artifacts")
    correlation_id: str | None = Field(default=None)


__all__ = ["ModelMetricAuditInput"]
