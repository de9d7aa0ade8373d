"""Static metric metadata for Metric Audit Compute."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from tracescore.enums import EnumScoringMode


class ModelMetricMeta(BaseModel):
    """Data-only description of a metric.

    Attributes:
        name: Stable metric id used for dispatch (e.g. ``first-interactive``).
        category: Report category the metric belongs to.
        description: Short title.
        help_text: One or two sentences explaining the metric.
        required_artifacts: Artifact names that must be present in the bag.
        optimal_value_label: Target value as displayed (e.g. ``5,000ms``).
        scoring_mode: How the score is displayed.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1)
    description: str = Field(...)
    help_text: str = Field(default="")
    required_artifacts: tuple[str, ...] = Field(default=())
    optimal_value_label: str = Field(default="")
    scoring_mode: EnumScoringMode = Field(default=EnumScoringMode.NUMERIC)


__all__ = ["ModelMetricMeta"]
