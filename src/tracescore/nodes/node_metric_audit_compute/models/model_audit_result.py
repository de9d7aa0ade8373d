# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Audit result model for Metric Audit Compute."""

from __future__ import annotations

from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

from tracescore.enums import EnumAuditStatus, EnumScoreRating, EnumScoringMode


class ModelAuditResult(BaseModel):
    """Scored (or explicitly unavailable) result of one metric.

    Only ``status == SUCCESS`` carries a score; any other status leaves
    ``score`` as None so the reporting layer can render the metric as not
    computed while the rest of the report stays intact.

    ``extended_info`` is opaque pass-through data for diagnostic display.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    metric_name: str = Field(..., description="Metric id")
    status: EnumAuditStatus = Field(..., description="Evaluation outcome")
    score: int | None = Field(default=None, ge=0, le=100)
    raw_value_ms: float | None = Field(default=None, ge=0.0)
    display_value: str = Field(default="", description="Short human string")
    optimal_value_label: str = Field(default="")
    rating: EnumScoreRating | None = Field(default=None)
    scoring_mode: EnumScoringMode = Field(default=EnumScoringMode.NUMERIC)
    extended_info: dict[str, Any] = Field(default_factory=dict)
    error_message: str | None = Field(default=None)

    @model_validator(mode="after")
    def validate_score_matches_status(self) -> Self:
        """A successful result is scored; a failed result is not."""
        if self.status is EnumAuditStatus.SUCCESS:
            if self.score is None or self.raw_value_ms is None:
                raise ValueError("score and raw_value_ms are required on success")
        elif self.score is not None:
            raise ValueError(f"score must be None when status is {self.status.value}")
        return self

    @property
    def is_available(self) -> bool:
        return self.status is EnumAuditStatus.SUCCESS


__all__ = ["ModelAuditResult"]
