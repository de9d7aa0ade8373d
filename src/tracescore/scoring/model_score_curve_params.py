"""Calibration model for log-normal scoring curves."""

from __future__ import annotations

from typing import Self

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ModelScoreCurveParams(BaseModel):
    """Two calibration points that fully determine a scoring curve.

    Attributes:
        median_ms: Raw value that scores 50.
        control_point_ms: Raw value that scores 90 (the point of diminishing
            returns). Must be below the median since lower values are better.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    median_ms: float = Field(..., gt=0.0, description="Value scoring 50")
    control_point_ms: float = Field(..., gt=0.0, description="Value scoring 90")

    @model_validator(mode="after")
    def validate_control_point_below_median(self) -> Self:
        """Reject calibrations that cannot describe a lower-is-better curve."""
        if self.control_point_ms >= self.median_ms:
            raise ValueError(
                f"control_point_ms ({self.control_point_ms}) must be less than "
                f"median_ms ({self.median_ms})"
            )
        return self


__all__ = ["ModelScoreCurveParams"]
