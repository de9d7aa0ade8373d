"""Time interval model shared by the timeline and quiet-window nodes."""

from __future__ import annotations

from typing import Self

from pydantic import BaseModel, Field, model_validator


class ModelTimeInterval(BaseModel):
    """A half-open ``[start_micros, end_micros)`` interval."""

    start_micros: int = Field(..., description="Inclusive start in microseconds")
    end_micros: int = Field(..., description="Exclusive end in microseconds")

    model_config = {"frozen": True, "extra": "forbid"}

    @model_validator(mode="after")
    def validate_end_not_before_start(self) -> Self:
        if self.end_micros < self.start_micros:
            raise ValueError(
                f"end_micros ({self.end_micros}) < start_micros ({self.start_micros})"
            )
        return self

    @property
    def duration_micros(self) -> int:
        return self.end_micros - self.start_micros

    def contains(self, t: int) -> bool:
        return self.start_micros <= t < self.end_micros


__all__ = ["ModelTimeInterval"]
