"""Network request interval model for Timeline Model Compute."""

from __future__ import annotations

from typing import Self

from pydantic import BaseModel, Field, model_validator


class ModelNetworkRequestInterval(BaseModel):
    """Lifetime of one network request, ``[start_micros, end_micros)``.

    Requests with no end event extend to the trace end and have
    ``terminated=False``.
    """

    request_id: str = Field(..., min_length=1)
    start_micros: int = Field(...)
    end_micros: int = Field(...)
    terminated: bool = Field(default=True, description="False if no end event was seen")

    model_config = {"frozen": True, "extra": "forbid"}

    @model_validator(mode="after")
    def validate_end_not_before_start(self) -> Self:
        if self.end_micros < self.start_micros:
            raise ValueError(
                f"request {self.request_id}: end_micros ({self.end_micros}) "
                f"< start_micros ({self.start_micros})"
            )
        return self


__all__ = ["ModelNetworkRequestInterval"]
