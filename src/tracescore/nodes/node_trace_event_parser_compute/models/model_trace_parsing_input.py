"""Input model for Trace Event Parser Compute."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ModelTraceParsingInput(BaseModel):
    """Input model for trace parsing operations.

    ``raw_trace`` is either the bare event array or the wrapping object with
    a ``traceEvents`` key, exactly as produced by the gatherer.
    """

    raw_trace: list[Any] | dict[str, Any] = Field(
        ...,
        description="Raw trace-event array or object with a traceEvents key",
    )
    correlation_id: str | None = Field(
        default=None,
        description="Correlation ID for tracing",
        pattern=r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$",
    )

    model_config = {"frozen": True, "extra": "forbid"}


__all__ = ["ModelTraceParsingInput"]
