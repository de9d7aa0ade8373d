# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Parsed trace model for Trace Event Parser Compute."""

from __future__ import annotations

from pydantic import BaseModel, Field

from tracescore.enums import EnumTraceAnomalyKind
from tracescore.nodes.node_trace_event_parser_compute.models.model_trace_event import (
    ModelTraceEvent,
)


class ModelTaskSpan(BaseModel):
    """A Begin/End pair (or a Complete event) reconstructed on one thread."""

    index: int = Field(..., ge=0, description="Formation order within the trace")
    name: str = Field(default="", description="Name of the opening event")
    category: str = Field(default="", description="Category of the opening event")
    process_id: int = Field(default=0)
    thread_id: int = Field(default=0)
    start_micros: int = Field(..., description="Span start in microseconds")
    end_micros: int = Field(..., description="Span end in microseconds")

    model_config = {"frozen": True, "extra": "forbid"}

    @property
    def thread_key(self) -> tuple[int, int]:
        return (self.process_id, self.thread_id)

    @property
    def duration_micros(self) -> int:
        return self.end_micros - self.start_micros


class ModelTraceAnomaly(BaseModel):
    """A non-fatal problem recorded while reconstructing the trace."""

    kind: EnumTraceAnomalyKind = Field(..., description="Anomaly category")
    message: str = Field(..., description="Human readable description")
    event_name: str | None = Field(default=None)
    timestamp_micros: int | None = Field(default=None)
    process_id: int | None = Field(default=None)
    thread_id: int | None = Field(default=None)

    model_config = {"frozen": True, "extra": "forbid"}


class ModelTrace(BaseModel):
    """An ordered, validated capture of one page-load pass.

    Events are retained in original order for replay and debugging.
    """

    events: tuple[ModelTraceEvent, ...] = Field(default=())
    task_spans: tuple[ModelTaskSpan, ...] = Field(default=())
    anomalies: tuple[ModelTraceAnomaly, ...] = Field(default=())
    start_micros: int = Field(default=0, description="Earliest event timestamp")
    end_micros: int = Field(default=0, description="Latest event end timestamp")
    ignored_event_count: int = Field(
        default=0, ge=0, description="Events skipped for an unknown phase"
    )

    model_config = {"frozen": True, "extra": "forbid"}


__all__ = ["ModelTaskSpan", "ModelTrace", "ModelTraceAnomaly"]
