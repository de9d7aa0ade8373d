# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Trace event model for Trace Event Parser Compute."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from tracescore.enums import EnumTracePhase


class ModelTraceEvent(BaseModel):
    """One validated trace event.

    Immutable once parsed. ``args`` is kept opaque; only a handful of keys
    (main-frame marker, request ids) are ever read downstream.
    """

    index: int = Field(..., ge=0, description="Position in the raw event stream")
    name: str = Field(default="", description="Event name")
    category: str = Field(default="", description="Comma separated categories")
    phase: EnumTracePhase = Field(..., description="Trace-event phase")
    timestamp_micros: int = Field(..., description="Timestamp in microseconds")
    duration_micros: int | None = Field(
        default=None, ge=0, description="Duration in microseconds (Complete only)"
    )
    process_id: int = Field(default=0, description="Process id")
    thread_id: int = Field(default=0, description="Thread id")
    args: dict[str, Any] = Field(default_factory=dict, description="Opaque payload")

    model_config = {"frozen": True, "extra": "forbid"}

    @property
    def thread_key(self) -> tuple[int, int]:
        """(process_id, thread_id) pair identifying the emitting thread."""
        return (self.process_id, self.thread_id)

    def data_arg(self, key: str) -> Any:
        """Read ``key`` from ``args`` or from the nested ``args["data"]``."""
        if key in self.args:
            return self.args[key]
        data = self.args.get("data")
        if isinstance(data, dict):
            return data.get(key)
        return None


__all__ = ["ModelTraceEvent"]
