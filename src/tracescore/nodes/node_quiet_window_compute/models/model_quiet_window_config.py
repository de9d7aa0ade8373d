# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Quiet-window search thresholds.

The thresholds are calibration constants supplied from outside the search
algorithm so that several metrics can share one engine.

Environment variables (QuietWindowSettings):
    TRACESCORE_QUIET_WINDOW_LONG_TASK_THRESHOLD_MS: float (default 50)
    TRACESCORE_QUIET_WINDOW_QUIET_WINDOW_MS: float (default 5000)
    TRACESCORE_QUIET_WINDOW_MAX_CONCURRENT_REQUESTS: int (default 2)
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from tracescore.constants import MICROS_PER_MILLISECOND

DEFAULT_LONG_TASK_THRESHOLD_MS: float = 50.0
DEFAULT_QUIET_WINDOW_MS: float = 5000.0
DEFAULT_MAX_CONCURRENT_REQUESTS: int = 2


class ModelQuietWindowConfig(BaseModel):
    """Thresholds for the first-interactive quiet-window search.

    Attributes:
        long_task_threshold_ms: Busy intervals strictly longer than this are
            long tasks.
        quiet_window_ms: Required length of the quiet window.
        max_concurrent_requests: Most requests allowed in flight at any
            instant of the window.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    long_task_threshold_ms: float = Field(
        default=DEFAULT_LONG_TASK_THRESHOLD_MS,
        gt=0.0,
        description="Busy intervals longer than this are long tasks",
    )
    quiet_window_ms: float = Field(
        default=DEFAULT_QUIET_WINDOW_MS,
        gt=0.0,
        description="Length of the required quiet window",
    )
    max_concurrent_requests: int = Field(
        default=DEFAULT_MAX_CONCURRENT_REQUESTS,
        ge=0,
        description="Most network requests allowed in flight during the window",
    )

    @property
    def quiet_window_micros(self) -> int:
        return round(self.quiet_window_ms * MICROS_PER_MILLISECOND)

    @property
    def long_task_threshold_micros(self) -> float:
        return self.long_task_threshold_ms * MICROS_PER_MILLISECOND


class QuietWindowSettings(BaseSettings):
    """Pydantic Settings for the quiet-window search, loaded from environment."""

    model_config = SettingsConfigDict(
        env_prefix="TRACESCORE_QUIET_WINDOW_",
        extra="ignore",
    )

    long_task_threshold_ms: float = Field(
        default=DEFAULT_LONG_TASK_THRESHOLD_MS, gt=0.0
    )
    quiet_window_ms: float = Field(default=DEFAULT_QUIET_WINDOW_MS, gt=0.0)
    max_concurrent_requests: int = Field(
        default=DEFAULT_MAX_CONCURRENT_REQUESTS, ge=0
    )

    def to_config(self) -> ModelQuietWindowConfig:
        """Convert settings to a frozen ModelQuietWindowConfig instance."""
        return ModelQuietWindowConfig(
            long_task_threshold_ms=self.long_task_threshold_ms,
            quiet_window_ms=self.quiet_window_ms,
            max_concurrent_requests=self.max_concurrent_requests,
        )


__all__ = [
    "DEFAULT_LONG_TASK_THRESHOLD_MS",
    "DEFAULT_MAX_CONCURRENT_REQUESTS",
    "DEFAULT_QUIET_WINDOW_MS",
    "ModelQuietWindowConfig",
    "QuietWindowSettings",
]
