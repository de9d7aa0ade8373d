# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Calibration settings for the first-interactive metric.

Environment variables:
    TRACESCORE_FIRST_INTERACTIVE_SCORING_MEDIAN_MS: float (default 10000)
    TRACESCORE_FIRST_INTERACTIVE_SCORING_POINT_OF_DIMINISHING_RETURNS_MS: float (default 1700)
    TRACESCORE_FIRST_INTERACTIVE_SCORING_TARGET_MS: float (default 5000)
    TRACESCORE_FIRST_INTERACTIVE_LONG_TASK_THRESHOLD_MS: float (default 50)
    TRACESCORE_FIRST_INTERACTIVE_QUIET_WINDOW_MS: float (default 5000)
    TRACESCORE_FIRST_INTERACTIVE_MAX_CONCURRENT_REQUESTS: int (default 2)
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from tracescore.constants import DEFAULT_PASS
from tracescore.nodes.node_quiet_window_compute.models import (
    DEFAULT_LONG_TASK_THRESHOLD_MS,
    DEFAULT_MAX_CONCURRENT_REQUESTS,
    DEFAULT_QUIET_WINDOW_MS,
    ModelQuietWindowConfig,
)
from tracescore.scoring import ModelScoreCurveParams

# Parameters (in ms) for log-normal scoring.
SCORING_MEDIAN_MS: float = 10000.0
SCORING_POINT_OF_DIMINISHING_RETURNS_MS: float = 1700.0
# External time-to-interactive target shown as the optimal value
SCORING_TARGET_MS: float = 5000.0


class FirstInteractiveSettings(BaseSettings):
    """Pydantic Settings for the first-interactive metric, loaded from environment."""

    model_config = SettingsConfigDict(
        env_prefix="TRACESCORE_FIRST_INTERACTIVE_",
        extra="ignore",
    )

    scoring_median_ms: float = Field(default=SCORING_MEDIAN_MS, gt=0.0)
    scoring_point_of_diminishing_returns_ms: float = Field(
        default=SCORING_POINT_OF_DIMINISHING_RETURNS_MS, gt=0.0
    )
    scoring_target_ms: float = Field(default=SCORING_TARGET_MS, gt=0.0)
    long_task_threshold_ms: float = Field(
        default=DEFAULT_LONG_TASK_THRESHOLD_MS, gt=0.0
    )
    quiet_window_ms: float = Field(default=DEFAULT_QUIET_WINDOW_MS, gt=0.0)
    max_concurrent_requests: int = Field(
        default=DEFAULT_MAX_CONCURRENT_REQUESTS, ge=0
    )
    pass_name: str = Field(default=DEFAULT_PASS)

    def to_curve_params(self) -> ModelScoreCurveParams:
        """Convert the calibration pair to frozen curve parameters.

        Raises:
            pydantic.ValidationError: If the control point is not below the median.
        """
        return ModelScoreCurveParams(
            median_ms=self.scoring_median_ms,
            control_point_ms=self.scoring_point_of_diminishing_returns_ms,
        )

    def to_quiet_window_config(self) -> ModelQuietWindowConfig:
        """Convert the search thresholds to a frozen ModelQuietWindowConfig."""
        return ModelQuietWindowConfig(
            long_task_threshold_ms=self.long_task_threshold_ms,
            quiet_window_ms=self.quiet_window_ms,
            max_concurrent_requests=self.max_concurrent_requests,
        )


__all__ = [
    "SCORING_MEDIAN_MS",
    "SCORING_POINT_OF_DIMINISHING_RETURNS_MS",
    "SCORING_TARGET_MS",
    "FirstInteractiveSettings",
]
