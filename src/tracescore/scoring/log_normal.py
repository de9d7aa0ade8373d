# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Log-normal scoring curve.

Maps a raw millisecond value to a 0-100 score. The underlying distribution
is log-normal with location ``ln(median_ms)``, which puts the 50th
percentile exactly at the median. The shape is solved so that the CDF at the
control point is 0.1, i.e. the control point outperforms 90% of the
reference population.

Usage:
    curve = LogNormalScoringCurve.from_calibration(10000, 1700)
    curve.percentile(1700)  # ~0.9
    curve.score(10000)      # 50
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from statistics import NormalDist

from tracescore.constants import (
    PERCENTAGE_MULTIPLIER,
    RATING_AVERAGE_THRESHOLD,
    RATING_PASS_THRESHOLD,
)
from tracescore.enums import EnumScoreRating
from tracescore.scoring.model_score_curve_params import ModelScoreCurveParams

CONTROL_POINT_PERCENTILE: float = 0.9
"""Complementary percentile assigned to the control point."""

_MIN_SCORE = 0
_MAX_SCORE = 100


@dataclass(frozen=True)
class LogNormalScoringCurve:
    """Complementary log-normal CDF calibrated by a median and a control point.

    Instances are immutable and cheap to share; build one per metric and
    reuse it for every page scored by that metric.
    """

    params: ModelScoreCurveParams
    location: float
    shape: float

    @classmethod
    def from_calibration(
        cls, median_ms: float, control_point_ms: float
    ) -> LogNormalScoringCurve:
        """Build a curve from its two calibration points.

        Raises:
            pydantic.ValidationError: If a point is not positive or the
                control point is not below the median.
        """
        return cls.from_params(
            ModelScoreCurveParams(
                median_ms=median_ms, control_point_ms=control_point_ms
            )
        )

    @classmethod
    def from_params(cls, params: ModelScoreCurveParams) -> LogNormalScoringCurve:
        location = math.log(params.median_ms)
        z = NormalDist().inv_cdf(CONTROL_POINT_PERCENTILE)
        shape = math.log(params.median_ms / params.control_point_ms) / z
        return cls(params=params, location=location, shape=shape)

    def cdf(self, value_ms: float) -> float:
        """Fraction of the reference population at or below ``value_ms``."""
        if value_ms <= 0:
            return 0.0
        return NormalDist(self.location, self.shape).cdf(math.log(value_ms))

    def percentile(self, value_ms: float) -> float:
        """Complementary percentile: the fraction of the population outperformed.

        Monotonically non-increasing in ``value_ms``; 1.0 for values <= 0.
        """
        return 1.0 - self.cdf(value_ms)

    def score(self, value_ms: float) -> int:
        """Integer score in [0, 100] for a non-negative raw value.

        Raises:
            ValueError: If ``value_ms`` is negative or not a number.
        """
        if math.isnan(value_ms) or value_ms < 0:
            raise ValueError(f"raw value must be non-negative, got {value_ms}")
        raw = PERCENTAGE_MULTIPLIER * self.percentile(value_ms)
        clamped = min(_MAX_SCORE, max(_MIN_SCORE, raw))
        # Round half up
        return math.floor(clamped + 0.5)


def rate_score(score: int) -> EnumScoreRating:
    """Map a 0-100 score to pass/average/fail."""
    if score >= RATING_PASS_THRESHOLD:
        return EnumScoreRating.PASS
    if score >= RATING_AVERAGE_THRESHOLD:
        return EnumScoreRating.AVERAGE
    return EnumScoreRating.FAIL


__all__ = ["CONTROL_POINT_PERCENTILE", "LogNormalScoringCurve", "rate_score"]
