# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Unit tests for the log-normal scoring curve.

Tests cover:
    - Calibration points (median scores 50, control point scores 90)
    - Monotonicity and clamping
    - Construction-time validation
    - Ratings
"""

from __future__ import annotations

import math

import pytest
from pydantic import ValidationError

from tracescore.enums import EnumScoreRating
from tracescore.scoring import (
    LogNormalScoringCurve,
    ModelScoreCurveParams,
    rate_score,
)

CALIBRATIONS = [(10000, 1700), (4000, 1600), (2000, 50), (100, 99.9)]


@pytest.fixture
def first_interactive_curve() -> LogNormalScoringCurve:
    return LogNormalScoringCurve.from_calibration(10000, 1700)


@pytest.mark.unit
class TestCalibration:
    """The two calibration points pin the curve."""

    def test_control_point_percentile(
        self, first_interactive_curve: LogNormalScoringCurve
    ) -> None:
        """The point of diminishing returns outperforms 90% of pages."""
        assert first_interactive_curve.percentile(1700) == pytest.approx(0.9)
        assert first_interactive_curve.score(1700) == 90

    def test_median_percentile(
        self, first_interactive_curve: LogNormalScoringCurve
    ) -> None:
        """The median scores exactly 50."""
        assert first_interactive_curve.percentile(10000) == pytest.approx(0.5)
        assert first_interactive_curve.score(10000) == 50

    @pytest.mark.parametrize(("median", "control"), CALIBRATIONS)
    def test_median_is_half_for_any_calibration(
        self, median: float, control: float
    ) -> None:
        """percentile(median) == 0.5 whatever the control point."""
        curve = LogNormalScoringCurve.from_calibration(median, control)
        assert curve.percentile(median) == pytest.approx(0.5, abs=1e-12)
        assert curve.percentile(control) == pytest.approx(0.9, abs=1e-9)

    def test_location_is_log_median(
        self, first_interactive_curve: LogNormalScoringCurve
    ) -> None:
        """exp(location) is the median."""
        assert math.exp(first_interactive_curve.location) == pytest.approx(10000)
        assert first_interactive_curve.shape > 0

    def test_from_params_matches_from_calibration(self) -> None:
        """Both constructors build the same curve."""
        params = ModelScoreCurveParams(median_ms=10000, control_point_ms=1700)
        assert LogNormalScoringCurve.from_params(
            params
        ) == LogNormalScoringCurve.from_calibration(10000, 1700)


@pytest.mark.unit
class TestScoreBounds:
    """Scores are integers in [0, 100]."""

    @pytest.mark.parametrize(
        "value", [0, 1e-9, 1, 500, 1700, 10000, 50000, 1e7, 1e300]
    )
    def test_score_is_clamped_integer(
        self, first_interactive_curve: LogNormalScoringCurve, value: float
    ) -> None:
        """Any non-negative value yields an int in [0, 100]."""
        score = first_interactive_curve.score(value)
        assert isinstance(score, int)
        assert 0 <= score <= 100

    def test_extremes(self, first_interactive_curve: LogNormalScoringCurve) -> None:
        """0 ms is perfect and ten million ms is worthless."""
        assert first_interactive_curve.score(0) == 100
        assert first_interactive_curve.score(10_000_000) == 0

    def test_zero_has_full_percentile(
        self, first_interactive_curve: LogNormalScoringCurve
    ) -> None:
        """Non-positive values outperform everyone."""
        assert first_interactive_curve.percentile(0) == 1.0
        assert first_interactive_curve.cdf(0) == 0.0

    @pytest.mark.parametrize("value", [-1, -0.001, math.nan])
    def test_invalid_raw_value_is_rejected(
        self, first_interactive_curve: LogNormalScoringCurve, value: float
    ) -> None:
        """Negative and NaN values are caller bugs."""
        with pytest.raises(ValueError, match="non-negative"):
            first_interactive_curve.score(value)

    def test_infinite_value_scores_zero(
        self, first_interactive_curve: LogNormalScoringCurve
    ) -> None:
        """An unbounded value is simply the worst score."""
        assert first_interactive_curve.score(math.inf) == 0


@pytest.mark.unit
class TestMonotonicity:
    """Larger raw values never score better."""

    @pytest.mark.parametrize(("median", "control"), CALIBRATIONS)
    def test_percentile_is_non_increasing(
        self, median: float, control: float
    ) -> None:
        curve = LogNormalScoringCurve.from_calibration(median, control)
        values = [0, 1, 10, 50, 100, 500, 1000, 1700, 5000, 10000, 1e5, 1e7]

        percentiles = [curve.percentile(v) for v in values]
        scores = [curve.score(v) for v in values]

        assert percentiles == sorted(percentiles, reverse=True)
        assert scores == sorted(scores, reverse=True)

    def test_scoring_is_deterministic(
        self, first_interactive_curve: LogNormalScoringCurve
    ) -> None:
        """A curve is a pure function of its calibration."""
        other = LogNormalScoringCurve.from_calibration(10000, 1700)
        for value in (123.4, 4567.8, 9999.9):
            assert first_interactive_curve.score(value) == other.score(value)


@pytest.mark.unit
class TestCurveParams:
    """Construction-time validation of calibration pairs."""

    @pytest.mark.parametrize(
        ("median", "control"),
        [(1700, 10000), (5000, 5000), (0, -1), (100, 0), (-10, -20)],
    )
    def test_invalid_calibration_fails_fast(
        self, median: float, control: float
    ) -> None:
        """control_point_ms must be positive and below median_ms."""
        with pytest.raises(ValidationError):
            LogNormalScoringCurve.from_calibration(median, control)

    def test_params_are_frozen(self) -> None:
        """Calibration cannot change after construction."""
        params = ModelScoreCurveParams(median_ms=10000, control_point_ms=1700)
        with pytest.raises(ValidationError):
            params.median_ms = 1  # type: ignore[misc]


@pytest.mark.unit
class TestRateScore:
    """Score ratings used by the reporting layer."""

    @pytest.mark.parametrize(
        ("score", "rating"),
        [
            (0, EnumScoreRating.FAIL),
            (10, EnumScoreRating.FAIL),
            (44, EnumScoreRating.FAIL),
            (45, EnumScoreRating.AVERAGE),
            (55, EnumScoreRating.AVERAGE),
            (74, EnumScoreRating.AVERAGE),
            (75, EnumScoreRating.PASS),
            (80, EnumScoreRating.PASS),
            (100, EnumScoreRating.PASS),
        ],
    )
    def test_rating_thresholds(self, score: int, rating: EnumScoreRating) -> None:
        assert rate_score(score) is rating
