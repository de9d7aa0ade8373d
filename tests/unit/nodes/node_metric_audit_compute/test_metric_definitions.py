"""Unit tests for metric definitions, settings and display formatting."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from tracescore.enums import EnumAuditStatus, EnumScoringMode
from tracescore.nodes.node_metric_audit_compute.handlers import (
    FIRST_INTERACTIVE_METRIC,
    build_first_interactive_definition,
    build_metric_definitions,
    format_milliseconds,
    format_optimal_value,
)
from tracescore.nodes.node_metric_audit_compute.models import (
    FirstInteractiveSettings,
    ModelAuditResult,
)


@pytest.mark.unit
class TestFirstInteractiveDefinition:
    """Tests for the first-interactive metric definition."""

    def test_meta(self) -> None:
        """Static metadata matches the published audit."""
        meta = build_metric_definitions()[FIRST_INTERACTIVE_METRIC].meta

        assert meta.name == "first-interactive"
        assert meta.category == "Performance"
        assert meta.description == "First Interactive (beta)"
        assert meta.help_text.startswith("The first point at which")
        assert meta.required_artifacts == ("traces",)
        assert meta.optimal_value_label == "5,000ms"
        assert meta.scoring_mode is EnumScoringMode.NUMERIC

    def test_default_calibration(self) -> None:
        """Median 10000 ms and point of diminishing returns 1700 ms."""
        definition = build_first_interactive_definition()

        assert definition.curve.params.median_ms == 10000
        assert definition.curve.params.control_point_ms == 1700
        assert definition.quiet_window.quiet_window_ms == 5000
        assert definition.pass_name == "defaultPass"

    def test_settings_from_environment(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Calibration and thresholds come from TRACESCORE_FIRST_INTERACTIVE_*."""
        prefix = "TRACESCORE_FIRST_INTERACTIVE_"
        monkeypatch.setenv(f"{prefix}SCORING_MEDIAN_MS", "8000")
        monkeypatch.setenv(
            f"{prefix}SCORING_POINT_OF_DIMINISHING_RETURNS_MS", "2000"
        )
        monkeypatch.setenv(f"{prefix}SCORING_TARGET_MS", "3500")
        monkeypatch.setenv(f"{prefix}QUIET_WINDOW_MS", "3000")
        monkeypatch.setenv(f"{prefix}MAX_CONCURRENT_REQUESTS", "1")

        definition = build_first_interactive_definition()

        assert definition.curve.score(8000) == 50
        assert definition.curve.score(2000) == 90
        assert definition.meta.optimal_value_label == "3,500ms"
        assert definition.quiet_window.quiet_window_ms == 3000
        assert definition.quiet_window.max_concurrent_requests == 1

    def test_explicit_settings(self) -> None:
        """Settings can be passed instead of read from the environment."""
        settings = FirstInteractiveSettings(long_task_threshold_ms=100)

        definitions = build_metric_definitions(settings)

        quiet_window = definitions[FIRST_INTERACTIVE_METRIC].quiet_window
        assert quiet_window.long_task_threshold_ms == 100

    def test_invalid_calibration_fails_fast(self) -> None:
        """A control point above the median is a configuration bug."""
        settings = FirstInteractiveSettings(
            scoring_median_ms=1000, scoring_point_of_diminishing_returns_ms=2000
        )

        with pytest.raises(ValidationError):
            build_metric_definitions(settings)


@pytest.mark.unit
class TestDisplayFormatting:
    """Tests for display value formatting."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (0, "0ms"),
            (4.9, "0ms"),
            (5, "10ms"),
            (4234.7, "4,230ms"),
            (4235, "4,240ms"),
            (12_345_678, "12,345,680ms"),
        ],
    )
    def test_format_milliseconds(self, value: float, expected: str) -> None:
        assert format_milliseconds(value) == expected

    def test_format_optimal_value(self) -> None:
        assert format_optimal_value(5000) == "5,000ms"


@pytest.mark.unit
class TestModelAuditResult:
    """Tests for result validation."""

    def test_success_requires_score(self) -> None:
        with pytest.raises(ValidationError):
            ModelAuditResult(metric_name="m", status=EnumAuditStatus.SUCCESS)

    def test_failure_may_not_carry_score(self) -> None:
        with pytest.raises(ValidationError):
            ModelAuditResult(
                metric_name="m", status=EnumAuditStatus.METRIC_UNAVAILABLE, score=10
            )

    @pytest.mark.parametrize("score", [-1, 101])
    def test_score_range(self, score: int) -> None:
        with pytest.raises(ValidationError):
            ModelAuditResult(
                metric_name="m",
                status=EnumAuditStatus.SUCCESS,
                score=score,
                raw_value_ms=1.0,
            )
