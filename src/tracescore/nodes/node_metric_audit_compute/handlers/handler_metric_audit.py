# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Metric evaluation for Metric Audit Compute.

``evaluate_metric`` turns one artifacts bag into one scored ModelAuditResult.
Per-metric failures (missing artifact, missing main thread, no quiet window,
unknown metric name) are returned as unscored results so sibling metrics and
the rest of the report are unaffected. A TraceParseError is a trace-level
failure and propagates to the caller.

Usage:
    definitions = build_metric_definitions()
    cache = ComputedArtifactCache()
    result = evaluate_metric(
        "first-interactive", bag, definitions=definitions, cache=cache
    )
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any, NamedTuple

from tracescore.artifacts import (
    ArtifactsBag,
    ComputedArtifactCache,
    MissingArtifactError,
)
from tracescore.enums import EnumAuditStatus
from tracescore.nodes.node_metric_audit_compute.handlers.exceptions import (
    MetricUnavailableError,
    UnknownMetricError,
)
from tracescore.nodes.node_metric_audit_compute.handlers.handler_computed_artifacts import (
    request_first_interactive,
)
from tracescore.nodes.node_metric_audit_compute.handlers.handler_display import (
    format_milliseconds,
)
from tracescore.nodes.node_metric_audit_compute.handlers.handler_metric_definitions import (
    FIRST_INTERACTIVE_METRIC,
    build_metric_definitions,
)
from tracescore.nodes.node_metric_audit_compute.models import (
    ModelAuditResult,
    ModelMetricDefinition,
)
from tracescore.nodes.node_timeline_model_compute.handlers import MissingMainThreadError
from tracescore.scoring import rate_score

logger = logging.getLogger(__name__)

# Opaque formatter hint for the reporting layer
EXTENDED_INFO_FORMATTER = "null"


class MetricMeasurement(NamedTuple):
    """Raw value of a metric plus the derived artifact it was read from."""

    value_ms: float
    details: dict[str, Any]


MetricValueFn = Callable[
    [ArtifactsBag, ComputedArtifactCache, ModelMetricDefinition, str | None],
    MetricMeasurement,
]


def measure_first_interactive(
    artifacts: ArtifactsBag,
    cache: ComputedArtifactCache,
    definition: ModelMetricDefinition,
    correlation_id: str | None,
) -> MetricMeasurement:
    first_interactive = request_first_interactive(
        artifacts,
        cache,
        definition.quiet_window,
        pass_name=definition.pass_name,
        correlation_id=correlation_id,
    )
    # The curve is only defined for non-negative values
    if first_interactive.time_in_ms < 0:
        raise MetricUnavailableError(
            definition.meta.name,
            f"first interactive at {first_interactive.time_in_ms:g}ms "
            f"precedes the time origin {first_interactive.origin_micros}",
        )
    return MetricMeasurement(
        value_ms=first_interactive.time_in_ms,
        details=first_interactive.model_dump(mode="json"),
    )


METRIC_VALUE_FUNCTIONS: Mapping[str, MetricValueFn] = {
    FIRST_INTERACTIVE_METRIC: measure_first_interactive,
}


def _unavailable_result(
    metric_name: str,
    status: EnumAuditStatus,
    error: Exception,
    definition: ModelMetricDefinition | None,
    correlation_id: str | None,
) -> ModelAuditResult:
    logger.warning(
        "Metric '%s' not computed (%s): %s",
        metric_name,
        status.value,
        error,
        extra={"correlation_id": correlation_id},
    )
    if definition is None:
        return ModelAuditResult(
            metric_name=metric_name, status=status, error_message=str(error)
        )
    return ModelAuditResult(
        metric_name=metric_name,
        status=status,
        optimal_value_label=definition.meta.optimal_value_label,
        scoring_mode=definition.meta.scoring_mode,
        error_message=str(error),
    )


def evaluate_metric(
    metric_name: str,
    artifacts: ArtifactsBag,
    *,
    definitions: Mapping[str, ModelMetricDefinition] | None = None,
    cache: ComputedArtifactCache | None = None,
    correlation_id: str | None = None,
) -> ModelAuditResult:
    """Evaluate one metric against a read-only artifacts bag.

    Args:
        metric_name: Name of the metric (e.g. ``first-interactive``).
        artifacts: Gathered artifacts; never mutated.
        definitions: Metric definitions; defaults to build_metric_definitions().
        cache: Computed-artifact cache shared with sibling metrics. A private
            cache is used when omitted.
        correlation_id: Correlation ID for tracing.

    Returns:
        ModelAuditResult. Per-metric failures are returned, not raised.

    Raises:
        TraceParseError: If the trace the metric depends on is unreadable.
    """
    if definitions is None:
        definitions = build_metric_definitions()
    if cache is None:
        cache = ComputedArtifactCache()

    definition = definitions.get(metric_name)
    measure = METRIC_VALUE_FUNCTIONS.get(metric_name)
    if definition is None or measure is None:
        return _unavailable_result(
            metric_name,
            EnumAuditStatus.UNKNOWN_METRIC,
            UnknownMetricError(metric_name),
            definition,
            correlation_id,
        )

    logger.debug(
        "Evaluating metric '%s'",
        metric_name,
        extra={"correlation_id": correlation_id},
    )

    try:
        for artifact_name in definition.meta.required_artifacts:
            artifacts.require(artifact_name)
        measurement = measure(artifacts, cache, definition, correlation_id)
    except MissingArtifactError as e:
        return _unavailable_result(
            metric_name,
            EnumAuditStatus.MISSING_ARTIFACT,
            e,
            definition,
            correlation_id,
        )
    except MissingMainThreadError as e:
        return _unavailable_result(
            metric_name,
            EnumAuditStatus.MISSING_MAIN_THREAD,
            e,
            definition,
            correlation_id,
        )
    except MetricUnavailableError as e:
        return _unavailable_result(
            metric_name,
            EnumAuditStatus.METRIC_UNAVAILABLE,
            e,
            definition,
            correlation_id,
        )

    score = definition.curve.score(measurement.value_ms)

    logger.debug(
        "Metric '%s' scored %d (%.1fms)",
        metric_name,
        score,
        measurement.value_ms,
        extra={"correlation_id": correlation_id},
    )

    return ModelAuditResult(
        metric_name=metric_name,
        status=EnumAuditStatus.SUCCESS,
        score=score,
        raw_value_ms=measurement.value_ms,
        display_value=format_milliseconds(measurement.value_ms),
        optimal_value_label=definition.meta.optimal_value_label,
        rating=rate_score(score),
        scoring_mode=definition.meta.scoring_mode,
        extended_info={
            "value": measurement.details,
            "formatter": EXTENDED_INFO_FORMATTER,
        },
    )


async def evaluate_metric_async(
    metric_name: str,
    artifacts: ArtifactsBag,
    *,
    definitions: Mapping[str, ModelMetricDefinition] | None = None,
    cache: ComputedArtifactCache | None = None,
    correlation_id: str | None = None,
) -> ModelAuditResult:
    """Run evaluate_metric in a worker thread; evaluation is CPU-bound."""
    return await asyncio.to_thread(
        evaluate_metric,
        metric_name,
        artifacts,
        definitions=definitions,
        cache=cache,
        correlation_id=correlation_id,
    )


async def evaluate_metrics_concurrently(
    metric_names: Iterable[str],
    artifacts: ArtifactsBag,
    *,
    definitions: Mapping[str, ModelMetricDefinition] | None = None,
    cache: ComputedArtifactCache | None = None,
    correlation_id: str | None = None,
) -> list[ModelAuditResult]:
    """Evaluate several metrics in parallel over one shared cache.

    Derived artifacts (parsed trace, timeline model) are built once and shared
    by every metric reading the same trace. Results come back in the order of
    ``metric_names``.

    Raises:
        TraceParseError: If a trace is unreadable.
    """
    if definitions is None:
        definitions = build_metric_definitions()
    if cache is None:
        cache = ComputedArtifactCache()

    return list(
        await asyncio.gather(
            *(
                evaluate_metric_async(
                    name,
                    artifacts,
                    definitions=definitions,
                    cache=cache,
                    correlation_id=correlation_id,
                )
                for name in metric_names
            )
        )
    )


__all__ = [
    "EXTENDED_INFO_FORMATTER",
    "METRIC_VALUE_FUNCTIONS",
    "MetricMeasurement",
    "evaluate_metric",
    "evaluate_metric_async",
    "evaluate_metrics_concurrently",
    "measure_first_interactive",
]
