"""Handlers for Metric Audit Compute Node."""

from tracescore.nodes.node_metric_audit_compute.handlers.exceptions import (
    MetricUnavailableError,
    UnknownMetricError,
)
from tracescore.nodes.node_metric_audit_compute.handlers.handler_computed_artifacts import (
    FIRST_INTERACTIVE_ARTIFACT_NAME,
    TIMELINE_MODEL_ARTIFACT_NAME,
    TRACE_ARTIFACT_NAME,
    request_first_interactive,
    request_timeline_model,
    request_trace,
    search_start_micros,
)
from tracescore.nodes.node_metric_audit_compute.handlers.handler_display import (
    format_milliseconds,
    format_optimal_value,
)
from tracescore.nodes.node_metric_audit_compute.handlers.handler_metric_audit import (
    EXTENDED_INFO_FORMATTER,
    METRIC_VALUE_FUNCTIONS,
    MetricMeasurement,
    evaluate_metric,
    evaluate_metric_async,
    evaluate_metrics_concurrently,
)
from tracescore.nodes.node_metric_audit_compute.handlers.handler_metric_definitions import (
    FIRST_INTERACTIVE_METRIC,
    build_first_interactive_definition,
    build_metric_definitions,
)

__all__ = [
    "EXTENDED_INFO_FORMATTER",
    "FIRST_INTERACTIVE_ARTIFACT_NAME",
    "FIRST_INTERACTIVE_METRIC",
    "METRIC_VALUE_FUNCTIONS",
    "TIMELINE_MODEL_ARTIFACT_NAME",
    "TRACE_ARTIFACT_NAME",
    "MetricMeasurement",
    "MetricUnavailableError",
    "UnknownMetricError",
    "build_first_interactive_definition",
    "build_metric_definitions",
    "evaluate_metric",
    "evaluate_metric_async",
    "evaluate_metrics_concurrently",
    "format_milliseconds",
    "format_optimal_value",
    "request_first_interactive",
    "request_timeline_model",
    "request_trace",
    "search_start_micros",
]
