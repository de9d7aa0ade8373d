"""Models for Metric Audit Compute Node."""

from tracescore.nodes.node_metric_audit_compute.models.model_audit_result import (
    ModelAuditResult,
)
from tracescore.nodes.node_metric_audit_compute.models.model_first_interactive_settings import (
    SCORING_MEDIAN_MS,
    SCORING_POINT_OF_DIMINISHING_RETURNS_MS,
    SCORING_TARGET_MS,
    FirstInteractiveSettings,
)
from tracescore.nodes.node_metric_audit_compute.models.model_metric_audit_input import (
    ModelMetricAuditInput,
)
from tracescore.nodes.node_metric_audit_compute.models.model_metric_definition import (
    ModelMetricDefinition,
)
from tracescore.nodes.node_metric_audit_compute.models.model_metric_meta import (
    ModelMetricMeta,
)

__all__ = [
    "SCORING_MEDIAN_MS",
    "SCORING_POINT_OF_DIMINISHING_RETURNS_MS",
    "SCORING_TARGET_MS",
    "FirstInteractiveSettings",
    "ModelAuditResult",
    "ModelMetricAuditInput",
    "ModelMetricDefinition",
    "ModelMetricMeta",
]
