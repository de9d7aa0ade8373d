"""Metric definition: metadata plus the calibration it is scored with."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from tracescore.constants import DEFAULT_PASS
from tracescore.nodes.node_metric_audit_compute.models.model_metric_meta import (
    ModelMetricMeta,
)
from tracescore.nodes.node_quiet_window_compute.models import ModelQuietWindowConfig
from tracescore.scoring import LogNormalScoringCurve


class ModelMetricDefinition(BaseModel):
    """Everything needed to evaluate one metric.

    The scoring curve is built once here and reused for every page scored by
    the metric.
    """

    model_config = ConfigDict(
        frozen=True, extra="forbid", arbitrary_types_allowed=True
    )

    meta: ModelMetricMeta = Field(...)
    curve: LogNormalScoringCurve = Field(...)
    quiet_window: ModelQuietWindowConfig = Field(
        default_factory=ModelQuietWindowConfig
    )
    pass_name: str = Field(default=DEFAULT_PASS, description="Trace pass to read")


__all__ = ["ModelMetricDefinition"]
