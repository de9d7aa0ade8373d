"""Closed set of metric definitions, dispatched by metric name."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from tracescore.constants import TRACES_ARTIFACT
from tracescore.enums import EnumScoringMode
from tracescore.nodes.node_metric_audit_compute.handlers.handler_display import (
    format_optimal_value,
)
from tracescore.nodes.node_metric_audit_compute.models import (
    FirstInteractiveSettings,
    ModelMetricDefinition,
    ModelMetricMeta,
)
from tracescore.scoring import LogNormalScoringCurve

FIRST_INTERACTIVE_METRIC = "first-interactive"


def build_first_interactive_definition(
    settings: FirstInteractiveSettings | None = None,
) -> ModelMetricDefinition:
    """Build the first-interactive definition from environment-driven settings."""
    settings = settings or FirstInteractiveSettings()
    return ModelMetricDefinition(
        meta=ModelMetricMeta(
            name=FIRST_INTERACTIVE_METRIC,
            category="Performance",
            description="First Interactive (beta)",
            help_text=(
                "The first point at which necessary scripts of the page have "
                "loaded and the CPU is idle enough to handle most user input."
            ),
            required_artifacts=(TRACES_ARTIFACT,),
            optimal_value_label=format_optimal_value(settings.scoring_target_ms),
            scoring_mode=EnumScoringMode.NUMERIC,
        ),
        curve=LogNormalScoringCurve.from_params(settings.to_curve_params()),
        quiet_window=settings.to_quiet_window_config(),
        pass_name=settings.pass_name,
    )


def build_metric_definitions(
    first_interactive_settings: FirstInteractiveSettings | None = None,
) -> Mapping[str, ModelMetricDefinition]:
    """Return every known metric definition keyed by metric name.

    Curves are constructed here, once, and owned by the returned mapping.
    """
    definitions = [build_first_interactive_definition(first_interactive_settings)]
    return MappingProxyType({d.meta.name: d for d in definitions})


__all__ = [
    "FIRST_INTERACTIVE_METRIC",
    "build_first_interactive_definition",
    "build_metric_definitions",
]
