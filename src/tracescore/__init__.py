# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""TraceScore - page-load performance metrics from browser traces.

This package turns a captured browser trace (Chrome trace-event format) into
scored performance metrics:

    raw trace -> parsed trace -> timeline model -> quiet window -> score

Quick Start - First Interactive:
    >>> from tracescore import ArtifactsBag, evaluate_metric
    >>> artifacts = ArtifactsBag.from_traces({"defaultPass": raw_trace})
    >>> result = evaluate_metric("first-interactive", artifacts)
    >>> result.score  # 0 to 100, or None when the metric is unavailable
    90
    >>> result.display_value
    '1,700ms'
"""

from tracescore.artifacts import (
    ArtifactsBag,
    ComputedArtifactCache,
    MissingArtifactError,
)
from tracescore.nodes.node_metric_audit_compute.handlers import (
    build_metric_definitions,
    evaluate_metric,
    evaluate_metrics_concurrently,
)
from tracescore.nodes.node_metric_audit_compute.models import ModelAuditResult
from tracescore.nodes.node_trace_event_parser_compute.handlers import (
    TraceParseError,
    parse_trace_events,
)
from tracescore.scoring import LogNormalScoringCurve

__version__ = "0.1.0"

__all__ = [
    "ArtifactsBag",
    "ComputedArtifactCache",
    "LogNormalScoringCurve",
    "MissingArtifactError",
    "ModelAuditResult",
    "TraceParseError",
    "build_metric_definitions",
    "evaluate_metric",
    "evaluate_metrics_concurrently",
    "parse_trace_events",
]
