"""Scoring curves for TraceScore metrics."""

from tracescore.scoring.log_normal import (
    CONTROL_POINT_PERCENTILE,
    LogNormalScoringCurve,
    rate_score,
)
from tracescore.scoring.model_score_curve_params import ModelScoreCurveParams

__all__ = [
    "CONTROL_POINT_PERCENTILE",
    "LogNormalScoringCurve",
    "ModelScoreCurveParams",
    "rate_score",
]
