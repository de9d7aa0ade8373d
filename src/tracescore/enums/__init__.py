"""Enums for TraceScore."""

from tracescore.enums.enum_audit import (
    EnumAuditStatus,
    EnumScoreRating,
    EnumScoringMode,
)
from tracescore.enums.enum_trace import EnumTraceAnomalyKind, EnumTracePhase

__all__ = [
    "EnumAuditStatus",
    "EnumScoreRating",
    "EnumScoringMode",
    "EnumTraceAnomalyKind",
    "EnumTracePhase",
]
