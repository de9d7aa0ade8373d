"""Audit-related enums for TraceScore."""

from enum import Enum


class EnumAuditStatus(str, Enum):
    """Outcome of a single metric evaluation.

    Only ``SUCCESS`` carries a score. Every other member is a per-metric
    failure that leaves sibling metrics untouched.
    """

    SUCCESS = "success"
    MISSING_ARTIFACT = "missing_artifact"
    MISSING_MAIN_THREAD = "missing_main_thread"
    METRIC_UNAVAILABLE = "metric_unavailable"
    UNKNOWN_METRIC = "unknown_metric"


class EnumScoreRating(str, Enum):
    """Coarse rating of a 0-100 score used by the reporting layer."""

    PASS = "pass"
    AVERAGE = "average"
    FAIL = "fail"


class EnumScoringMode(str, Enum):
    """How an audit score is meant to be displayed."""

    NUMERIC = "numeric"
    BINARY = "binary"


__all__ = ["EnumAuditStatus", "EnumScoreRating", "EnumScoringMode"]
