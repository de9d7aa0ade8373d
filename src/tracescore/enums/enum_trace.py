"""Trace-related enums for TraceScore.

This module contains the phase codes accepted by the trace-event parser and
the kinds of non-fatal anomalies recorded while reconstructing a timeline.
"""

from enum import Enum


class EnumTracePhase(str, Enum):
    """Trace-event phases understood by the parser.

    Values are the Chrome trace-event ``ph`` codes. The lowercase instant
    code ``i`` is normalized to ``INSTANT`` by the parser. Navigation timing
    marks such as ``navigationStart`` use ``R``.

    Example:
        >>> from tracescore.enums import EnumTracePhase
        >>> EnumTracePhase("X") is EnumTracePhase.COMPLETE
        True
    """

    BEGIN = "B"
    END = "E"
    COMPLETE = "X"
    INSTANT = "I"
    MARK = "R"
    METADATA = "M"


class EnumTraceAnomalyKind(str, Enum):
    """Non-fatal problems found while parsing a trace or building a timeline."""

    UNMATCHED_END = "unmatched_end"
    UNTERMINATED_TASK = "unterminated_task"
    OVERLAPPING_TASK = "overlapping_task"
    DUPLICATE_REQUEST = "duplicate_request"
    UNMATCHED_REQUEST_END = "unmatched_request_end"


__all__ = ["EnumTraceAnomalyKind", "EnumTracePhase"]
