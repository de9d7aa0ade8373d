"""Domain-specific exceptions for Trace Event Parser Compute."""

from __future__ import annotations


class TraceParseError(Exception):
    """Raised when a trace cannot be used at all.

    This is a trace-level failure: every metric depending on the trace is
    skipped. Per-event problems are recorded as anomalies instead.

    Examples:
        - Timestamps decreasing within the stream
        - An event that is not a mapping
        - Missing or non-numeric timestamp, negative duration
    """

    def __init__(self, message: str, *, event_index: int | None = None) -> None:
        self.event_index = event_index
        if event_index is not None:
            message = f"{message} (event #{event_index})"
        super().__init__(message)


__all__ = ["TraceParseError"]
