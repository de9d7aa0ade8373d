"""Domain-specific exceptions for Timeline Model Compute."""

from __future__ import annotations


class MissingMainThreadError(Exception):
    """Raised when no event in the trace identifies the main thread.

    This is a per-metric failure: metrics that need the main thread report
    themselves unavailable, other metrics are unaffected.
    """

    pass


__all__ = ["MissingMainThreadError"]
