"""Display formatting for metric values."""

from __future__ import annotations

import math

DISPLAY_GRANULARITY_MS = 10


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def format_milliseconds(
    value_ms: float, granularity_ms: int = DISPLAY_GRANULARITY_MS
) -> str:
    """Format a millisecond value rounded to ``granularity_ms``.

    Example:
        >>> format_milliseconds(4234.7)
        '4,230ms'
    """
    rounded = round_half_up(value_ms / granularity_ms) * granularity_ms
    return f"{rounded:,}ms"


def format_optimal_value(target_ms: float) -> str:
    """Format a target value the way it is advertised, e.g. ``5,000ms``."""
    return f"{round_half_up(target_ms):,}ms"


__all__ = [
    "DISPLAY_GRANULARITY_MS",
    "format_milliseconds",
    "format_optimal_value",
    "round_half_up",
]
