# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""
Shared Constants for TraceScore.

This module defines constants used across multiple modules to avoid magic numbers
and keep the trace-event vocabulary in one place.

Usage:
    from tracescore.constants import MICROS_PER_MILLISECOND

    time_in_ms = timestamp_micros / MICROS_PER_MILLISECOND
"""

# =============================================================================
# Units
# =============================================================================

MICROS_PER_MILLISECOND: int = 1000
"""Trace timestamps are integer microseconds; metrics are reported in ms."""

PERCENTAGE_MULTIPLIER: int = 100
"""
Multiplier for converting percentiles (0.0-1.0) to scores (0-100).
"""

# =============================================================================
# Artifacts
# =============================================================================

TRACES_ARTIFACT: str = "traces"
"""Artifact name under which the gatherer stores one raw trace per pass."""

DEFAULT_PASS: str = "defaultPass"
"""Pass name of the trace used by metrics unless told otherwise."""

# =============================================================================
# Trace-event vocabulary (Chrome trace-event format)
# =============================================================================

TRACE_EVENTS_KEY: str = "traceEvents"
"""Key holding the event array when a trace is wrapped in an object."""

MAIN_FRAME_ARG: str = "isMainFrame"
"""Argument marking the event that identifies the main thread."""

MAIN_FRAME_FALLBACK_EVENT: str = "TracingStartedInPage"
"""Event whose thread is the main thread when no explicit marker exists."""

NAVIGATION_START_EVENT: str = "navigationStart"
"""Instant used as the time origin for reported metric values."""

DOM_CONTENT_LOADED_EVENT: str = "domContentLoadedEventEnd"
"""Instant from which the first-interactive search starts by default."""

REQUEST_START_EVENTS: tuple[str, ...] = ("ResourceSendRequest",)
"""Events opening a network request interval."""

REQUEST_END_EVENTS: tuple[str, ...] = ("ResourceFinish",)
"""Events closing a network request interval."""

# =============================================================================
# Score ratings
# =============================================================================

RATING_PASS_THRESHOLD: int = 75
"""Scores at or above this value are rated ``pass``."""

RATING_AVERAGE_THRESHOLD: int = 45
"""Scores at or above this value (and below pass) are rated ``average``."""


__all__ = [
    "DEFAULT_PASS",
    "DOM_CONTENT_LOADED_EVENT",
    "MAIN_FRAME_ARG",
    "MAIN_FRAME_FALLBACK_EVENT",
    "MICROS_PER_MILLISECOND",
    "NAVIGATION_START_EVENT",
    "PERCENTAGE_MULTIPLIER",
    "RATING_AVERAGE_THRESHOLD",
    "RATING_PASS_THRESHOLD",
    "REQUEST_END_EVENTS",
    "REQUEST_START_EVENTS",
    "TRACES_ARTIFACT",
    "TRACE_EVENTS_KEY",
]
