# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Pure first-interactive search for Quiet Window Compute.

Scans the main thread for the first sufficiently quiet window after a start
instant. Candidates are the start instant itself and the end of every
main-thread long task after it, so the scan costs one window check per long
task instead of one per timestamp.

A window ``[t, t + quiet_window)`` qualifies when:
    - no long task is in progress at ``t``,
    - no long task begins inside the window, and
    - at most ``max_concurrent_requests`` requests are in flight at every
      instant of the window.

Candidates after the end of the trace are never considered; the window
itself may extend past it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from tracescore.constants import MICROS_PER_MILLISECOND
from tracescore.nodes.node_quiet_window_compute.models import (
    ModelFirstInteractive,
    ModelQuietWindow,
    ModelQuietWindowConfig,
)
from tracescore.nodes.node_timeline_model_compute.models import ModelTimelineModel

logger = logging.getLogger(__name__)


def iter_candidates(
    timeline: ModelTimelineModel,
    start_micros: int,
    config: ModelQuietWindowConfig,
) -> Iterator[int]:
    """Yield candidate instants in increasing order.

    The start instant comes first. If a long task is already running at the
    start, its end is the next candidate, followed by the ends of the long
    tasks starting at or after the start instant.
    """
    yield start_micros

    in_progress = timeline.busy_interval_at(start_micros)
    if (
        in_progress is not None
        and in_progress.start_micros < start_micros
        and in_progress.duration_micros > config.long_task_threshold_micros
    ):
        yield in_progress.end_micros

    for long_task in timeline.long_tasks_after(
        start_micros, config.long_task_threshold_ms
    ):
        yield long_task.end_micros


def window_disqualifier(
    timeline: ModelTimelineModel,
    t: int,
    config: ModelQuietWindowConfig,
) -> str | None:
    """Return why ``[t, t + quiet_window)`` is not quiet, or None if it is."""
    window_end = t + config.quiet_window_micros

    in_progress = timeline.busy_interval_at(t)
    if (
        in_progress is not None
        and in_progress.duration_micros > config.long_task_threshold_micros
    ):
        return f"long task in progress until {in_progress.end_micros}"

    next_long_task = next(
        timeline.long_tasks_after(t, config.long_task_threshold_ms), None
    )
    if next_long_task is not None and next_long_task.start_micros < window_end:
        return f"long task begins at {next_long_task.start_micros}"

    peak_requests = timeline.max_concurrent_requests_between(t, window_end)
    if peak_requests > config.max_concurrent_requests:
        return f"{peak_requests} concurrent requests"

    return None


def find_first_interactive(
    timeline: ModelTimelineModel,
    start_micros: int,
    config: ModelQuietWindowConfig | None = None,
    *,
    origin_micros: int = 0,
    correlation_id: str | None = None,
) -> ModelFirstInteractive | None:
    """Find the first instant after ``start_micros`` followed by a quiet window.

    Args:
        timeline: Timeline model of the trace.
        start_micros: Search start (typically DOMContentLoaded).
        config: Search thresholds; defaults to 50 ms / 5000 ms / 2 requests.
        origin_micros: Time origin for the reported ``time_in_ms``.
        correlation_id: Correlation ID for tracing.

    Returns:
        ModelFirstInteractive for the first qualifying candidate, or None
        when no candidate at or before the trace end qualifies.
    """
    config = config or ModelQuietWindowConfig()

    for t in iter_candidates(timeline, start_micros, config):
        if t > timeline.trace_end_micros:
            break
        reason = window_disqualifier(timeline, t, config)
        if reason is None:
            logger.debug(
                "Quiet window found at %d",
                t,
                extra={"correlation_id": correlation_id},
            )
            return ModelFirstInteractive(
                time_in_ms=(t - origin_micros) / MICROS_PER_MILLISECOND,
                origin_micros=origin_micros,
                timestamp_micros=t,
                start_micros=start_micros,
                quiet_window=ModelQuietWindow(
                    start_micros=t,
                    end_micros=t + config.quiet_window_micros,
                ),
            )
        logger.debug(
            "Candidate %d rejected: %s",
            t,
            reason,
            extra={"correlation_id": correlation_id},
        )

    logger.debug(
        "No quiet window after %d before trace end %d",
        start_micros,
        timeline.trace_end_micros,
        extra={"correlation_id": correlation_id},
    )
    return None


__all__ = [
    "find_first_interactive",
    "iter_candidates",
    "window_disqualifier",
]
