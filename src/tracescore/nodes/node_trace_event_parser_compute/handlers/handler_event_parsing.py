# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Pure trace-event parsing logic for Trace Event Parser Compute.

This module contains pure functions that validate raw trace-event records and
pair Begin/End events into task spans using one explicit stack per thread.
No I/O operations, no global state mutations.

Error Handling: Fatal problems raise TraceParseError. Per-event problems are
recorded as anomalies and never abort the parse.
Correlation ID: Threaded through all functions for end-to-end tracing.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from tracescore.constants import TRACE_EVENTS_KEY
from tracescore.enums import EnumTraceAnomalyKind, EnumTracePhase
from tracescore.nodes.node_trace_event_parser_compute.handlers.exceptions import (
    TraceParseError,
)
from tracescore.nodes.node_trace_event_parser_compute.models import (
    ModelTaskSpan,
    ModelTrace,
    ModelTraceAnomaly,
    ModelTraceEvent,
)

logger = logging.getLogger(__name__)

# Parser version for tracking
PARSER_VERSION = "1.0.0"

# Chrome writes both "I" and the legacy "i" for instant events.
_PHASE_ALIASES: dict[str, EnumTracePhase] = {"i": EnumTracePhase.INSTANT}


def coerce_raw_events(raw_trace: Any) -> Sequence[Any]:
    """Return the event array of a raw trace.

    Args:
        raw_trace: Bare event array, or an object with a ``traceEvents`` key.

    Returns:
        The sequence of raw event records.

    Raises:
        TraceParseError: If no event array can be found.
    """
    if isinstance(raw_trace, Mapping):
        raw_trace = raw_trace.get(TRACE_EVENTS_KEY)
    if isinstance(raw_trace, (str, bytes)) or not isinstance(raw_trace, Sequence):
        raise TraceParseError("trace must be an event array or contain 'traceEvents'")
    return raw_trace


def parse_phase(code: Any) -> EnumTracePhase | None:
    """Map a raw ``ph`` code to a phase, or None for unsupported codes."""
    if not isinstance(code, str):
        return None
    if code in _PHASE_ALIASES:
        return _PHASE_ALIASES[code]
    try:
        return EnumTracePhase(code)
    except ValueError:
        return None


def _read_int(
    raw: Mapping[str, Any],
    key: str,
    index: int,
    *,
    default: int | None,
) -> int | None:
    value = raw.get(key)
    if value is None:
        return default
    # bool is an int subclass but never a valid trace number
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TraceParseError(
            f"'{key}' must be numeric, got {value!r}", event_index=index
        )
    return int(value)


def parse_raw_event(raw: Any, index: int) -> ModelTraceEvent | None:
    """Validate one raw trace-event record.

    Args:
        raw: The raw record (a mapping in Chrome trace-event format).
        index: Position of the record in the raw stream.

    Returns:
        The typed event, or None when its phase is not one we understand.

    Raises:
        TraceParseError: If the record is structurally unreadable.
    """
    if not isinstance(raw, Mapping):
        raise TraceParseError("trace event must be an object", event_index=index)

    phase = parse_phase(raw.get("ph"))
    if phase is None:
        return None

    timestamp = _read_int(raw, "ts", index, default=None)
    if timestamp is None:
        if phase is not EnumTracePhase.METADATA:
            raise TraceParseError("trace event is missing 'ts'", event_index=index)
        timestamp = 0

    duration = _read_int(raw, "dur", index, default=None)
    if duration is not None and duration < 0:
        raise TraceParseError(f"negative duration {duration}", event_index=index)

    args = raw.get("args") or {}
    if not isinstance(args, Mapping):
        raise TraceParseError("'args' must be an object", event_index=index)

    return ModelTraceEvent(
        index=index,
        name=str(raw.get("name") or ""),
        category=str(raw.get("cat") or ""),
        phase=phase,
        timestamp_micros=timestamp,
        duration_micros=duration,
        process_id=_read_int(raw, "pid", index, default=0),
        thread_id=_read_int(raw, "tid", index, default=0),
        args=dict(args),
    )


def _span_from_events(
    index: int,
    opening: ModelTraceEvent,
    end_micros: int,
) -> ModelTaskSpan:
    return ModelTaskSpan(
        index=index,
        name=opening.name,
        category=opening.category,
        process_id=opening.process_id,
        thread_id=opening.thread_id,
        start_micros=opening.timestamp_micros,
        end_micros=end_micros,
    )


def _anomaly(
    kind: EnumTraceAnomalyKind,
    message: str,
    event: ModelTraceEvent,
    *,
    correlation_id: str | None,
) -> ModelTraceAnomaly:
    logger.warning(
        "Trace anomaly (%s): %s",
        kind.value,
        message,
        extra={"correlation_id": correlation_id},
    )
    return ModelTraceAnomaly(
        kind=kind,
        message=message,
        event_name=event.name or None,
        timestamp_micros=event.timestamp_micros,
        process_id=event.process_id,
        thread_id=event.thread_id,
    )


def compute_trace_bounds(events: Sequence[ModelTraceEvent]) -> tuple[int, int]:
    """Return (start, end) micros over all timed (non-metadata) events."""
    timed = [e for e in events if e.phase is not EnumTracePhase.METADATA]
    if not timed:
        return (0, 0)
    start = timed[0].timestamp_micros
    end = max(e.timestamp_micros + (e.duration_micros or 0) for e in timed)
    return (start, end)


def parse_trace_events(
    raw_trace: Any,
    *,
    correlation_id: str | None = None,
) -> ModelTrace:
    """Parse a raw trace into a validated, immutable ModelTrace.

    Begin pushes onto the stack of its thread; End pops the matching Begin to
    form a task span. A Complete event with an explicit duration forms a span
    directly. Unmatched Ends are dropped and recorded as anomalies; Begins
    still open at the end of the stream are closed at the trace end.

    Args:
        raw_trace: Raw trace as supplied by the gatherer.
        correlation_id: Correlation ID for tracing.

    Returns:
        ModelTrace holding events in original order, spans and anomalies.

    Raises:
        TraceParseError: If the trace is unreadable or timestamps decrease.
    """
    raw_events = coerce_raw_events(raw_trace)

    logger.debug(
        "Parsing %d raw trace events",
        len(raw_events),
        extra={"correlation_id": correlation_id},
    )

    events: list[ModelTraceEvent] = []
    spans: list[ModelTaskSpan] = []
    anomalies: list[ModelTraceAnomaly] = []
    stacks: dict[tuple[int, int], list[ModelTraceEvent]] = {}
    ignored = 0
    last_timestamp: int | None = None

    for index, raw in enumerate(raw_events):
        event = parse_raw_event(raw, index)
        if event is None:
            ignored += 1
            continue

        # Metadata events carry no meaningful time and are exempt from ordering
        if event.phase is not EnumTracePhase.METADATA:
            if last_timestamp is not None and event.timestamp_micros < last_timestamp:
                raise TraceParseError(
                    f"timestamp {event.timestamp_micros} precedes {last_timestamp}",
                    event_index=index,
                )
            last_timestamp = event.timestamp_micros

        events.append(event)

        if event.phase is EnumTracePhase.BEGIN:
            stacks.setdefault(event.thread_key, []).append(event)

        elif event.phase is EnumTracePhase.END:
            stack = stacks.get(event.thread_key)
            if not stack:
                anomalies.append(
                    _anomaly(
                        EnumTraceAnomalyKind.UNMATCHED_END,
                        f"End '{event.name}' with no open Begin",
                        event,
                        correlation_id=correlation_id,
                    )
                )
                continue
            if event.name and event.name != stack[-1].name:
                anomalies.append(
                    _anomaly(
                        EnumTraceAnomalyKind.UNMATCHED_END,
                        f"End '{event.name}' does not match open Begin '{stack[-1].name}'",
                        event,
                        correlation_id=correlation_id,
                    )
                )
                continue
            opening = stack.pop()
            spans.append(_span_from_events(len(spans), opening, event.timestamp_micros))

        elif event.phase is EnumTracePhase.COMPLETE and event.duration_micros is not None:
            spans.append(
                _span_from_events(
                    len(spans),
                    event,
                    event.timestamp_micros + event.duration_micros,
                )
            )

    start_micros, end_micros = compute_trace_bounds(events)

    for thread_key in sorted(stacks):
        for opening in reversed(stacks[thread_key]):
            anomalies.append(
                _anomaly(
                    EnumTraceAnomalyKind.UNTERMINATED_TASK,
                    f"Begin '{opening.name}' never ended; closed at trace end",
                    opening,
                    correlation_id=correlation_id,
                )
            )
            spans.append(_span_from_events(len(spans), opening, end_micros))

    logger.debug(
        "Trace parsed: events=%d, spans=%d, anomalies=%d, ignored=%d",
        len(events),
        len(spans),
        len(anomalies),
        ignored,
        extra={"correlation_id": correlation_id},
    )

    return ModelTrace(
        events=tuple(events),
        task_spans=tuple(spans),
        anomalies=tuple(anomalies),
        start_micros=start_micros,
        end_micros=end_micros,
        ignored_event_count=ignored,
    )


__all__ = [
    "PARSER_VERSION",
    "coerce_raw_events",
    "compute_trace_bounds",
    "parse_phase",
    "parse_raw_event",
    "parse_trace_events",
]
