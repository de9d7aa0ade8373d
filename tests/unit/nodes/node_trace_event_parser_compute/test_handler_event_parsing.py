# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Unit tests for the trace-event parsing handler.

Tests cover:
    - Raw trace shapes (bare array, traceEvents object)
    - Phase handling, including unknown phases
    - Begin/End pairing with per-thread stacks
    - Complete events
    - Anomalies (unmatched End, unterminated Begin)
    - Fatal errors (decreasing timestamps, unreadable records)
"""

from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from tests.fixtures.trace_builders import (
    MAIN_PID,
    MAIN_TID,
    WORKER_TID,
    begin,
    complete,
    end,
    event,
    instant,
    main_frame_marker,
    thread_name,
)
from tracescore.enums import EnumTraceAnomalyKind, EnumTracePhase
from tracescore.nodes.node_trace_event_parser_compute.handlers import (
    TraceParseError,
    coerce_raw_events,
    compute_trace_bounds,
    parse_phase,
    parse_raw_event,
    parse_trace_events,
)

# =============================================================================
# Raw Input Shapes
# =============================================================================


@pytest.mark.unit
class TestCoerceRawEvents:
    """Tests for coerce_raw_events."""

    def test_accepts_bare_array(self) -> None:
        """A bare list of events is returned as is."""
        raw = [instant("A", 0)]
        assert coerce_raw_events(raw) is raw

    def test_accepts_trace_events_object(self) -> None:
        """An object with traceEvents yields the wrapped array."""
        events = [instant("A", 0)]
        assert coerce_raw_events({"traceEvents": events}) is events

    @pytest.mark.parametrize("raw", [None, "events", 42, {"events": []}])
    def test_rejects_unreadable_input(self, raw: object) -> None:
        """Anything without an event array is a fatal parse error."""
        with pytest.raises(TraceParseError):
            coerce_raw_events(raw)


@pytest.mark.unit
class TestParsePhase:
    """Tests for parse_phase."""

    @pytest.mark.parametrize(
        ("code", "expected"),
        [
            ("B", EnumTracePhase.BEGIN),
            ("E", EnumTracePhase.END),
            ("X", EnumTracePhase.COMPLETE),
            ("I", EnumTracePhase.INSTANT),
            ("i", EnumTracePhase.INSTANT),
            ("R", EnumTracePhase.MARK),
            ("M", EnumTracePhase.METADATA),
        ],
    )
    def test_known_phases(self, code: str, expected: EnumTracePhase) -> None:
        """Known phase codes map to their enum member."""
        assert parse_phase(code) is expected

    @pytest.mark.parametrize("code", ["b", "e", "C", "P", "", None, 1])
    def test_unknown_phases_return_none(self, code: object) -> None:
        """Unsupported codes are reported as None, not an error."""
        assert parse_phase(code) is None


@pytest.mark.unit
class TestParseRawEvent:
    """Tests for parse_raw_event."""

    def test_parses_complete_event(self) -> None:
        """All fields are carried over into the typed event."""
        parsed = parse_raw_event(
            complete("RunTask", 1_000, 250, args={"data": {"k": 1}}), 7
        )

        assert parsed is not None
        assert parsed.index == 7
        assert parsed.name == "RunTask"
        assert parsed.category == "devtools.timeline"
        assert parsed.phase is EnumTracePhase.COMPLETE
        assert parsed.timestamp_micros == 1_000
        assert parsed.duration_micros == 250
        assert parsed.thread_key == (MAIN_PID, MAIN_TID)
        assert parsed.data_arg("k") == 1

    def test_float_timestamps_are_truncated(self) -> None:
        """Chrome sometimes writes fractional microseconds."""
        parsed = parse_raw_event(instant("A", 1_500.75), 0)  # type: ignore[arg-type]
        assert parsed is not None
        assert parsed.timestamp_micros == 1_500

    def test_metadata_without_timestamp_is_accepted(self) -> None:
        """Metadata events may omit ts."""
        parsed = parse_raw_event(thread_name("CrRendererMain"), 0)
        assert parsed is not None
        assert parsed.phase is EnumTracePhase.METADATA
        assert parsed.timestamp_micros == 0

    def test_unknown_phase_is_skipped(self) -> None:
        """An unsupported phase yields None."""
        assert parse_raw_event(event("Sample", "P", 10), 0) is None

    def test_missing_timestamp_is_fatal(self) -> None:
        """Timed events must carry ts."""
        with pytest.raises(TraceParseError, match="missing 'ts'"):
            parse_raw_event(event("A", "I", None), 3)

    def test_error_message_names_event_index(self) -> None:
        """The offending event index is part of the message."""
        with pytest.raises(TraceParseError, match=r"event #3") as exc_info:
            parse_raw_event(event("A", "I", None), 3)
        assert exc_info.value.event_index == 3

    @pytest.mark.parametrize("ts", ["10", True, [1]])
    def test_non_numeric_timestamp_is_fatal(self, ts: object) -> None:
        """Strings, booleans and containers are not timestamps."""
        raw = instant("A", 0)
        raw["ts"] = ts
        with pytest.raises(TraceParseError, match="must be numeric"):
            parse_raw_event(raw, 0)

    def test_negative_duration_is_fatal(self) -> None:
        """A negative duration is rejected, not clamped."""
        with pytest.raises(TraceParseError, match="negative duration"):
            parse_raw_event(complete("A", 0, -5), 0)

    def test_non_mapping_args_is_fatal(self) -> None:
        """args must be an object."""
        raw = instant("A", 0)
        raw["args"] = ["x"]
        with pytest.raises(TraceParseError, match="'args' must be an object"):
            parse_raw_event(raw, 0)

    def test_non_mapping_record_is_fatal(self) -> None:
        """Every record must be an object."""
        with pytest.raises(TraceParseError, match="must be an object"):
            parse_raw_event(["B", 0], 0)

    def test_parsed_event_is_frozen(self) -> None:
        """Parsed events are immutable."""
        parsed = parse_raw_event(instant("A", 0), 0)
        assert parsed is not None
        with pytest.raises(ValidationError):
            parsed.name = "B"  # type: ignore[misc]


# =============================================================================
# Full Stream Parsing
# =============================================================================


@pytest.mark.unit
class TestParseTraceEvents:
    """Tests for parse_trace_events."""

    def test_begin_end_pairs_form_spans(self) -> None:
        """A Begin popped by its End forms one span."""
        trace = parse_trace_events(
            [main_frame_marker(), begin("Task", 100), end("Task", 400)]
        )

        assert len(trace.task_spans) == 1
        span = trace.task_spans[0]
        assert (span.name, span.start_micros, span.end_micros) == ("Task", 100, 400)
        assert trace.anomalies == ()

    def test_nested_begin_end_pairs(self) -> None:
        """Inner pairs close before outer pairs; spans are in formation order."""
        trace = parse_trace_events(
            [
                begin("Outer", 0),
                begin("Inner", 10),
                end("Inner", 20),
                end("Outer", 30),
            ]
        )

        assert [s.name for s in trace.task_spans] == ["Inner", "Outer"]
        assert [s.index for s in trace.task_spans] == [0, 1]

    def test_nameless_end_matches_innermost_begin(self) -> None:
        """Chrome writes End events without a name."""
        trace = parse_trace_events([begin("Task", 0), end("", 50)])

        assert len(trace.task_spans) == 1
        assert trace.task_spans[0].name == "Task"
        assert trace.anomalies == ()

    def test_stacks_are_per_thread(self) -> None:
        """An End on one thread never closes a Begin on another."""
        trace = parse_trace_events(
            [
                begin("Main", 0),
                begin("Worker", 5, tid=WORKER_TID),
                end("Main", 10),
                end("Worker", 15, tid=WORKER_TID),
            ]
        )

        spans = {s.name: s for s in trace.task_spans}
        assert spans["Main"].thread_key == (MAIN_PID, MAIN_TID)
        assert spans["Worker"].thread_key == (MAIN_PID, WORKER_TID)
        assert spans["Worker"].end_micros == 15

    def test_same_tid_in_different_processes_are_distinct_threads(self) -> None:
        """Thread identity is the (pid, tid) pair."""
        trace = parse_trace_events(
            [begin("A", 0, pid=1), begin("B", 5, pid=2), end("A", 10, pid=1)]
        )

        spans = {s.name: s for s in trace.task_spans}
        assert spans["A"].end_micros == 10
        assert [(a.kind, a.event_name) for a in trace.anomalies] == [
            (EnumTraceAnomalyKind.UNTERMINATED_TASK, "B")
        ]

    def test_complete_event_forms_span_directly(self) -> None:
        """A Complete event with a duration needs no stack interaction."""
        trace = parse_trace_events([begin("Open", 0), complete("X", 10, 40)])

        complete_spans = [s for s in trace.task_spans if s.name == "X"]
        assert len(complete_spans) == 1
        assert complete_spans[0].end_micros == 50

    def test_complete_event_without_duration_forms_no_span(self) -> None:
        """Without dur a Complete event is kept as an event only."""
        trace = parse_trace_events([event("X", "X", 10)])
        assert trace.task_spans == ()
        assert len(trace.events) == 1

    def test_unmatched_end_is_recorded_not_raised(self) -> None:
        """An End with no open Begin is dropped as an anomaly; parsing goes on."""
        trace = parse_trace_events(
            [
                main_frame_marker(),
                end("Orphan", 5),
                complete("RunTask", 10, 100),
            ]
        )

        assert len(trace.anomalies) == 1
        anomaly = trace.anomalies[0]
        assert anomaly.kind is EnumTraceAnomalyKind.UNMATCHED_END
        assert anomaly.event_name == "Orphan"
        assert anomaly.timestamp_micros == 5
        assert [s.name for s in trace.task_spans] == ["RunTask"]
        assert len(trace.events) == 3

    def test_mismatched_end_name_is_an_anomaly(self) -> None:
        """A named End that does not match the open Begin is dropped."""
        trace = parse_trace_events(
            [begin("A", 0), end("B", 10), end("A", 20)]
        )

        assert [a.kind for a in trace.anomalies] == [
            EnumTraceAnomalyKind.UNMATCHED_END
        ]
        assert [(s.name, s.end_micros) for s in trace.task_spans] == [("A", 20)]

    def test_anomalies_are_logged_as_warnings(
        self, caplog: pytest.LogCaptureFixture, correlation_id: str
    ) -> None:
        """Each anomaly is logged at WARNING with the correlation id."""
        with caplog.at_level(logging.WARNING):
            parse_trace_events([end("Orphan", 0)], correlation_id=correlation_id)

        records = [r for r in caplog.records if "Trace anomaly" in r.getMessage()]
        assert len(records) == 1
        assert records[0].correlation_id == correlation_id  # type: ignore[attr-defined]

    def test_unterminated_begin_is_closed_at_trace_end(self) -> None:
        """A Begin still open at the end of the stream runs to the trace end."""
        trace = parse_trace_events(
            [begin("Hung", 100), complete("Other", 200, 300, tid=WORKER_TID)]
        )

        assert trace.end_micros == 500
        hung = [s for s in trace.task_spans if s.name == "Hung"]
        assert hung[0].end_micros == 500
        assert [a.kind for a in trace.anomalies] == [
            EnumTraceAnomalyKind.UNTERMINATED_TASK
        ]

    def test_unknown_phases_are_ignored_and_counted(self) -> None:
        """Unknown phases never fail the parse."""
        trace = parse_trace_events(
            [instant("A", 0), event("Sample", "P", 5), event("Flow", "s", 6)]
        )

        assert trace.ignored_event_count == 2
        assert [e.name for e in trace.events] == ["A"]

    def test_events_keep_original_order(self) -> None:
        """Events are retained in stream order with their raw index."""
        raw = [thread_name("Main"), instant("A", 0), instant("B", 0), instant("C", 1)]
        trace = parse_trace_events(raw)

        assert [e.name for e in trace.events] == ["thread_name", "A", "B", "C"]
        assert [e.index for e in trace.events] == [0, 1, 2, 3]

    def test_decreasing_timestamp_is_fatal(self) -> None:
        """Out-of-order input means the capture is corrupt."""
        with pytest.raises(TraceParseError, match="precedes") as exc_info:
            parse_trace_events([instant("A", 100), instant("B", 50)])
        assert exc_info.value.event_index == 1

    def test_metadata_is_exempt_from_ordering(self) -> None:
        """Metadata events with ts=0 may appear anywhere."""
        raw = [instant("A", 100), thread_name("Main"), instant("B", 200)]
        raw[1]["ts"] = 0

        trace = parse_trace_events(raw)

        assert len(trace.events) == 3

    def test_trace_bounds(self) -> None:
        """Start is the first timed event, end the latest ts + dur."""
        trace = parse_trace_events(
            [
                thread_name("Main"),
                complete("Long", 100, 1_000),
                complete("Short", 200, 10),
            ]
        )

        assert (trace.start_micros, trace.end_micros) == (100, 1_100)

    def test_empty_trace(self) -> None:
        """An empty event array parses to an empty trace."""
        trace = parse_trace_events([])
        assert trace.events == ()
        assert (trace.start_micros, trace.end_micros) == (0, 0)

    def test_parsing_is_deterministic(self) -> None:
        """Parsing the same input twice yields equal traces."""
        raw = [
            begin("A", 0),
            begin("B", 1, tid=WORKER_TID),
            end("Orphan", 2),
            complete("C", 3, 4),
        ]
        assert parse_trace_events(raw) == parse_trace_events(raw)


@pytest.mark.unit
def test_compute_trace_bounds_ignores_metadata() -> None:
    """Metadata events never move the bounds."""
    trace = parse_trace_events([thread_name("Main"), instant("A", 50)])
    assert compute_trace_bounds(trace.events) == (50, 50)
