"""Pure network-request interval construction for Timeline Model Compute.

Request start and end events are paired by ``args.data.requestId``. Requests
that never finish extend to the end of the trace.
"""

from __future__ import annotations

import logging
from collections.abc import Collection
from dataclasses import dataclass

from tracescore.enums import EnumTraceAnomalyKind
from tracescore.nodes.node_timeline_model_compute.models import (
    ModelNetworkRequestInterval,
)
from tracescore.nodes.node_trace_event_parser_compute.models import (
    ModelTrace,
    ModelTraceAnomaly,
    ModelTraceEvent,
)

logger = logging.getLogger(__name__)


@dataclass
class NetworkRequestsResult:
    """Result of build_network_requests."""

    requests: list[ModelNetworkRequestInterval]
    anomalies: list[ModelTraceAnomaly]


def request_id_of(event: ModelTraceEvent) -> str | None:
    """Return the request id carried by a network event, if any."""
    request_id = event.data_arg("requestId")
    if request_id is None or request_id == "":
        return None
    return str(request_id)


def _request_anomaly(
    kind: EnumTraceAnomalyKind,
    message: str,
    event: ModelTraceEvent,
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


def build_network_requests(
    trace: ModelTrace,
    *,
    start_events: Collection[str],
    end_events: Collection[str],
    correlation_id: str | None = None,
) -> NetworkRequestsResult:
    """Pair request start/end events into request intervals.

    A second start for an id already seen is a ``duplicate_request`` anomaly
    (the first start wins). An end with no open start is an
    ``unmatched_request_end`` anomaly.

    Args:
        trace: Parsed trace.
        start_events: Event names that open a request.
        end_events: Event names that close a request.
        correlation_id: Correlation ID for tracing.

    Returns:
        NetworkRequestsResult with intervals sorted by (start, end, id).
    """
    open_starts: dict[str, int] = {}
    seen: set[str] = set()
    requests: list[ModelNetworkRequestInterval] = []
    anomalies: list[ModelTraceAnomaly] = []

    for event in trace.events:
        if event.name not in start_events and event.name not in end_events:
            continue
        request_id = request_id_of(event)
        if request_id is None:
            continue

        if event.name in start_events:
            if request_id in seen:
                anomalies.append(
                    _request_anomaly(
                        EnumTraceAnomalyKind.DUPLICATE_REQUEST,
                        f"Request '{request_id}' started more than once",
                        event,
                        correlation_id,
                    )
                )
                continue
            seen.add(request_id)
            open_starts[request_id] = event.timestamp_micros
            continue

        start = open_starts.pop(request_id, None)
        if start is None:
            anomalies.append(
                _request_anomaly(
                    EnumTraceAnomalyKind.UNMATCHED_REQUEST_END,
                    f"Request '{request_id}' ended without an open start",
                    event,
                    correlation_id,
                )
            )
            continue
        requests.append(
            ModelNetworkRequestInterval(
                request_id=request_id,
                start_micros=start,
                end_micros=event.timestamp_micros,
            )
        )

    for request_id, start in open_starts.items():
        requests.append(
            ModelNetworkRequestInterval(
                request_id=request_id,
                start_micros=start,
                end_micros=max(start, trace.end_micros),
                terminated=False,
            )
        )

    requests.sort(key=lambda r: (r.start_micros, r.end_micros, r.request_id))

    logger.debug(
        "Built network requests: requests=%d, unterminated=%d",
        len(requests),
        len(open_starts),
        extra={"correlation_id": correlation_id},
    )

    return NetworkRequestsResult(requests=requests, anomalies=anomalies)


__all__ = [
    "NetworkRequestsResult",
    "build_network_requests",
    "request_id_of",
]
