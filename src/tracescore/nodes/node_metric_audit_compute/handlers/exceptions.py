"""Domain exceptions for Metric Audit Compute."""

from __future__ import annotations


class MetricUnavailableError(Exception):
    """The metric could not be located in an otherwise valid trace."""

    def __init__(self, metric_name: str, message: str) -> None:
        self.metric_name = metric_name
        super().__init__(message)


class UnknownMetricError(KeyError):
    """No metric definition is registered under the requested name."""

    def __init__(self, metric_name: str) -> None:
        self.metric_name = metric_name
        super().__init__(metric_name)

    def __str__(self) -> str:
        return f"unknown metric '{self.metric_name}'"


__all__ = ["MetricUnavailableError", "UnknownMetricError"]
