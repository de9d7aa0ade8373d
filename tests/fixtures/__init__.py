"""Shared test fixtures for tracescore tests.

Modules:
    trace_builders: Raw Chrome trace-event builders
"""
