# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Trace Event Parser Compute Node."""

from tracescore.nodes.node_trace_event_parser_compute.node import (
    NodeTraceEventParserCompute,
)

__all__ = ["NodeTraceEventParserCompute"]
