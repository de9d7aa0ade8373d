# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Quiet Window Compute Node."""

from tracescore.nodes.node_quiet_window_compute.node import NodeQuietWindowCompute

__all__ = ["NodeQuietWindowCompute"]
