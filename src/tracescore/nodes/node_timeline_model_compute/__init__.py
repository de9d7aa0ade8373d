# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Timeline Model Compute Node."""

from tracescore.nodes.node_timeline_model_compute.node import (
    NodeTimelineModelCompute,
)

__all__ = ["NodeTimelineModelCompute"]
