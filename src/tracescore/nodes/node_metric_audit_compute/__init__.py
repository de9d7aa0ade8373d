# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Metric Audit Compute Node."""

from tracescore.nodes.node_metric_audit_compute.node import NodeMetricAuditCompute

__all__ = ["NodeMetricAuditCompute"]
