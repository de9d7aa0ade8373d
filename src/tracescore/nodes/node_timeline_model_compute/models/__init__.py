"""Models for Timeline Model Compute Node."""

from tracescore.nodes.node_timeline_model_compute.models.model_network_request_interval import (
    ModelNetworkRequestInterval,
)
from tracescore.nodes.node_timeline_model_compute.models.model_task import ModelTask
from tracescore.nodes.node_timeline_model_compute.models.model_thread_timeline import (
    ModelThreadTimeline,
)
from tracescore.nodes.node_timeline_model_compute.models.model_time_interval import (
    ModelTimeInterval,
)
from tracescore.nodes.node_timeline_model_compute.models.model_timeline_build import (
    ModelTimelineBuildInput,
    ModelTimelineBuildOutput,
)
from tracescore.nodes.node_timeline_model_compute.models.model_timeline_model import (
    ModelTimelineModel,
)

__all__ = [
    "ModelNetworkRequestInterval",
    "ModelTask",
    "ModelThreadTimeline",
    "ModelTimeInterval",
    "ModelTimelineBuildInput",
    "ModelTimelineBuildOutput",
    "ModelTimelineModel",
]
