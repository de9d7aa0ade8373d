"""Metric Audit Compute Node.

Thin shell compute node scoring one metric from an artifacts bag. Evaluation
is CPU-bound, so it runs in a worker thread.

Derived artifacts are cached per artifacts bag: every metric scored against
the same bag shares one ComputedArtifactCache, which is dropped as soon as the
caller releases the bag. A long-lived node therefore never retains traces of
pages it has finished with.
"""

from __future__ import annotations

import weakref
from collections.abc import Mapping

from tracescore.artifacts import ArtifactsBag, ComputedArtifactCache
from tracescore.nodes.node_metric_audit_compute.handlers import (
    build_metric_definitions,
    evaluate_metric_async,
)
from tracescore.nodes.node_metric_audit_compute.models import (
    ModelAuditResult,
    ModelMetricAuditInput,
    ModelMetricDefinition,
)


class NodeMetricAuditCompute:
    """Pure compute node for metric evaluation.

    Args:
        definitions: Metric definitions; defaults to build_metric_definitions().
        cache: Optional cache used for every bag. Its lifetime is owned by the
            caller; when omitted the node keeps one cache per live bag.
    """

    def __init__(
        self,
        definitions: Mapping[str, ModelMetricDefinition] | None = None,
        cache: ComputedArtifactCache | None = None,
    ) -> None:
        self.definitions = (
            definitions if definitions is not None else build_metric_definitions()
        )
        self.cache = cache
        self._bag_caches: dict[int, ComputedArtifactCache] = {}

    @property
    def cached_bag_count(self) -> int:
        """Number of live artifacts bags with a node-owned cache."""
        return len(self._bag_caches)

    def cache_for(self, artifacts: ArtifactsBag) -> ComputedArtifactCache:
        """Return the cache shared by every metric scored against ``artifacts``."""
        if self.cache is not None:
            return self.cache
        key = id(artifacts)
        cache = self._bag_caches.get(key)
        if cache is None:
            cache = ComputedArtifactCache()
            self._bag_caches[key] = cache
            # Evicts before the id can be reused by another bag
            weakref.finalize(artifacts, self._bag_caches.pop, key, None)
        return cache

    async def compute(self, input_data: ModelMetricAuditInput) -> ModelAuditResult:
        """Evaluate one metric by delegating to handler function."""
        return await evaluate_metric_async(
            input_data.metric_name,
            input_data.artifacts,
            definitions=self.definitions,
            cache=self.cache_for(input_data.artifacts),
            correlation_id=input_data.correlation_id,
        )


__all__ = ["NodeMetricAuditCompute"]
