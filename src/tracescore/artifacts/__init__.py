"""Artifacts supplied to and derived within metric evaluation."""

from tracescore.artifacts.artifacts_bag import ArtifactsBag
from tracescore.artifacts.computed_artifact_cache import ComputedArtifactCache
from tracescore.artifacts.exceptions import MissingArtifactError

__all__ = ["ArtifactsBag", "ComputedArtifactCache", "MissingArtifactError"]
