"""Domain-specific exceptions for artifact lookup."""

from __future__ import annotations


class MissingArtifactError(Exception):
    """Raised when an artifact a metric requires is not in the bag.

    Examples:
        - No ``traces`` artifact at all
        - No trace for the requested pass
    """

    def __init__(self, artifact_name: str, message: str | None = None) -> None:
        self.artifact_name = artifact_name
        super().__init__(message or f"required artifact '{artifact_name}' is missing")


__all__ = ["MissingArtifactError"]
