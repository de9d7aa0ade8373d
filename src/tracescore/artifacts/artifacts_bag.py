"""Read-only artifacts bag handed to metric evaluation.

The bag is owned by the orchestrating caller. The core reads it and never
mutates it; the top-level mapping is frozen behind a MappingProxyType while
artifact values keep their identity so derived artifacts can be memoized per
trace.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any

from tracescore.artifacts.exceptions import MissingArtifactError
from tracescore.constants import DEFAULT_PASS, TRACES_ARTIFACT


class ArtifactsBag(Mapping[str, Any]):
    """Immutable mapping from artifact name to gathered data.

    Usage:
        bag = ArtifactsBag.from_traces({"defaultPass": raw_trace})
        raw = bag.get_trace()
    """

    __slots__ = ("_artifacts", "__weakref__")

    def __init__(self, artifacts: Mapping[str, Any] | None = None) -> None:
        self._artifacts: Mapping[str, Any] = MappingProxyType(dict(artifacts or {}))

    @classmethod
    def from_traces(
        cls, traces: Mapping[str, Any], **artifacts: Any
    ) -> ArtifactsBag:
        """Build a bag holding one raw trace per pass plus any other artifacts."""
        return cls({TRACES_ARTIFACT: MappingProxyType(dict(traces)), **artifacts})

    def __getitem__(self, name: str) -> Any:
        return self._artifacts[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._artifacts)

    def __len__(self) -> int:
        return len(self._artifacts)

    def __repr__(self) -> str:
        return f"ArtifactsBag({sorted(self._artifacts)})"

    def require(self, name: str) -> Any:
        """Return artifact ``name``.

        Raises:
            MissingArtifactError: If the artifact is absent or None.
        """
        value = self._artifacts.get(name)
        if value is None:
            raise MissingArtifactError(name)
        return value

    def get_trace(self, pass_name: str = DEFAULT_PASS) -> Any:
        """Return the raw trace captured during ``pass_name``.

        Raises:
            MissingArtifactError: If there is no trace for that pass.
        """
        traces = self.require(TRACES_ARTIFACT)
        if not isinstance(traces, Mapping) or traces.get(pass_name) is None:
            raise MissingArtifactError(
                TRACES_ARTIFACT,
                f"required artifact '{TRACES_ARTIFACT}' has no trace "
                f"for pass '{pass_name}'",
            )
        return traces[pass_name]


__all__ = ["ArtifactsBag"]
