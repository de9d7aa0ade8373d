# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Single-flight memoization of derived artifacts.

Derived artifacts (parsed trace, timeline model, first-interactive value)
are expensive and reusable across metrics. The cache computes each one at
most once per source object: the first caller computes, concurrent callers
for the same key block on the same future, later callers reuse the result.

Keys use ``id(source)``. The cache holds a strong reference to every source
it has seen so an id cannot be recycled while its entry is alive.

Thread Safety:
    Entry creation is guarded by a threading.Lock. The computation itself
    runs outside the lock so independent keys proceed in parallel.
"""

from __future__ import annotations

import asyncio
import logging
import threading
from collections.abc import Callable, Hashable
from concurrent.futures import Future
from typing import Any, NamedTuple, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class _CacheKey(NamedTuple):
    """Composite key for computed artifact lookup."""

    artifact_name: str
    source_id: int
    variant: Hashable


class _CacheEntry(NamedTuple):
    source: Any
    future: Future[Any]


class ComputedArtifactCache:
    """In-memory single-flight cache keyed by artifact name and source identity.

    Usage:
        cache = ComputedArtifactCache()
        timeline = cache.get_or_compute(
            "timeline_model", raw_trace, lambda: build(raw_trace)
        )

    Failures are cached like results: asking again for the same key re-raises
    the original exception without recomputing.
    """

    def __init__(self) -> None:
        self._entries: dict[_CacheKey, _CacheEntry] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def contains(
        self, artifact_name: str, source: Any, *, variant: Hashable = None
    ) -> bool:
        key = _CacheKey(artifact_name, id(source), variant)
        with self._lock:
            return key in self._entries

    def get_or_compute(
        self,
        artifact_name: str,
        source: Any,
        compute: Callable[[], T],
        *,
        variant: Hashable = None,
    ) -> T:
        """Return the cached artifact, computing it on first request.

        Args:
            artifact_name: Name of the derived artifact.
            source: Object the artifact is derived from (identity is the key).
            compute: Zero-argument function producing the artifact.
            variant: Extra hashable key part, e.g. a frozen config model.

        Returns:
            The artifact value.

        Raises:
            Exception: Whatever ``compute`` raised, for every caller.
        """
        key = _CacheKey(artifact_name, id(source), variant)
        with self._lock:
            entry = self._entries.get(key)
            is_owner = entry is None
            if entry is None:
                entry = _CacheEntry(source=source, future=Future())
                self._entries[key] = entry

        if not is_owner:
            logger.debug("Reusing computed artifact '%s'", artifact_name)
            return entry.future.result()

        logger.debug("Computing artifact '%s'", artifact_name)
        try:
            result = compute()
        except Exception as e:
            entry.future.set_exception(e)
            raise
        except BaseException as e:
            # Interrupted, not failed: forget the entry so a later call retries
            with self._lock:
                self._entries.pop(key, None)
            entry.future.set_exception(e)
            raise
        entry.future.set_result(result)
        return result

    async def get_or_compute_async(
        self,
        artifact_name: str,
        source: Any,
        compute: Callable[[], T],
        *,
        variant: Hashable = None,
    ) -> T:
        """Async variant; the lookup and any computation run in a worker thread."""
        return await asyncio.to_thread(
            self.get_or_compute, artifact_name, source, compute, variant=variant
        )

    def clear(self) -> None:
        """Drop every entry. Useful for tests and long-lived services."""
        with self._lock:
            self._entries.clear()


__all__ = ["ComputedArtifactCache"]
