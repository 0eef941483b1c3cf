"""Process-wide cache for the consolidated manifest.

The first ``get()`` starts a single read of ``assets.json`` in a worker
thread; every caller awaits that same task, so a burst of concurrent requests
costs one disk read and sees one manifest.  The result (or the failure) stays
cached until ``clear()``.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from pathlib import Path

from .config import AssetsConfig
from .manifest_loader import read_consolidated_manifest
from .models.manifest import ConsolidatedManifest

logger = logging.getLogger(__name__)

ManifestReader = Callable[[Path], ConsolidatedManifest]


class ConsolidatedManifestCache:
    def __init__(self, manifest_path: Path, reader: ManifestReader = read_consolidated_manifest) -> None:
        self.manifest_path = manifest_path
        self._reader = reader
        self._pending: asyncio.Task[ConsolidatedManifest] | None = None
        self.load_count = 0

    async def get(self) -> ConsolidatedManifest:
        if self._pending is None:
            self.load_count += 1
            logger.debug("Loading consolidated manifest (load #%d): %s", self.load_count, self.manifest_path)
            self._pending = asyncio.ensure_future(asyncio.to_thread(self._reader, self.manifest_path))
        # shield: one waiter being cancelled must not cancel the shared read
        return await asyncio.shield(self._pending)

    def clear(self) -> None:
        self._pending = None


_shared_caches: dict[Path, ConsolidatedManifestCache] = {}


def shared_cache(manifest_path: Path) -> ConsolidatedManifestCache:
    """Return the process-wide cache for ``manifest_path``, creating it on first use."""
    cache = _shared_caches.get(manifest_path)
    if cache is None:
        cache = _shared_caches[manifest_path] = ConsolidatedManifestCache(manifest_path)
    return cache


def default_cache() -> ConsolidatedManifestCache:
    return shared_cache(AssetsConfig.from_env().manifest_path)


def internal_only_clear_cache() -> None:
    """Forget every process-wide manifest so the next resolver re-reads it. For tests.

    Resolvers that already picked a build keep it.
    """
    for cache in _shared_caches.values():
        cache.clear()
    _shared_caches.clear()
