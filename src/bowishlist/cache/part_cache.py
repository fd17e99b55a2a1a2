"""Part code -> BOID cache with a guaranteed flush at the end of a run."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from bowishlist.errors import CacheNotFoundError, CacheWriteError

from .store import CacheStore

logger = logging.getLogger(__name__)


class PartIdentityCache:
    """
    In-memory part code -> BOID mapping.

    Entries are only ever added: an existing code is never overwritten or removed.
    """

    def __init__(self, entries: Optional[dict[str, str]] = None) -> None:
        self._entries: dict[str, str] = dict(entries or {})
        self._added = 0

    def __contains__(self, part_code: str) -> bool:
        return part_code in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def added(self) -> int:
        """Number of entries added since the cache was loaded."""
        return self._added

    def get(self, part_code: str) -> Optional[str]:
        return self._entries.get(part_code)

    def add(self, part_code: str, boid: str) -> str:
        """Add a mapping; if part_code is already known, keep and return the old BOID."""
        existing = self._entries.get(part_code)
        if existing is not None:
            return existing
        self._entries[part_code] = boid
        self._added += 1
        return boid

    def to_dict(self) -> dict[str, str]:
        return dict(self._entries)


def load_part_cache(store: CacheStore, key: str) -> PartIdentityCache:
    """Load the part cache; a missing file yields an empty cache."""
    try:
        entries = store.load(key)
    except CacheNotFoundError:
        logger.info("No part cache at %s, starting empty", store.path_for(key))
        entries = {}
    return PartIdentityCache(entries)


@contextmanager
def open_part_cache(store: CacheStore, key: str) -> Iterator[PartIdentityCache]:
    """
    Load the part cache and persist it when the block exits, on success or error.

    A corrupt cache file raises from here before the block runs, and is not
    overwritten. If the block raised, a failed flush is logged and the block's
    error is the one that propagates.
    """
    cache = load_part_cache(store, key)
    try:
        yield cache
    except BaseException:
        try:
            _flush(store, key, cache)
        except CacheWriteError as write_exc:
            logger.error("Part cache not saved: %s", write_exc)
        raise
    _flush(store, key, cache)


def _flush(store: CacheStore, key: str, cache: PartIdentityCache) -> None:
    store.save(key, cache.to_dict())
    logger.debug("Part cache flushed (%d entries, %d new)", len(cache), cache.added)
