"""Public cache exports for bowishlist."""

from __future__ import annotations

from .part_cache import PartIdentityCache, load_part_cache, open_part_cache
from .store import CacheStore

__all__ = [
    "CacheStore",
    "PartIdentityCache",
    "load_part_cache",
    "open_part_cache",
]
