"""Color name -> Brick Owl color id resolution."""

from __future__ import annotations

import logging
from typing import Protocol

from bowishlist.cache import CacheStore
from bowishlist.errors import CacheNotFoundError, ColorNotFoundError
from bowishlist.models import ColorRecord
from bowishlist.util.text import color_key

logger = logging.getLogger(__name__)


class ColorCatalogSource(Protocol):
    def color_list(self) -> dict[str, ColorRecord]: ...


class ColorResolver:
    """
    Build the lowercase color name -> color id table for a run.

    The table comes whole from the cache file when it exists (it is not checked
    for staleness); otherwise the full catalog is fetched once, inverted, and
    written to the cache file.
    """

    def __init__(self, source: ColorCatalogSource, store: CacheStore, cache_key: str) -> None:
        self._source = source
        self._store = store
        self._cache_key = cache_key

    def resolve_all(self) -> dict[str, str]:
        try:
            colors = self._store.load(self._cache_key)
        except CacheNotFoundError:
            pass
        else:
            logger.debug("Using %d cached colors", len(colors))
            return colors

        logger.info("Fetching color catalog")
        colors = invert_color_catalog(self._source.color_list())
        self._store.save(self._cache_key, colors)
        return colors


def invert_color_catalog(catalog: dict[str, ColorRecord]) -> dict[str, str]:
    """
    Map lowercased color names to ids.

    If two colors share a name case-insensitively, the first one in catalog
    order is kept.
    """
    colors: dict[str, str] = {}
    for color_id, record in catalog.items():
        colors.setdefault(color_key(record.name), color_id)
    return colors


def lookup_color_id(colors: dict[str, str], color_name: str) -> str:
    """Return the color id for color_name. Raises ColorNotFoundError."""
    color_id = colors.get(color_key(color_name))
    if color_id is None:
        raise ColorNotFoundError(
            f"No color id for '{color_name}'",
            details={"color": color_name},
        )
    return color_id
