"""Public resolver exports for bowishlist."""

from __future__ import annotations

from .colors import ColorResolver, invert_color_catalog, lookup_color_id
from .parts import DEFAULT_STRATEGIES, LookupStrategy, PartIdentityResolver, pick_shortest

__all__ = [
    "ColorResolver",
    "invert_color_catalog",
    "lookup_color_id",
    "LookupStrategy",
    "DEFAULT_STRATEGIES",
    "PartIdentityResolver",
    "pick_shortest",
]
