"""Per-run settings (input file, caches, purge policy)."""

from __future__ import annotations

import os
from dataclasses import dataclass

BOIDS_CACHE_NAME: str = "brickowl-wishlist-boids.json"
COLORS_CACHE_NAME: str = "brickowl-wishlist-colors.json"


@dataclass(slots=True, frozen=True)
class RunConfig:
    """Settings for one reconciliation run."""

    data_file: str
    purge_lists: bool = False
    dry_run: bool = False
    cache_dir: str = "."
    boids_cache_name: str = BOIDS_CACHE_NAME
    colors_cache_name: str = COLORS_CACHE_NAME

    def __post_init__(self) -> None:
        if not isinstance(self.data_file, str) or not self.data_file.strip():
            raise ValueError("RunConfig.data_file must be a non-empty string")

        for name in ("boids_cache_name", "colors_cache_name"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value.strip():
                raise ValueError(f"RunConfig.{name} must be a non-empty string")
            if os.path.basename(value) != value:
                raise ValueError(f"RunConfig.{name} must be a file name, not a path")
