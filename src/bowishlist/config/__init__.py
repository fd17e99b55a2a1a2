"""Public config exports for bowishlist."""

from __future__ import annotations

from .client_config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT_SEC, ClientConfig
from .run_config import BOIDS_CACHE_NAME, COLORS_CACHE_NAME, RunConfig

__all__ = [
    "ClientConfig",
    "RunConfig",
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT_SEC",
    "BOIDS_CACHE_NAME",
    "COLORS_CACHE_NAME",
]
