"""Internal controller exports for bowishlist."""

from __future__ import annotations

from .brickowl_controller import BrickOwlController

__all__ = ["BrickOwlController"]
