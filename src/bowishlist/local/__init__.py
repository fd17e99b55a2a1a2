"""Public local-data exports for bowishlist."""

from __future__ import annotations

from .data_file import load_desired_lists, parse_desired_lists

__all__ = ["load_desired_lists", "parse_desired_lists"]
