from __future__ import annotations

ELLIPSIS_AT: int = 50


def ellipsis(value: str, limit: int = ELLIPSIS_AT) -> str:
    """Truncate value to `limit` characters, marking the cut with '...'."""
    if len(value) < limit:
        return value
    return value[:limit] + "..."


def color_key(name: str) -> str:
    """Normalize a color name for lookup (case-insensitive)."""
    return name.lower()
