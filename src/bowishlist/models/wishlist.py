"""Data model for the desired (local) wish lists."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(slots=True, frozen=True)
class DesiredItem:
    """
    One piece requested on a wish list.

    Notes:
        - quantity is parsed from the data file's string form and is always >= 1.
        - When boid is set, part-code resolution is bypassed entirely.
    """

    part_code: str
    color_name: str
    quantity: int = 1
    boid: Optional[str] = None


@dataclass(slots=True, frozen=True)
class DesiredList:
    """A wish list as described in the data file. Name is the matching key."""

    name: str
    description: str = ""
    items: tuple[DesiredItem, ...] = field(default_factory=tuple)
