"""Typed records for Brick Owl API responses."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True, frozen=True)
class RemoteList:
    """A wish list as reported by wishlist/lists."""

    list_id: str
    name: str
    description: str = ""


@dataclass(slots=True, frozen=True)
class ColorRecord:
    """One entry of catalog/color_list (only the name is used)."""

    color_id: str
    name: str


@dataclass(slots=True, frozen=True)
class CreateListResponse:
    list_id: str


@dataclass(slots=True, frozen=True)
class CreateLotResponse:
    lot_id: str


@dataclass(slots=True, frozen=True)
class IdLookupResponse:
    """Candidate BOIDs returned by catalog/id_lookup, in response order."""

    boids: list[str] = field(default_factory=list)
