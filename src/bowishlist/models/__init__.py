"""Public model exports for bowishlist."""

from __future__ import annotations

from .remote import (
    ColorRecord,
    CreateListResponse,
    CreateLotResponse,
    IdLookupResponse,
    RemoteList,
)
from .results import ItemResult, ItemStatus, ReconcileResult
from .wishlist import DesiredItem, DesiredList

__all__ = [
    "DesiredItem",
    "DesiredList",
    "RemoteList",
    "ColorRecord",
    "CreateListResponse",
    "CreateLotResponse",
    "IdLookupResponse",
    "ItemStatus",
    "ItemResult",
    "ReconcileResult",
]
