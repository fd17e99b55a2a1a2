"""Result models for a reconciliation run."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Optional


ItemStatus = Literal["created", "skipped"]


@dataclass(slots=True)
class ItemResult:
    """Outcome for a single wish list piece."""

    list_name: str
    part_code: str
    color_name: str
    status: ItemStatus

    boid: Optional[str] = None
    color_id: Optional[str] = None
    lot_id: Optional[str] = None
    quantity_updated: bool = False

    reason: Optional[str] = None


@dataclass(slots=True)
class ReconcileResult:
    """Aggregate result for WishlistManager.apply_plan/reconcile."""

    plan_id: str
    dummy_created: bool
    deleted_list_ids: list[str] = field(default_factory=list)
    created_lists: dict[str, str] = field(default_factory=dict)
    items: list[ItemResult] = field(default_factory=list)
    summary: dict[str, int] = field(default_factory=dict)

    @property
    def skipped(self) -> list[ItemResult]:
        return [r for r in self.items if r.status == "skipped"]
