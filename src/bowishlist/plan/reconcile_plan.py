"""ReconcilePlan model."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .actions import Action
from .operation import PlanOperation


@dataclass(slots=True)
class ReconcilePlan:
    """List-level operations for one run, in apply order (seq ascending)."""

    plan_id: str
    created_at: datetime
    purge: bool
    operations: list[PlanOperation]

    @property
    def creates_dummy(self) -> bool:
        return any(op.action is Action.CREATE_DUMMY_LIST for op in self.operations)

    @property
    def deletions(self) -> list[PlanOperation]:
        return [op for op in self.operations if op.action is Action.DELETE_LIST]

    @property
    def creations(self) -> list[PlanOperation]:
        return [op for op in self.operations if op.action is Action.CREATE_LIST]
