"""Public plan exports for bowishlist."""

from __future__ import annotations

from .actions import Action
from .builder import DUMMY_LIST_NAME, build_reconcile_plan
from .operation import PlanOperation
from .reconcile_plan import ReconcilePlan

__all__ = [
    "Action",
    "PlanOperation",
    "ReconcilePlan",
    "DUMMY_LIST_NAME",
    "build_reconcile_plan",
]
