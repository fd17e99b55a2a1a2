"""Build the list-level plan from the remote snapshot and the desired lists."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Sequence

from bowishlist.models import DesiredList, RemoteList
from bowishlist.util.ids import new_plan_id

from .actions import Action
from .operation import PlanOperation
from .reconcile_plan import ReconcilePlan

# Brick Owl refuses to delete a user's last list. Keeping this one around
# lets every other list be deleted in a single pass.
DUMMY_LIST_NAME: str = "empty placeholder list"


def build_reconcile_plan(
    remote_lists: Sequence[RemoteList],
    desired_lists: Sequence[DesiredList],
    *,
    purge: bool = False,
) -> ReconcilePlan:
    """
    Build a ReconcilePlan.

    Rules:
        - The dummy list is created first if no remote list has its name.
        - Remote lists other than the dummy are deleted when purge is set, or
          when a desired list has exactly the same name. Others are kept.
        - Every desired list is then created, in input order. Contents are
          never merged into an existing list.
    """
    operations: list[PlanOperation] = []

    def add(action: Action, **fields) -> None:
        operations.append(PlanOperation(seq=len(operations), action=action, **fields))

    if not any(r.name == DUMMY_LIST_NAME for r in remote_lists):
        add(Action.CREATE_DUMMY_LIST, name=DUMMY_LIST_NAME)

    desired_names = {d.name for d in desired_lists}
    for remote in remote_lists:
        if remote.name == DUMMY_LIST_NAME:
            continue
        if purge or remote.name in desired_names:
            add(Action.DELETE_LIST, name=remote.name, list_id=remote.list_id)

    for desired in desired_lists:
        add(
            Action.CREATE_LIST,
            name=desired.name,
            description=desired.description,
            desired=desired,
        )

    return ReconcilePlan(
        plan_id=new_plan_id(),
        created_at=datetime.now(timezone.utc),
        purge=purge,
        operations=operations,
    )
