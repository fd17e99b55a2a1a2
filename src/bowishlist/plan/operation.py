"""Plan operation model (explicit fields; no args dict)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from bowishlist.models import DesiredList

from .actions import Action


@dataclass(slots=True)
class PlanOperation:
    """A single list-level operation within a ReconcilePlan."""

    seq: int
    action: Action

    name: Optional[str] = None
    description: Optional[str] = None
    list_id: Optional[str] = None
    desired: Optional[DesiredList] = None

    def validate_required_fields(self) -> None:
        """Validate required fields according to action. Raises ValueError."""
        if self.action is Action.CREATE_DUMMY_LIST:
            _require(self.name, "name")
            return

        if self.action is Action.DELETE_LIST:
            _require(self.list_id, "list_id")
            return

        if self.action is Action.CREATE_LIST:
            _require(self.name, "name")
            if self.desired is None:
                raise ValueError("Missing required field: desired")
            return

        raise ValueError(f"Unsupported action: {self.action}")

    def describe(self) -> str:
        if self.action is Action.DELETE_LIST:
            return f"{self.action.value} '{self.name}' (id {self.list_id})"
        if self.action is Action.CREATE_LIST and self.desired is not None:
            return f"{self.action.value} '{self.name}' ({len(self.desired.items)} pieces)"
        return f"{self.action.value} '{self.name}'"


def _require(value: object, field_name: str) -> None:
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValueError(f"Missing required field: {field_name}")
