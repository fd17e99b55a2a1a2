"""Plan actions for bowishlist."""

from __future__ import annotations

from enum import Enum


class Action(str, Enum):
    """List-level reconciliation actions."""

    CREATE_DUMMY_LIST = "CREATE_DUMMY_LIST"
    DELETE_LIST = "DELETE_LIST"
    CREATE_LIST = "CREATE_LIST"
