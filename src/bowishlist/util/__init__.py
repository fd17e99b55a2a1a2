from .ids import new_plan_id, new_uuid
from .text import ELLIPSIS_AT, color_key, ellipsis

__all__ = [
    "new_uuid",
    "new_plan_id",
    "ELLIPSIS_AT",
    "color_key",
    "ellipsis",
]
