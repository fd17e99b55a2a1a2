"""Strict validation helpers for the wish list data file."""

from __future__ import annotations

from typing import Any

from bowishlist.errors import InputValidationError


def require_object(value: Any, what: str, **where: Any) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise InputValidationError(f"{what} must be a JSON object", details=dict(where))
    return value


def require_string(record: dict[str, Any], key: str, what: str, **where: Any) -> str:
    value = record.get(key)
    if not isinstance(value, str) or not value.strip():
        raise InputValidationError(
            f"{what} '{key}' must be a non-empty string",
            details=dict(where, field=key),
        )
    return value


def optional_string(record: dict[str, Any], key: str, what: str, **where: Any) -> str:
    value = record.get(key, "")
    if value is None:
        return ""
    if not isinstance(value, str):
        raise InputValidationError(
            f"{what} '{key}' must be a string",
            details=dict(where, field=key),
        )
    return value


def parse_quantity(value: Any, **where: Any) -> int:
    """
    Parse a piece quantity. Missing means 1.

    Accepts the data file's string form ("5") and plain integers.
    """
    if value is None:
        return 1
    if isinstance(value, bool):
        raise InputValidationError("Piece 'qty' must be a positive integer", details=dict(where))

    if isinstance(value, int):
        qty = value
    elif isinstance(value, str) and value.strip().isdecimal():
        qty = int(value.strip())
    else:
        raise InputValidationError(
            "Piece 'qty' must be a positive integer",
            details=dict(where, qty=value),
        )

    if qty < 1:
        raise InputValidationError(
            "Piece 'qty' must be a positive integer",
            details=dict(where, qty=value),
        )
    return qty


def validate_unique_names(names: list[str], reserved: str) -> None:
    seen: set[str] = set()
    for index, name in enumerate(names):
        if name == reserved:
            raise InputValidationError(
                f"List name '{reserved}' is reserved",
                details={"list_index": index},
            )
        if name in seen:
            raise InputValidationError(
                f"Duplicate list name: {name}",
                details={"list_index": index},
            )
        seen.add(name)
