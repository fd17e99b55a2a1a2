"""Load the desired wish lists from the JSON data file."""

from __future__ import annotations

import json
import logging
from typing import Any

from bowishlist.errors import InputValidationError
from bowishlist.models import DesiredItem, DesiredList
from bowishlist.plan import DUMMY_LIST_NAME

from .validators import (
    optional_string,
    parse_quantity,
    require_object,
    require_string,
    validate_unique_names,
)

logger = logging.getLogger(__name__)


def load_desired_lists(path: str) -> list[DesiredList]:
    """
    Read and validate the data file.

    Format:
        [{"name": ..., "description": ...,
          "pieces": [{"id": ..., "qty": "2", "color": ..., "boid": ...}]}]

    Raises:
        InputValidationError: if the file cannot be read or is malformed.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            payload = json.load(f)
    except OSError as exc:
        raise InputValidationError(
            f"Could not read wishlist data from file '{path}'",
            details={"path": path},
            cause=exc,
        ) from exc
    except ValueError as exc:
        raise InputValidationError(
            "Error parsing wishlist data",
            details={"path": path},
            cause=exc,
        ) from exc

    lists = parse_desired_lists(payload)
    logger.debug(
        "Loaded %d lists (%d pieces) from %s",
        len(lists),
        sum(len(d.items) for d in lists),
        path,
    )
    return lists


def parse_desired_lists(payload: Any) -> list[DesiredList]:
    if not isinstance(payload, list):
        raise InputValidationError("Wishlist data must be a JSON array")

    lists = [_parse_list(record, list_index) for list_index, record in enumerate(payload)]
    validate_unique_names([d.name for d in lists], DUMMY_LIST_NAME)
    return lists


def _parse_list(record: Any, list_index: int) -> DesiredList:
    data = require_object(record, "Wish list", list_index=list_index)
    name = require_string(data, "name", "Wish list", list_index=list_index)
    description = optional_string(data, "description", "Wish list", list_index=list_index)

    pieces = data.get("pieces", [])
    if pieces is None:
        pieces = []
    if not isinstance(pieces, list):
        raise InputValidationError(
            "Wish list 'pieces' must be a JSON array",
            details={"list_index": list_index},
        )

    items = tuple(
        _parse_piece(piece, list_index, piece_index)
        for piece_index, piece in enumerate(pieces)
    )
    return DesiredList(name=name, description=description, items=items)


def _parse_piece(record: Any, list_index: int, piece_index: int) -> DesiredItem:
    where = {"list_index": list_index, "piece_index": piece_index}
    data = require_object(record, "Piece", **where)

    boid = optional_string(data, "boid", "Piece", **where) or None
    if boid is None:
        part_code = require_string(data, "id", "Piece", **where)
    else:
        part_code = optional_string(data, "id", "Piece", **where)

    return DesiredItem(
        part_code=part_code,
        color_name=require_string(data, "color", "Piece", **where),
        quantity=parse_quantity(data.get("qty"), **where),
        boid=boid,
    )
