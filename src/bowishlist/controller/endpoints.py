"""Endpoint paths for the Brick Owl API."""

from __future__ import annotations

WISHLIST_LISTS: str = "wishlist/lists"
WISHLIST_CREATE_LIST: str = "wishlist/create_list"
WISHLIST_DELETE_LIST: str = "wishlist/delete_list"
WISHLIST_CREATE_LOT: str = "wishlist/create_lot"
WISHLIST_UPDATE: str = "wishlist/update"

CATALOG_COLOR_LIST: str = "catalog/color_list"
CATALOG_ID_LOOKUP: str = "catalog/id_lookup"
