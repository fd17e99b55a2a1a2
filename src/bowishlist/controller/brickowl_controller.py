"""Brick Owl API controller (internal use only)."""

from __future__ import annotations

import json
import logging
from typing import Any, Optional

import requests

from bowishlist.config import ClientConfig
from bowishlist.errors import (
    HttpErrorInfo,
    NetworkError,
    ResponseDecodeError,
    map_http_error,
)
from bowishlist.models import (
    ColorRecord,
    CreateListResponse,
    CreateLotResponse,
    IdLookupResponse,
    RemoteList,
)
from bowishlist.util.text import ellipsis

from . import endpoints

logger = logging.getLogger(__name__)


class BrickOwlController:
    """
    Brick Owl API controller (internal only).

    Notes:
        - GET requests carry the key as the last query parameter and do not
          inspect the HTTP status; the body must decode into the expected record.
        - POST requests are form-encoded and must return HTTP 200.
        - Nothing is retried. A failed call raises a bowishlist error.
    """

    def __init__(
        self,
        config: ClientConfig,
        *,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._config = config
        self._session = session if session is not None else requests.Session()

    @classmethod
    def from_session(cls, session: Any, config: ClientConfig) -> "BrickOwlController":
        """Create controller from a pre-built session (useful for tests)."""
        return cls(config, session=session)

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self._session.close()

    # ----------------------------
    # Wish lists
    # ----------------------------
    def list_wishlists(self) -> list[RemoteList]:
        data = self._get_json(endpoints.WISHLIST_LISTS)
        if not isinstance(data, list):
            raise _shape_error(endpoints.WISHLIST_LISTS, data, "expected a JSON array")
        return [_list_dict_to_remote_list(item) for item in data]

    def create_list(self, name: str, description: str = "") -> str:
        data = self._post(
            endpoints.WISHLIST_CREATE_LIST,
            {"name": name, "description": description},
            decode=True,
        )
        return _decode_create_list(data).list_id

    def delete_list(self, list_id: str) -> None:
        self._post(endpoints.WISHLIST_DELETE_LIST, {"wishlist_id": list_id})

    def create_lot(self, boid: str, color_id: str, list_id: str) -> str:
        data = self._post(
            endpoints.WISHLIST_CREATE_LOT,
            {"boid": boid, "color_id": color_id, "wishlist_id": list_id},
            decode=True,
        )
        return _decode_create_lot(data).lot_id

    def update_lot(self, list_id: str, lot_id: str, minimum_quantity: int) -> None:
        self._post(
            endpoints.WISHLIST_UPDATE,
            {
                "minimum_quantity": str(minimum_quantity),
                "wishlist_id": list_id,
                "lot_id": lot_id,
            },
        )

    # ----------------------------
    # Catalog
    # ----------------------------
    def color_list(self) -> dict[str, ColorRecord]:
        data = self._get_json(endpoints.CATALOG_COLOR_LIST)
        if not isinstance(data, dict):
            raise _shape_error(endpoints.CATALOG_COLOR_LIST, data, "expected a JSON object")

        colors: dict[str, ColorRecord] = {}
        for color_id, record in data.items():
            if not isinstance(record, dict) or not isinstance(record.get("name"), str):
                raise _shape_error(
                    endpoints.CATALOG_COLOR_LIST,
                    record,
                    f"color {color_id} has no name",
                )
            colors[str(color_id)] = ColorRecord(color_id=str(color_id), name=record["name"])
        return colors

    def id_lookup(
        self,
        code: str,
        *,
        id_type: Optional[str] = None,
        item_type: str = "Part",
    ) -> list[str]:
        params = {"id": code, "type": item_type}
        if id_type is not None:
            params["id_type"] = id_type
        data = self._get_json(endpoints.CATALOG_ID_LOOKUP, params)
        return _decode_id_lookup(data).boids

    # ----------------------------
    # Internals
    # ----------------------------
    def _get_json(self, path: str, params: Optional[dict[str, str]] = None) -> Any:
        query = dict(params or {})
        query["key"] = self._config.api_key
        url = self._config.url_for(path)

        self._log_verbose("get request for url '%s' params %s", path, params or {})
        try:
            response = self._session.get(
                url,
                params=query,
                headers={"Accept": "application/json"},
                timeout=self._config.timeout_sec,
            )
        except requests.RequestException as exc:
            raise NetworkError(
                f"Request failed: {exc}",
                details={"path": path},
                cause=exc,
            ) from exc

        body = response.text
        self._log_verbose(
            "response %s for get url '%s': %s",
            response.status_code,
            path,
            ellipsis(body),
        )
        return _parse_json(path, body, response.status_code)

    def _post(self, path: str, data: dict[str, str], *, decode: bool = False) -> Any:
        form = dict(data)
        form["key"] = self._config.api_key
        url = self._config.url_for(path)

        self._log_verbose("post request for url '%s', params: %s", path, data)
        try:
            response = self._session.post(
                url,
                data=form,
                timeout=self._config.timeout_sec,
            )
        except requests.RequestException as exc:
            raise NetworkError(
                f"Request failed: {exc}",
                details={"path": path},
                cause=exc,
            ) from exc

        body = response.text
        self._log_verbose(
            "response %s for post url '%s': %s",
            response.status_code,
            path,
            ellipsis(body),
        )

        if response.status_code != 200:
            info = HttpErrorInfo(
                status_code=response.status_code,
                reason=response.reason,
                message=_error_status_message(path, body),
                details={"path": path, "params": data},
            )
            raise map_http_error(info)

        if not decode:
            return None
        return _parse_json(path, body, response.status_code)

    def _log_verbose(self, msg: str, *args: Any) -> None:
        if self._config.verbose:
            logger.info(msg, *args)


def _parse_json(path: str, body: str, status_code: int) -> Any:
    try:
        return json.loads(body)
    except ValueError as exc:
        raise ResponseDecodeError(
            "Error parsing json response",
            details={"path": path, "status_code": status_code, "body": ellipsis(body)},
            cause=exc,
        ) from exc


def _error_status_message(path: str, body: str) -> Optional[str]:
    """Extract {"error": {"status": ...}} from an error body, if present."""
    if not body:
        return None
    try:
        payload = json.loads(body)
    except ValueError:
        return None
    if not isinstance(payload, dict):
        return None
    err = payload.get("error")
    if not isinstance(err, dict) or not isinstance(err.get("status"), str):
        return None
    return f"Error from request '{path}': {err['status']}"


def _shape_error(path: str, data: Any, problem: str) -> ResponseDecodeError:
    return ResponseDecodeError(
        f"Unexpected response shape from '{path}': {problem}",
        details={"path": path, "body": ellipsis(json.dumps(data))},
    )


def _as_id(value: Any) -> Optional[str]:
    # The API reports ids as strings, but tolerate bare integers.
    if isinstance(value, str) and value:
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return None


def _list_dict_to_remote_list(data: Any) -> RemoteList:
    if not isinstance(data, dict):
        raise _shape_error(endpoints.WISHLIST_LISTS, data, "list entry is not an object")
    list_id = _as_id(data.get("wishlist_id"))
    if list_id is None:
        raise _shape_error(endpoints.WISHLIST_LISTS, data, "list entry has no wishlist_id")

    name = data.get("name", "")
    description = data.get("description", "")
    return RemoteList(
        list_id=list_id,
        name=name if isinstance(name, str) else "",
        description=description if isinstance(description, str) else "",
    )


def _decode_create_list(data: Any) -> CreateListResponse:
    list_id = _as_id(data.get("wishlist_id")) if isinstance(data, dict) else None
    if list_id is None:
        raise _shape_error(endpoints.WISHLIST_CREATE_LIST, data, "no wishlist_id returned")
    return CreateListResponse(list_id=list_id)


def _decode_create_lot(data: Any) -> CreateLotResponse:
    lot_id = _as_id(data.get("lot_id")) if isinstance(data, dict) else None
    if lot_id is None:
        raise _shape_error(endpoints.WISHLIST_CREATE_LOT, data, "no lot_id returned")
    return CreateLotResponse(lot_id=lot_id)


def _decode_id_lookup(data: Any) -> IdLookupResponse:
    if not isinstance(data, dict):
        raise _shape_error(endpoints.CATALOG_ID_LOOKUP, data, "expected a JSON object")

    # No matches come back without a boids array.
    boids = data.get("boids")
    if boids is None:
        return IdLookupResponse()
    if not isinstance(boids, list) or not all(isinstance(b, str) for b in boids):
        raise _shape_error(endpoints.CATALOG_ID_LOOKUP, data, "boids must be a list of strings")
    return IdLookupResponse(boids=list(boids))
