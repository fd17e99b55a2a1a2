"""bowishlist public API."""

from __future__ import annotations

from bowishlist.cache import CacheStore, PartIdentityCache, open_part_cache
from bowishlist.config import ClientConfig, RunConfig
from bowishlist.errors import (
    ApiError,
    AuthError,
    BOWishlistError,
    CacheCorruptError,
    CacheError,
    CacheNotFoundError,
    CacheWriteError,
    ColorNotFoundError,
    HttpErrorInfo,
    InputValidationError,
    InvalidArgumentError,
    NetworkError,
    NotFoundError,
    PartNotFoundError,
    RateLimitError,
    ResolutionError,
    ResponseDecodeError,
    map_http_error,
)
from bowishlist.local import load_desired_lists
from bowishlist.manager import WishlistManager
from bowishlist.models import (
    DesiredItem,
    DesiredList,
    ItemResult,
    ReconcileResult,
    RemoteList,
)
from bowishlist.plan import DUMMY_LIST_NAME, Action, PlanOperation, ReconcilePlan
from bowishlist.resolve import ColorResolver, PartIdentityResolver

__all__ = [
    # High-level
    "WishlistManager",
    "load_desired_lists",
    # Config
    "ClientConfig",
    "RunConfig",
    # Caches / resolvers
    "CacheStore",
    "PartIdentityCache",
    "open_part_cache",
    "ColorResolver",
    "PartIdentityResolver",
    # Plan / Models
    "Action",
    "PlanOperation",
    "ReconcilePlan",
    "DUMMY_LIST_NAME",
    "DesiredItem",
    "DesiredList",
    "RemoteList",
    "ItemResult",
    "ReconcileResult",
    # Errors
    "BOWishlistError",
    "InputValidationError",
    "CacheError",
    "CacheNotFoundError",
    "CacheCorruptError",
    "CacheWriteError",
    "AuthError",
    "InvalidArgumentError",
    "NotFoundError",
    "RateLimitError",
    "NetworkError",
    "ResponseDecodeError",
    "ApiError",
    "ResolutionError",
    "PartNotFoundError",
    "ColorNotFoundError",
    "HttpErrorInfo",
    "map_http_error",
]
