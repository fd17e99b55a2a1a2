"""Public error exports for bowishlist."""

from __future__ import annotations

from .exceptions import (
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
    is_fatal,
    map_http_error,
)

__all__ = [
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
    "is_fatal",
    "map_http_error",
]
