"""Exception hierarchy and HTTP error mapping for bowishlist."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


class BOWishlistError(Exception):
    """
    Base exception for bowishlist.

    Attributes:
        details: Optional structured information (e.g., HTTP status, part code).
        cause: Optional underlying exception that triggered this error.
    """

    def __init__(
        self,
        message: str,
        *,
        details: Optional[dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.details = details or {}
        self.cause = cause


class InputValidationError(BOWishlistError):
    """Raised when the wish list data file is missing, unparseable or malformed."""


class CacheError(BOWishlistError):
    """Base class for cache store failures."""


class CacheNotFoundError(CacheError):
    """Raised when a cache file does not exist (callers default to an empty mapping)."""


class CacheCorruptError(CacheError):
    """Raised when a cache file exists but is not a flat string -> string JSON object."""


class CacheWriteError(CacheError):
    """Raised when a cache file cannot be written."""


class AuthError(BOWishlistError):
    """Raised when the API key is rejected (HTTP 401/403)."""


class InvalidArgumentError(BOWishlistError):
    """Raised when request arguments are invalid (HTTP 400)."""


class NotFoundError(BOWishlistError):
    """Raised when a remote resource is not found (HTTP 404)."""


class RateLimitError(BOWishlistError):
    """Raised when rate-limited (HTTP 429)."""


class NetworkError(BOWishlistError):
    """Raised when network/timeout issues prevent the request."""


class ResponseDecodeError(BOWishlistError):
    """Raised when a response body is not JSON or does not have the expected shape."""


class ApiError(BOWishlistError):
    """Raised for unclassified API errors (5xx, unknown 4xx, etc.)."""


class ResolutionError(BOWishlistError):
    """Raised when a wish list piece cannot be mapped onto catalog identifiers."""


class PartNotFoundError(ResolutionError):
    """Raised when no BOID could be found for a part code."""


class ColorNotFoundError(ResolutionError):
    """Raised when a color name is not present in the color table."""


@dataclass(frozen=True)
class HttpErrorInfo:
    """Lightweight HTTP error information for mapping to bowishlist exceptions."""

    status_code: int
    reason: str | None = None
    message: str | None = None
    details: dict[str, Any] | None = None


def map_http_error(
    info: HttpErrorInfo,
    *,
    cause: Optional[BaseException] = None,
) -> BOWishlistError:
    """
    Map a non-200 HTTP response to a bowishlist exception.

    Policy:
        - 400 -> InvalidArgumentError
        - 401/403 -> AuthError
        - 404 -> NotFoundError
        - 429 -> RateLimitError
        - otherwise -> ApiError
    """
    details: dict[str, Any] = {
        "status_code": info.status_code,
        "reason": info.reason,
    }
    if info.details:
        details.update(info.details)

    message = info.message or f"HTTP error {info.status_code}"

    if info.status_code == 400:
        return InvalidArgumentError(message, details=details, cause=cause)
    if info.status_code in (401, 403):
        return AuthError(message, details=details, cause=cause)
    if info.status_code == 404:
        return NotFoundError(message, details=details, cause=cause)
    if info.status_code == 429:
        return RateLimitError(message, details=details, cause=cause)

    return ApiError(message, details=details, cause=cause)


def is_fatal(exc: BaseException) -> bool:
    """Return True if the error must abort the whole run."""
    if isinstance(exc, ResolutionError):
        return False
    return True
