"""Connection settings for the Brick Owl API."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_BASE_URL: str = "https://api.brickowl.com/v1"
DEFAULT_TIMEOUT_SEC: float = 10.0


@dataclass(slots=True, frozen=True)
class ClientConfig:
    """
    Settings passed explicitly to the controller.

    Attributes:
        api_key: Key registered on Brick Owl; sent with every request.
        base_url: API root without trailing slash.
        timeout_sec: Per-request timeout. A timed-out request is a failure, never retried.
        verbose: Log each request and a truncated response body.
    """

    api_key: str
    base_url: str = DEFAULT_BASE_URL
    timeout_sec: float = DEFAULT_TIMEOUT_SEC
    verbose: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.api_key, str) or not self.api_key.strip():
            raise ValueError("ClientConfig.api_key must be a non-empty string")

        if not isinstance(self.base_url, str) or not self.base_url.strip():
            raise ValueError("ClientConfig.base_url must be a non-empty string")

        if self.timeout_sec <= 0:
            raise ValueError("ClientConfig.timeout_sec must be positive")

    def url_for(self, path: str) -> str:
        """Join an endpoint path onto base_url."""
        return f"{self.base_url.rstrip('/')}/{path.lstrip('/')}"
