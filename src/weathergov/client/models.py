"""Client configuration and custom exceptions for the weather.gov API client."""
from __future__ import annotations
from typing import TYPE_CHECKING, Dict, Optional
from pydantic import BaseModel, Field, field_validator
from .constants import (
    DEFAULT_BASE_URL,
    DEFAULT_RETRY_LIMIT,
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_USER_AGENT,
    GEOJSON_ACCEPT,
)

if TYPE_CHECKING:
    from ..config.settings import WeatherGovSettings


class ClientConfig(BaseModel):
    """Immutable configuration for the weather.gov client.

    Attributes:
        base_url: API root used for relative paths (trailing slash stripped).
        retry_limit: Extra attempts after the first on 429/5xx responses.
        user_agent: Identity string sent as the User-Agent header.
        accept: Response format requested via the Accept header.
        timeout: Per-request transport timeout in seconds.
        retry_transport_errors: Also retry connection errors and timeouts.
    """

    model_config = {"frozen": True}

    base_url: str = DEFAULT_BASE_URL
    retry_limit: int = Field(default=DEFAULT_RETRY_LIMIT, ge=0)
    user_agent: str = DEFAULT_USER_AGENT
    accept: str = GEOJSON_ACCEPT
    timeout: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0)
    retry_transport_errors: bool = False

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Ensure base URL starts with http:// or https:// and has no trailing slash."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("base_url must start with http:// or https://")
        return v.rstrip("/")

    @property
    def default_headers(self) -> Dict[str, str]:
        """Headers attached to every request before per-call overrides."""
        return {
            "User-Agent": self.user_agent,
            "Accept": self.accept,
        }

    @classmethod
    def from_settings(cls, settings: "WeatherGovSettings") -> "ClientConfig":
        return cls(
            base_url=settings.base_url,
            retry_limit=settings.retry_limit,
            user_agent=settings.user_agent,
            timeout=settings.timeout,
            retry_transport_errors=settings.retry_transport_errors,
        )


class WeatherGovError(Exception):
    """Base exception for all weather.gov client errors."""
    pass


class WeatherGovAPIError(WeatherGovError):
    """Request ended with a non-2xx status that will not be retried."""

    def __init__(
        self,
        url: str,
        status_code: int,
        body: str = "",
        message: Optional[str] = None,
    ) -> None:
        super().__init__(message or f"Request to {url} failed ({status_code}): {body}")
        self.url = url
        self.status_code = status_code
        self.body = body


class WeatherGovRateLimitError(WeatherGovAPIError):
    """Rate limit still exceeded (HTTP 429) after all retries."""
    pass


class WeatherGovResponseError(WeatherGovError):
    """A decoded response lacks data the client needs to continue."""
    pass


__all__ = [
    "ClientConfig",
    "WeatherGovError",
    "WeatherGovAPIError",
    "WeatherGovRateLimitError",
    "WeatherGovResponseError",
]
