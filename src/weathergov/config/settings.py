"""Environment-driven configuration using Pydantic Settings.

Settings are opt-in: ``WeatherGovClient()`` uses compile-time defaults, while
``WeatherGovClient.from_settings()`` reads ``WEATHERGOV_*`` variables and an
optional ``.env`` file.

Example:
    >>> from weathergov.config import get_settings
    >>> print(get_settings().user_agent)
"""

from __future__ import annotations

import logging
import threading
from typing import Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..client.constants import (
    DEFAULT_BASE_URL,
    DEFAULT_RETRY_LIMIT,
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_USER_AGENT,
)

LOGGER = logging.getLogger(__name__)


class WeatherGovSettings(BaseSettings):
    """weather.gov client configuration.

    Example .env file:
        WEATHERGOV_USER_AGENT=my-app (me@example.com)
        WEATHERGOV_RETRY_LIMIT=5
    """

    model_config = SettingsConfigDict(
        env_prefix="WEATHERGOV_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    user_agent: str = Field(
        default=DEFAULT_USER_AGENT,
        description="User-Agent identifying the caller, per the NWS usage policy",
    )
    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="API root for relative paths",
    )
    retry_limit: int = Field(
        default=DEFAULT_RETRY_LIMIT,
        ge=0,
        description="Extra attempts after the first on HTTP 429/5xx",
    )
    timeout: float = Field(
        default=DEFAULT_TIMEOUT_SECONDS,
        gt=0,
        description="Per-request transport timeout in seconds",
    )
    retry_transport_errors: bool = Field(
        default=False,
        description="Also retry connection errors and timeouts",
    )

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Ensure base URL starts with http:// or https://."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("WEATHERGOV_BASE_URL must start with http:// or https://")
        return v.rstrip("/")


# Lazy initialization - only create settings when accessed
_settings: Optional[WeatherGovSettings] = None
_settings_lock = threading.Lock()


def get_settings() -> WeatherGovSettings:
    """Get or create the WeatherGovSettings singleton (thread-safe).

    Returns:
        Settings loaded from environment variables/.env file.

    Raises:
        ValidationError: If a configured value is invalid.
    """
    global _settings

    if _settings is not None:
        return _settings

    with _settings_lock:
        if _settings is None:
            LOGGER.info("Loading weather.gov settings from environment variables and .env file")
            try:
                _settings = WeatherGovSettings()
            except ValidationError as e:
                LOGGER.error("Configuration validation failed: %s", e)
                raise

    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next ``get_settings()`` reloads them."""
    global _settings
    with _settings_lock:
        _settings = None


__all__ = ["WeatherGovSettings", "get_settings", "reset_settings"]
