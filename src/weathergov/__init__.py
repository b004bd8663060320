"""Minimal client for the National Weather Service (weather.gov) API."""

from __future__ import annotations

from .client import (
    ClientConfig,
    WeatherGovAPIError,
    WeatherGovClient,
    WeatherGovError,
    WeatherGovRateLimitError,
    WeatherGovResponseError,
)

__version__ = "0.1.0"

__all__ = [
    "WeatherGovClient",
    "ClientConfig",
    "WeatherGovError",
    "WeatherGovAPIError",
    "WeatherGovRateLimitError",
    "WeatherGovResponseError",
]
