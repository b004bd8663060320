"""weather.gov API Client Package.

This package provides a small, testable interface to the National Weather
Service API with support for:
- Linear backoff retries on HTTP 429/5xx (resilience)
- Dependency injection for the HTTP client and sleep function (testability)
- Immutable, validated configuration via Pydantic

Example usage:
    >>> from weathergov.client import WeatherGovClient
    >>> client = WeatherGovClient(user_agent="my-app (me@example.com)")
    >>> alerts = client.get_alerts({"area": "NY"})
"""

from __future__ import annotations

from .client import (
    AlertQuery,
    WeatherGovClient,
    alerts_path,
    format_coordinate,
    linked_path,
    point_path,
)
from .constants import (
    DEFAULT_BASE_URL,
    DEFAULT_RETRY_LIMIT,
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_USER_AGENT,
    GEOJSON_ACCEPT,
)
from .executor import (
    RequestExecutor,
    is_retryable_status,
    is_success_status,
    merge_headers,
    resolve_url,
)
from .models import (
    ClientConfig,
    WeatherGovAPIError,
    WeatherGovError,
    WeatherGovRateLimitError,
    WeatherGovResponseError,
)
from .transport import HTTPClient, HTTPResponse, RequestsHTTPClient

__all__ = [
    # Main client
    "WeatherGovClient",
    "AlertQuery",
    "format_coordinate",
    "point_path",
    "alerts_path",
    "linked_path",
    # Executor
    "RequestExecutor",
    "resolve_url",
    "merge_headers",
    "is_success_status",
    "is_retryable_status",
    # Transport
    "HTTPClient",
    "HTTPResponse",
    "RequestsHTTPClient",
    # Models
    "ClientConfig",
    # Exceptions
    "WeatherGovError",
    "WeatherGovAPIError",
    "WeatherGovRateLimitError",
    "WeatherGovResponseError",
    # Constants
    "DEFAULT_BASE_URL",
    "DEFAULT_USER_AGENT",
    "DEFAULT_RETRY_LIMIT",
    "DEFAULT_TIMEOUT_SECONDS",
    "GEOJSON_ACCEPT",
]
