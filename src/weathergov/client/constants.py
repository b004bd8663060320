from __future__ import annotations
# API root
DEFAULT_BASE_URL = "https://api.weather.gov"

# Identification headers (the NWS usage policy requires a User-Agent with contact info)
DEFAULT_USER_AGENT = "weathergov-client (you@example.com)"
GEOJSON_ACCEPT = "application/geo+json"

# Request retry configuration
DEFAULT_RETRY_LIMIT = 3
DEFAULT_TIMEOUT_SECONDS = 30.0
RETRY_BACKOFF_STEP_SECONDS = 1.0

# HTTP status codes for retry logic
RATE_LIMIT_STATUS = 429
SUCCESS_STATUS_RANGE = range(200, 300)
SERVER_ERROR_STATUS_RANGE = range(500, 600)

# Resource paths
POINTS_PATH = "/points"
ALERTS_PATH = "/alerts"

# Point metadata properties holding linked resource URLs
FORECAST_PROPERTY = "forecast"
FORECAST_HOURLY_PROPERTY = "forecastHourly"
FORECAST_GRID_DATA_PROPERTY = "forecastGridData"

__all__ = [
    "DEFAULT_BASE_URL",
    "DEFAULT_USER_AGENT",
    "GEOJSON_ACCEPT",
    "DEFAULT_RETRY_LIMIT",
    "DEFAULT_TIMEOUT_SECONDS",
    "RETRY_BACKOFF_STEP_SECONDS",
    "RATE_LIMIT_STATUS",
    "SUCCESS_STATUS_RANGE",
    "SERVER_ERROR_STATUS_RANGE",
    "POINTS_PATH",
    "ALERTS_PATH",
    "FORECAST_PROPERTY",
    "FORECAST_HOURLY_PROPERTY",
    "FORECAST_GRID_DATA_PROPERTY",
]
