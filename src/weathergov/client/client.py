from __future__ import annotations
import logging
import time
from typing import Any, Callable, Mapping, Optional, Sequence, Tuple, Union
from urllib.parse import urlencode, urlsplit
from .constants import (
    ALERTS_PATH,
    FORECAST_GRID_DATA_PROPERTY,
    FORECAST_HOURLY_PROPERTY,
    FORECAST_PROPERTY,
    POINTS_PATH,
)
from .executor import RequestExecutor
from .models import ClientConfig, WeatherGovResponseError
from .transport import HTTPClient, RequestsHTTPClient

LOGGER = logging.getLogger(__name__)

AlertQuery = Union[Mapping[str, str], Sequence[Tuple[str, str]]]


def format_coordinate(value: float) -> str:
    """Render a coordinate as its shortest numeric text (``-74.006``, ``40``)."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def point_path(lat: float, lon: float) -> str:
    return f"{POINTS_PATH}/{format_coordinate(lat)},{format_coordinate(lon)}"


def alerts_path(params: Optional[AlertQuery] = None) -> str:
    query = urlencode(params) if params else ""
    return f"{ALERTS_PATH}?{query}" if query else ALERTS_PATH


def linked_path(point: Any, prop: str) -> str:
    """Path portion of a resource URL embedded in point metadata ``properties``."""
    properties = point.get("properties") if isinstance(point, dict) else None
    url = properties.get(prop) if isinstance(properties, dict) else None
    if not url or not isinstance(url, str):
        raise WeatherGovResponseError(f"Point metadata has no '{prop}' URL")
    return urlsplit(url).path


# Main client class for the weather.gov API
class WeatherGovClient:
    """Coordinate-based forecast and alert lookups against api.weather.gov.

    Forecast, hourly forecast and grid data need two requests: the ``/points``
    lookup resolves a coordinate to its forecast grid, then the linked URL
    from that metadata is fetched.

    Example:
        >>> with WeatherGovClient(user_agent="my-app (me@example.com)") as client:
        ...     forecast = client.get_forecast(40.7128, -74.0060)
    """

    def __init__(
        self,
        user_agent: Optional[str] = None,
        base_url: Optional[str] = None,
        retry_limit: Optional[int] = None,
        *,
        timeout: Optional[float] = None,
        config: Optional[ClientConfig] = None,
        http_client: Optional[HTTPClient] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        options = {
            "user_agent": user_agent,
            "base_url": base_url,
            "retry_limit": retry_limit,
            "timeout": timeout,
        }
        options = {key: value for key, value in options.items() if value is not None}
        if config is not None and options:
            raise ValueError(
                f"Pass either config or individual options, not both: {', '.join(options)}"
            )
        self._config = config or ClientConfig(**options)
        # HTTP client - track if we own it for cleanup
        self._owns_http_client = http_client is None
        self._http_client = http_client or RequestsHTTPClient()
        self._executor = RequestExecutor(self._config, self._http_client, sleep=sleep)

    @classmethod
    def from_settings(cls, settings: Optional[Any] = None, **kwargs: Any) -> "WeatherGovClient":
        """Build a client from ``WEATHERGOV_*`` environment settings."""
        from ..config.settings import get_settings

        return cls(config=ClientConfig.from_settings(settings or get_settings()), **kwargs)

    def close(self) -> None:
        if self._owns_http_client and hasattr(self._http_client, "close"):
            self._http_client.close()

    def __enter__(self) -> "WeatherGovClient":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    @property
    def config(self) -> ClientConfig:
        return self._config

    def get_json(self, target: str, headers: Optional[Mapping[str, str]] = None) -> Any:
        """Fetch any API path or absolute URL (e.g. links found in a payload)."""
        return self._executor.execute(target, headers=headers)

    def get_point(self, lat: float, lon: float) -> Any:
        """Fetch ``/points`` metadata (grid, office and linked URLs) for a coordinate."""
        return self._executor.execute(point_path(lat, lon))

    def _follow_point_link(self, lat: float, lon: float, prop: str) -> Any:
        point = self.get_point(lat, lon)
        path = linked_path(point, prop)
        LOGGER.debug("Following %s link for (%s, %s): %s", prop, lat, lon, path)
        return self._executor.execute(path)

    def get_forecast(self, lat: float, lon: float) -> Any:
        """7-day forecast in 12-hour periods."""
        return self._follow_point_link(lat, lon, FORECAST_PROPERTY)

    def get_hourly_forecast(self, lat: float, lon: float) -> Any:
        """Hourly forecast for the next 7 days."""
        return self._follow_point_link(lat, lon, FORECAST_HOURLY_PROPERTY)

    def get_grid_data(self, lat: float, lon: float) -> Any:
        """Raw gridded forecast data (temperature, wind, etc.)."""
        return self._follow_point_link(lat, lon, FORECAST_GRID_DATA_PROPERTY)

    def get_alerts(self, params: Optional[AlertQuery] = None) -> Any:
        """
        Fetch alerts, optionally filtered.

        Args:
            params: Query filters such as ``{"area": "NY", "severity": "severe"}``,
                encoded in the order given. Pairs may repeat a key.

        Returns:
            Decoded GeoJSON feature collection.
        """
        return self._executor.execute(alerts_path(params))


__all__ = [
    "WeatherGovClient",
    "AlertQuery",
    "format_coordinate",
    "point_path",
    "alerts_path",
    "linked_path",
]
