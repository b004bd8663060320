"""Configuration management for the weather.gov client."""

from __future__ import annotations

from .settings import WeatherGovSettings, get_settings, reset_settings

__all__ = ["WeatherGovSettings", "get_settings", "reset_settings"]
