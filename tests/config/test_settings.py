"""Tests for Pydantic settings configuration.

This module tests the environment-driven configuration to ensure:
- Settings load correctly from environment variables and .env files
- Default values match the client's compile-time defaults
- Invalid values raise ValidationError
- Environment variables override .env file values
"""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from weathergov.client import WeatherGovClient
from weathergov.config.settings import WeatherGovSettings, get_settings


class TestWeatherGovSettings:
    """Tests for WeatherGovSettings configuration."""

    def test_default_values(self, clean_env):
        """Settings should fall back to the client defaults."""
        settings = WeatherGovSettings()

        assert settings.user_agent == "weathergov-client (you@example.com)"
        assert settings.base_url == "https://api.weather.gov"
        assert settings.retry_limit == 3
        assert settings.timeout == 30.0
        assert settings.retry_transport_errors is False

    def test_load_from_env_vars(self, monkeypatch, clean_env):
        """Settings should load from WEATHERGOV_* environment variables."""
        monkeypatch.setenv("WEATHERGOV_USER_AGENT", "env-agent (ops@example.com)")
        monkeypatch.setenv("WEATHERGOV_BASE_URL", "https://staging.example.com/")
        monkeypatch.setenv("WEATHERGOV_RETRY_LIMIT", "5")
        monkeypatch.setenv("WEATHERGOV_TIMEOUT", "12.5")
        monkeypatch.setenv("WEATHERGOV_RETRY_TRANSPORT_ERRORS", "true")

        settings = WeatherGovSettings()

        assert settings.user_agent == "env-agent (ops@example.com)"
        assert settings.base_url == "https://staging.example.com"
        assert settings.retry_limit == 5
        assert settings.timeout == 12.5
        assert settings.retry_transport_errors is True

    def test_load_from_env_file(self, clean_env):
        """Settings should read a .env file in the working directory."""
        Path(".env").write_text("WEATHERGOV_RETRY_LIMIT=7\n", encoding="utf-8")

        assert WeatherGovSettings().retry_limit == 7

    def test_env_var_overrides_env_file(self, monkeypatch, clean_env):
        Path(".env").write_text("WEATHERGOV_RETRY_LIMIT=7\n", encoding="utf-8")
        monkeypatch.setenv("WEATHERGOV_RETRY_LIMIT", "2")

        assert WeatherGovSettings().retry_limit == 2

    def test_negative_retry_limit_raises_error(self, monkeypatch, clean_env):
        monkeypatch.setenv("WEATHERGOV_RETRY_LIMIT", "-1")

        with pytest.raises(ValidationError) as exc_info:
            WeatherGovSettings()

        assert "retry_limit" in str(exc_info.value).lower()

    def test_invalid_base_url_raises_error(self, monkeypatch, clean_env):
        monkeypatch.setenv("WEATHERGOV_BASE_URL", "api.weather.gov")

        with pytest.raises(ValidationError, match="must start with http"):
            WeatherGovSettings()


class TestGetSettings:
    """Tests for the lazily-created settings singleton."""

    def test_returns_same_instance(self, clean_env):
        assert get_settings() is get_settings()

    def test_client_from_settings(self, monkeypatch, clean_env):
        monkeypatch.setenv("WEATHERGOV_USER_AGENT", "env-agent")
        monkeypatch.setenv("WEATHERGOV_RETRY_LIMIT", "1")

        client = WeatherGovClient.from_settings()

        assert client.config.user_agent == "env-agent"
        assert client.config.retry_limit == 1

    def test_client_ignores_env_without_settings(self, monkeypatch, clean_env):
        """Plain construction uses compile-time defaults, not the environment."""
        monkeypatch.setenv("WEATHERGOV_RETRY_LIMIT", "9")

        assert WeatherGovClient().config.retry_limit == 3
