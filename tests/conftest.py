"""Shared pytest fixtures for weather.gov client tests."""

from __future__ import annotations

import pytest

from weathergov.config.settings import reset_settings

ENV_VARS = [
    "WEATHERGOV_USER_AGENT",
    "WEATHERGOV_BASE_URL",
    "WEATHERGOV_RETRY_LIMIT",
    "WEATHERGOV_TIMEOUT",
    "WEATHERGOV_RETRY_TRANSPORT_ERRORS",
]


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Remove WEATHERGOV_* env vars and run from an empty directory (no .env)."""
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    reset_settings()
    yield
    reset_settings()
