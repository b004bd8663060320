"""Shared fixtures for weather.gov client tests."""

from __future__ import annotations

import json
from typing import Any, Callable, Dict, List, Optional, Union

import pytest

from weathergov.client import ClientConfig, RequestExecutor, WeatherGovClient


class FakeResponse:
    """Scripted transport response: a status code plus a text body."""

    def __init__(
        self,
        status_code: int,
        payload: Any = None,
        text: Optional[str] = None,
    ) -> None:
        self.status_code = status_code
        if text is None:
            text = json.dumps(payload) if payload is not None else ""
        self.text = text

    def json(self) -> Any:
        return json.loads(self.text)


class MockHTTPClient:
    """Replays scripted responses (or raises scripted exceptions) in order."""

    def __init__(self, responses: Optional[List[Union[FakeResponse, Exception]]] = None):
        self.responses = list(responses or [])
        self.calls: List[Dict[str, Any]] = []

    def get(self, url: str, headers: Dict[str, str], timeout: float) -> FakeResponse:
        self.calls.append({"url": url, "headers": headers, "timeout": timeout})
        if not self.responses:
            raise AssertionError(f"Unexpected request to {url}")
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    @property
    def urls(self) -> List[str]:
        return [call["url"] for call in self.calls]


@pytest.fixture
def fake_response() -> Callable[..., FakeResponse]:
    return FakeResponse


@pytest.fixture
def sleeps() -> List[float]:
    """Records every backoff delay instead of sleeping."""
    return []


@pytest.fixture
def make_executor(sleeps: List[float]) -> Callable[..., RequestExecutor]:
    def factory(
        responses: List[Union[FakeResponse, Exception]], **config: Any
    ) -> RequestExecutor:
        config.setdefault("user_agent", "test-agent")
        executor = RequestExecutor(
            ClientConfig(**config), MockHTTPClient(responses), sleep=sleeps.append
        )
        return executor

    return factory


@pytest.fixture
def make_client(sleeps: List[float]) -> Callable[..., WeatherGovClient]:
    def factory(
        responses: List[Union[FakeResponse, Exception]], **options: Any
    ) -> WeatherGovClient:
        options.setdefault("user_agent", "test-agent")
        return WeatherGovClient(
            http_client=MockHTTPClient(responses), sleep=sleeps.append, **options
        )

    return factory
