"""HTTP transport abstraction so the executor can be driven by any client."""
from __future__ import annotations
from typing import Any, Dict, Optional, Protocol
import requests


class HTTPResponse(Protocol):
    """The part of a response the executor reads: status plus body."""

    status_code: int

    @property
    def text(self) -> str:
        ...

    def json(self) -> Any:
        ...


class HTTPClient(Protocol):
    def get(
        self,
        url: str,
        headers: Dict[str, str],
        timeout: float,
    ) -> HTTPResponse:
        ...


class RequestsHTTPClient:
    """Default transport backed by a lazily-created ``requests.Session``.

    Status codes are returned as-is; classification belongs to the executor.
    Connection errors and timeouts propagate as ``requests`` exceptions.
    """

    def __init__(self) -> None:
        self._session: Optional[requests.Session] = None

    def _get_session(self) -> requests.Session:
        if self._session is None:
            self._session = requests.Session()
        return self._session

    def close(self) -> None:
        if self._session is not None:
            self._session.close()
            self._session = None

    def __enter__(self) -> "RequestsHTTPClient":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    def get(
        self,
        url: str,
        headers: Dict[str, str],
        timeout: float,
    ) -> requests.Response:
        session = self._get_session()
        return session.get(url, headers=headers, timeout=timeout)


__all__ = ["HTTPResponse", "HTTPClient", "RequestsHTTPClient"]
