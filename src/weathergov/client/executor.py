"""Request executor: one logical GET to completion with linear retry backoff.

Status handling:
    2xx          -> decode the JSON body and return it.
    429, 5xx     -> wait ``k`` seconds after the k-th transient failure and resend,
                    at most ``retry_limit`` times.
    anything else (or a 429/5xx once the budget is spent)
                 -> raise ``WeatherGovAPIError`` with the URL, status and body text.

Transport errors propagate unchanged unless ``retry_transport_errors`` is set,
in which case connection errors and timeouts share the same budget.
"""
from __future__ import annotations
import logging
import time
from typing import Any, Callable, Dict, Mapping, Optional
import requests
from requests.structures import CaseInsensitiveDict
from tenacity import (
    RetryCallState,
    Retrying,
    retry_if_exception,
    stop_after_attempt,
    wait_incrementing,
)
from .constants import (
    RATE_LIMIT_STATUS,
    RETRY_BACKOFF_STEP_SECONDS,
    SERVER_ERROR_STATUS_RANGE,
    SUCCESS_STATUS_RANGE,
)
from .models import ClientConfig, WeatherGovAPIError, WeatherGovRateLimitError
from .transport import HTTPClient

LOGGER = logging.getLogger(__name__)

TRANSPORT_RETRY_EXCEPTIONS = (requests.ConnectionError, requests.Timeout)


def resolve_url(target: str, base_url: str) -> str:
    """Return ``target`` verbatim if it is absolute, else join it to ``base_url``."""
    if target.startswith("http"):
        return target
    return base_url + target


def merge_headers(
    defaults: Mapping[str, str], overrides: Optional[Mapping[str, str]] = None
) -> Dict[str, str]:
    """Merge per-call header overrides over the defaults; overrides win.

    Header names are matched case-insensitively so ``accept`` replaces ``Accept``.
    """
    merged: CaseInsensitiveDict = CaseInsensitiveDict(defaults)
    if overrides:
        merged.update(overrides)
    return dict(merged)


def is_success_status(status_code: int) -> bool:
    return status_code in SUCCESS_STATUS_RANGE


def is_retryable_status(status_code: int) -> bool:
    return status_code == RATE_LIMIT_STATUS or status_code in SERVER_ERROR_STATUS_RANGE


def _error_for_status(url: str, status_code: int, body: str) -> WeatherGovAPIError:
    if status_code == RATE_LIMIT_STATUS:
        return WeatherGovRateLimitError(url, status_code, body)
    return WeatherGovAPIError(url, status_code, body)


class RequestExecutor:
    """Issues GET requests against the weather.gov API with the retry policy applied.

    Holds no per-request state; each ``execute`` call builds its own retry
    controller, so one executor can be shared across threads.
    """

    def __init__(
        self,
        config: ClientConfig,
        http_client: HTTPClient,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._config = config
        self._http_client = http_client
        self._sleep = sleep

    @property
    def config(self) -> ClientConfig:
        return self._config

    def _should_retry(self, exc: BaseException) -> bool:
        if isinstance(exc, WeatherGovAPIError):
            return is_retryable_status(exc.status_code)
        if self._config.retry_transport_errors:
            return isinstance(exc, TRANSPORT_RETRY_EXCEPTIONS)
        return False

    def _log_retry(self, retry_state: RetryCallState) -> None:
        exc = retry_state.outcome.exception() if retry_state.outcome else None
        if isinstance(exc, WeatherGovAPIError):
            reason = f"HTTP {exc.status_code}"
        else:
            reason = repr(exc)
        LOGGER.warning(
            "Request to %s failed (%s); retry %d of %d in %.0fs",
            retry_state.args[0],
            reason,
            retry_state.attempt_number,
            self._config.retry_limit,
            retry_state.next_action.sleep if retry_state.next_action else 0.0,
        )

    def _create_retrying(self) -> Retrying:
        return Retrying(
            sleep=self._sleep,
            retry=retry_if_exception(self._should_retry),
            stop=stop_after_attempt(self._config.retry_limit + 1),
            wait=wait_incrementing(
                start=RETRY_BACKOFF_STEP_SECONDS,
                increment=RETRY_BACKOFF_STEP_SECONDS,
            ),
            before_sleep=self._log_retry,
            reraise=True,
        )

    def _send(self, url: str, headers: Dict[str, str]) -> Any:
        LOGGER.debug("GET %s", url)
        response = self._http_client.get(
            url=url,
            headers=headers,
            timeout=self._config.timeout,
        )
        if is_success_status(response.status_code):
            return response.json()
        raise _error_for_status(url, response.status_code, response.text)

    def execute(self, target: str, headers: Optional[Mapping[str, str]] = None) -> Any:
        """
        Perform one logical GET request and return the decoded JSON body.

        Args:
            target: Absolute URL, or a path joined to the configured base URL.
            headers: Optional per-call headers merged over the defaults.

        Returns:
            The decoded JSON payload.

        Raises:
            WeatherGovAPIError: On a non-retryable status or once retries run out.
            WeatherGovRateLimitError: If the final response was HTTP 429.
            requests.RequestException: If the transport itself fails.
            ValueError: If a 2xx response body is not valid JSON.
        """
        url = resolve_url(target, self._config.base_url)
        merged = merge_headers(self._config.default_headers, headers)
        retrying = self._create_retrying()
        try:
            return retrying(self._send, url, merged)
        except WeatherGovAPIError as exc:
            LOGGER.error("Request to %s failed with HTTP %s", url, exc.status_code)
            raise


__all__ = [
    "RequestExecutor",
    "resolve_url",
    "merge_headers",
    "is_success_status",
    "is_retryable_status",
]
