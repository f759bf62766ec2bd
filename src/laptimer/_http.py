"""httpx transports for the timing server API."""

from __future__ import annotations

import contextlib
from collections.abc import Iterator
from typing import Any

import httpx

from laptimer.exceptions import (
    LapTimerAPIError,
    LapTimerConnectionError,
    LapTimerTimeoutError,
)

DEFAULT_BASE_URL = "http://localhost:3000"
DEFAULT_TIMEOUT = 5.0

_HEADERS = {"Accept": "application/json"}


@contextlib.contextmanager
def _mapped_errors() -> Iterator[None]:
    """Re-raise httpx connection failures as LapTimerError subclasses."""
    try:
        yield
    except httpx.ConnectError as exc:
        raise LapTimerConnectionError(str(exc)) from exc
    except httpx.TimeoutException as exc:
        raise LapTimerTimeoutError(str(exc)) from exc


def _json_body(response: httpx.Response) -> Any:
    """Parsed JSON of a successful response; any 4xx/5xx raises LapTimerAPIError."""
    if response.is_error:
        raise LapTimerAPIError(status_code=response.status_code, message=response.text)
    return response.json()


class SyncTransport:
    """Blocking transport over one pooled ``httpx.Client``."""

    def __init__(self, base_url: str = DEFAULT_BASE_URL, timeout: float = DEFAULT_TIMEOUT) -> None:
        self._client = httpx.Client(base_url=base_url, timeout=timeout, headers=_HEADERS)

    def request(self, method: str, endpoint: str, json: dict[str, Any] | None = None) -> Any:
        with _mapped_errors():
            response = self._client.request(method, endpoint, json=json)
        return _json_body(response)

    def close(self) -> None:
        self._client.close()


class AsyncTransport:
    """Async counterpart of :class:`SyncTransport`."""

    def __init__(self, base_url: str = DEFAULT_BASE_URL, timeout: float = DEFAULT_TIMEOUT) -> None:
        self._client = httpx.AsyncClient(base_url=base_url, timeout=timeout, headers=_HEADERS)

    async def request(self, method: str, endpoint: str, json: dict[str, Any] | None = None) -> Any:
        with _mapped_errors():
            response = await self._client.request(method, endpoint, json=json)
        return _json_body(response)

    async def close(self) -> None:
        await self._client.aclose()
