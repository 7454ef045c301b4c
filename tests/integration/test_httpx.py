r"""Integration tests wrapping httpx client calls in policy executors.

The HTTP server is simulated with ``httpx.MockTransport`` so the tests
exercise real client code without network access.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import Mock, call

import httpx
import pytest

from rezpolicy import Policy, build_async_executor, build_executor
from rezpolicy.backoff import ExponentialBackoff

if TYPE_CHECKING:
    from collections.abc import Callable

RETRYABLE_STATUS_CODES = (429, 500, 502, 503, 504)


def flaky_handler(statuses: list[int]) -> Callable[[httpx.Request], httpx.Response]:
    """Create a handler answering with ``statuses`` in order, then 200."""
    remaining = list(statuses)

    def handler(request: httpx.Request) -> httpx.Response:
        if remaining:
            return httpx.Response(remaining.pop(0), request=request)
        return httpx.Response(200, json={"ok": True}, request=request)

    return handler


def is_transient(attempt: int, error: Exception) -> bool:
    if attempt > 5:
        return False
    if isinstance(error, httpx.HTTPStatusError):
        return error.response.status_code in RETRYABLE_STATUS_CODES
    return isinstance(error, httpx.TransportError)


def test_retries_transient_status_codes(mock_sleep: Mock) -> None:
    transport = httpx.MockTransport(flaky_handler([503, 502]))
    policy = Policy().complex_wait_retry_on_callback(ExponentialBackoff(0.3), is_transient)

    with httpx.Client(transport=transport) as client:

        def fetch() -> dict:
            response = client.get("https://api.example.com/data")
            response.raise_for_status()
            return response.json()

        assert build_executor(policy).execute(fetch) == {"ok": True}

    assert mock_sleep.call_args_list == [call(0.3), call(0.6)]


def test_permanent_status_code_is_not_retried() -> None:
    handler = Mock(side_effect=flaky_handler([404, 404]))
    transport = httpx.MockTransport(handler)
    policy = Policy().retry_on_callback(is_transient)

    with httpx.Client(transport=transport) as client:

        def fetch() -> httpx.Response:
            return client.get("https://api.example.com/missing").raise_for_status()

        with pytest.raises(httpx.HTTPStatusError) as exc_info:
            build_executor(policy).execute(fetch)

    assert exc_info.value.response.status_code == 404
    assert handler.call_count == 1


def test_connection_errors_exhaust_retry_budget(mock_callback: Mock) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        msg = "connection refused"
        raise httpx.ConnectError(msg, request=request)

    policy = Policy().retry_x_times_with_failure_callback(2, mock_callback)
    with httpx.Client(transport=httpx.MockTransport(handler)) as client:
        with pytest.raises(httpx.ConnectError, match=r"connection refused"):
            build_executor(policy).execute(lambda: client.get("https://api.example.com/data"))

    assert mock_callback.call_count == 2


@pytest.mark.asyncio
async def test_async_retries_transient_status_codes(mock_asleep: Mock) -> None:
    transport = httpx.MockTransport(flaky_handler([429]))
    policy = Policy().wait_retry_on_callback(1.0, is_transient)

    async with httpx.AsyncClient(transport=transport) as client:

        async def fetch() -> dict:
            response = await client.get("https://api.example.com/data")
            response.raise_for_status()
            return response.json()

        assert await build_async_executor(policy).execute(fetch) == {"ok": True}

    assert mock_asleep.call_args_list == [call(1.0)]
