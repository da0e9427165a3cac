# SPDX-License-Identifier: Apache-2.0
"""Tests for the HTTP transport."""

from __future__ import annotations

import asyncio
import socket
from typing import Any
from unittest.mock import AsyncMock, MagicMock, call, patch

import aiohttp
import pytest

from multi_translate.transport import HTTPClient, HTTPError, HTTPOptions

SLEEP_TARGET = "multi_translate.transport.client.asyncio.sleep"


def make_response(status: int = 200, body: str = "", reason: str = "OK") -> MagicMock:
    """Build a mock aiohttp response."""
    response = MagicMock()
    response.status = status
    response.reason = reason
    response.text = AsyncMock(return_value=body)
    return response


def make_session(*outcomes: Any) -> MagicMock:
    """Build a mock session whose request() yields each outcome in turn.

    An outcome is either a response mock or an exception raised when the
    request context is entered.
    """
    contexts = []
    for outcome in outcomes:
        ctx = MagicMock()
        if isinstance(outcome, BaseException):
            ctx.__aenter__ = AsyncMock(side_effect=outcome)
        else:
            ctx.__aenter__ = AsyncMock(return_value=outcome)
        ctx.__aexit__ = AsyncMock(return_value=None)
        contexts.append(ctx)

    session = MagicMock()
    session.request = MagicMock(side_effect=contexts)
    session.close = AsyncMock()
    return session


def make_client(session: MagicMock, **options: Any) -> HTTPClient:
    client = HTTPClient(HTTPOptions(**options))
    client._session = session
    return client


def dns_error() -> aiohttp.ClientConnectorError:
    return aiohttp.ClientConnectorError(
        MagicMock(), socket.gaierror(-2, "Name or service not known")
    )


def resolver_dns_error() -> aiohttp.ClientConnectorDNSError:
    return aiohttp.ClientConnectorDNSError(
        MagicMock(), OSError(None, "Domain name not found")
    )


def refused_error() -> aiohttp.ClientConnectorError:
    return aiohttp.ClientConnectorError(
        MagicMock(), ConnectionRefusedError(111, "Connection refused")
    )


class TestHTTPOptions:
    """Tests for HTTPOptions defaults."""

    def test_default_values(self) -> None:
        """Defaults are 10s timeout, 3 retries, no proxy."""
        options = HTTPOptions()
        assert options.timeout == 10.0
        assert options.retries == 3
        assert options.proxy is None

    def test_proxy_without_scheme_gets_http(self) -> None:
        """Bare host:port proxies are normalized to http URLs."""
        client = HTTPClient(HTTPOptions(proxy="127.0.0.1:55497"))
        assert client.proxy == "http://127.0.0.1:55497"

    def test_proxy_with_scheme_is_kept(self) -> None:
        """Proxies with a scheme are used as given."""
        client = HTTPClient(HTTPOptions(proxy="https://proxy.example.com:8080"))
        assert client.proxy == "https://proxy.example.com:8080"


class TestRequestSuccess:
    """Tests for successful requests."""

    @pytest.mark.asyncio
    async def test_get_returns_body(self) -> None:
        """GET returns the response body as text."""
        session = make_session(make_response(body='[[["Hallo",null]]]'))
        client = make_client(session)

        body = await client.get("https://example.com/translate")

        assert body == '[[["Hallo",null]]]'
        session.request.assert_called_once()
        args, kwargs = session.request.call_args
        assert args == ("GET", "https://example.com/translate")
        assert kwargs["timeout"].total == 10.0

    @pytest.mark.asyncio
    async def test_post_sends_json_for_dict(self) -> None:
        """dict bodies are sent as JSON."""
        session = make_session(make_response(body="ok"))
        client = make_client(session)

        await client.post("https://example.com", {"q": "hello"})

        _, kwargs = session.request.call_args
        assert kwargs["json"] == {"q": "hello"}
        assert "data" not in kwargs

    @pytest.mark.asyncio
    async def test_post_sends_raw_data(self) -> None:
        """Non-JSON bodies are sent as data."""
        session = make_session(make_response(body="ok"))
        client = make_client(session)

        await client.post("https://example.com", "q=hello")

        _, kwargs = session.request.call_args
        assert kwargs["data"] == "q=hello"

    @pytest.mark.asyncio
    async def test_proxy_passed_to_request(self) -> None:
        """Configured proxy is passed on every request."""
        session = make_session(make_response(body="ok"))
        client = make_client(session, proxy="127.0.0.1:8080")

        await client.get("https://example.com")

        _, kwargs = session.request.call_args
        assert kwargs["proxy"] == "http://127.0.0.1:8080"

    @pytest.mark.asyncio
    async def test_per_call_timeout_override(self) -> None:
        """timeout argument overrides the configured default."""
        session = make_session(make_response(body="ok"))
        client = make_client(session, timeout=10.0)

        await client.get("https://example.com", timeout=2.5)

        _, kwargs = session.request.call_args
        assert kwargs["timeout"].total == 2.5


class TestRetryPolicy:
    """Tests for retry classification and backoff."""

    @pytest.mark.asyncio
    async def test_retries_exhausted_makes_all_attempts(self) -> None:
        """retries=2 failing every time gives 3 attempts with 100ms then 200ms waits."""
        session = make_session(
            make_response(status=503),
            make_response(status=503),
            make_response(status=503),
        )
        client = make_client(session, retries=2)

        with patch(SLEEP_TARGET, new_callable=AsyncMock) as mock_sleep:
            with pytest.raises(HTTPError) as exc_info:
                await client.get("https://example.com")

        assert session.request.call_count == 3
        assert mock_sleep.await_args_list == [call(0.1), call(0.2)]
        assert exc_info.value.status_code == 503
        assert exc_info.value.message == "service temporarily unavailable"

    @pytest.mark.asyncio
    async def test_backoff_doubles_each_attempt(self) -> None:
        """Default budget waits 100ms, 200ms, 400ms."""
        session = make_session(*(make_response(status=500) for _ in range(4)))
        client = make_client(session)

        with patch(SLEEP_TARGET, new_callable=AsyncMock) as mock_sleep:
            with pytest.raises(HTTPError):
                await client.get("https://example.com")

        assert session.request.call_count == 4
        assert mock_sleep.await_args_list == [call(0.1), call(0.2), call(0.4)]

    @pytest.mark.asyncio
    async def test_recovers_after_transient_failure(self) -> None:
        """A retryable failure followed by success returns the body."""
        session = make_session(
            asyncio.TimeoutError(),
            make_response(status=429),
            make_response(body="ok"),
        )
        client = make_client(session)

        with patch(SLEEP_TARGET, new_callable=AsyncMock):
            body = await client.get("https://example.com")

        assert body == "ok"
        assert session.request.call_count == 3

    @pytest.mark.asyncio
    async def test_non_retryable_status_fails_immediately(self) -> None:
        """4xx other than 429 raises without using the retry budget."""
        session = make_session(make_response(status=404), make_response(body="ok"))
        client = make_client(session, retries=3)

        with patch(SLEEP_TARGET, new_callable=AsyncMock) as mock_sleep:
            with pytest.raises(HTTPError) as exc_info:
                await client.get("https://example.com")

        assert session.request.call_count == 1
        mock_sleep.assert_not_awaited()
        assert exc_info.value.status_code == 404

    @pytest.mark.asyncio
    async def test_zero_retries_is_single_attempt(self) -> None:
        """retries=0 means exactly one attempt."""
        session = make_session(make_response(status=503), make_response(body="ok"))
        client = make_client(session)

        with patch(SLEEP_TARGET, new_callable=AsyncMock) as mock_sleep:
            with pytest.raises(HTTPError):
                await client.get("https://example.com", retries=0)

        assert session.request.call_count == 1
        mock_sleep.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unknown_failure_not_retried(self) -> None:
        """Exceptions outside the transport taxonomy are not retried."""
        session = make_session(ValueError("boom"), make_response(body="ok"))
        client = make_client(session)

        with pytest.raises(HTTPError) as exc_info:
            await client.get("https://example.com")

        assert session.request.call_count == 1
        assert exc_info.value.message == "unknown error"
        assert exc_info.value.status_code is None


class TestErrorConversion:
    """Tests for mapping raw failures to HTTPError messages."""

    @pytest.mark.parametrize(
        ("status", "message"),
        [
            (400, "invalid request"),
            (429, "rate limited, retry later"),
            (500, "service temporarily unavailable"),
            (502, "service temporarily unavailable"),
            (503, "service temporarily unavailable"),
            (504, "service temporarily unavailable"),
            (403, "request failed with status 403"),
            (501, "request failed with status 501"),
        ],
    )
    @pytest.mark.asyncio
    async def test_status_messages(self, status: int, message: str) -> None:
        """Each HTTP status maps to a fixed message and keeps the code."""
        session = make_session(make_response(status=status))
        client = make_client(session, retries=0)

        with pytest.raises(HTTPError) as exc_info:
            await client.get("https://example.com")

        assert exc_info.value.message == message
        assert exc_info.value.status_code == status
        assert isinstance(exc_info.value.cause, aiohttp.ClientResponseError)

    @pytest.mark.parametrize(
        ("error", "message"),
        [
            (asyncio.TimeoutError(), "request timed out"),
            (aiohttp.ServerTimeoutError("read timeout"), "request timed out"),
            (dns_error(), "could not resolve service address"),
            (resolver_dns_error(), "could not resolve service address"),
            (refused_error(), "could not connect to service"),
            (aiohttp.ServerDisconnectedError(), "could not connect to service"),
        ],
    )
    @pytest.mark.asyncio
    async def test_network_messages(self, error: Exception, message: str) -> None:
        """Failures without a response have no status code."""
        session = make_session(error)
        client = make_client(session, retries=0)

        with pytest.raises(HTTPError) as exc_info:
            await client.get("https://example.com")

        assert exc_info.value.message == message
        assert exc_info.value.status_code is None
        assert exc_info.value.is_network_error
        assert exc_info.value.__cause__ is error


class TestSessionLifecycle:
    """Tests for session management."""

    @pytest.mark.asyncio
    async def test_context_manager_closes_session(self) -> None:
        """Leaving the context closes the session."""
        session = make_session()
        client = make_client(session)

        async with client:
            pass

        session.close.assert_awaited_once()
        assert client._session is None

    @pytest.mark.asyncio
    async def test_close_without_session(self) -> None:
        """close() is a no-op when no session was created."""
        client = HTTPClient()
        await client.close()
        assert client._session is None
