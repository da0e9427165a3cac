# SPDX-License-Identifier: Apache-2.0
"""Async HTTP client with exponential-backoff retry.

Failures are classified as retryable (no response received, HTTP 5xx,
HTTP 429) or non-retryable (any other HTTP 4xx). Retryable failures are
re-attempted after ``2**attempt * 100ms`` until the retry budget runs out;
the last failure is then converted into an :class:`HTTPError`.
"""

from __future__ import annotations

import asyncio
import logging
import socket
from dataclasses import dataclass
from typing import Any

import aiohttp

from multi_translate.transport.errors import (
    MSG_CONNECT_FAILURE,
    MSG_DNS_FAILURE,
    MSG_INVALID_REQUEST,
    MSG_RATE_LIMITED,
    MSG_TIMEOUT,
    MSG_UNAVAILABLE,
    MSG_UNKNOWN,
    HTTPError,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HTTPOptions:
    """Transport configuration.

    Attributes:
        timeout: Per-attempt timeout in seconds, as aiohttp's
            ``ClientTimeout`` expects. The wire-level default is usually
            quoted as 10000 ms; here it is 10.0.
        retries: Maximum number of retries after the first attempt.
        proxy: Proxy URL ("http://host:port" or bare "host:port").
    """

    timeout: float = 10.0
    retries: int = 3
    proxy: str | None = None


def _normalize_proxy(proxy: str | None) -> str | None:
    if not proxy:
        return None
    if proxy.startswith("http"):
        return proxy
    return f"http://{proxy}"


class HTTPClient:
    """Shared HTTP transport for translator backends.

    A single ``aiohttp.ClientSession`` is created lazily and reused by
    concurrent requests. The client holds no per-request state.
    """

    BACKOFF_BASE = 0.1  # seconds; delay = BACKOFF_BASE * 2**attempt
    UNAVAILABLE_STATUSES = frozenset({500, 502, 503, 504})

    def __init__(self, options: HTTPOptions | None = None) -> None:
        """Initialize HTTPClient.

        Args:
            options: Default timeout, retry count and proxy.
        """
        self._options = options or HTTPOptions()
        self._proxy = _normalize_proxy(self._options.proxy)
        self._session: aiohttp.ClientSession | None = None

    @property
    def options(self) -> HTTPOptions:
        """Default options captured at construction."""
        return self._options

    @property
    def proxy(self) -> str | None:
        """Normalized proxy URL."""
        return self._proxy

    async def __aenter__(self) -> HTTPClient:
        """Enter async context manager."""
        await self._ensure_session()
        return self

    async def __aexit__(self, *args: Any) -> None:
        """Exit async context manager."""
        await self.close()

    async def _ensure_session(self) -> aiohttp.ClientSession:
        """Ensure aiohttp session exists.

        Returns:
            Active aiohttp session.
        """
        if self._session is None:
            self._session = aiohttp.ClientSession()
        return self._session

    async def close(self) -> None:
        """Close the HTTP session."""
        if self._session:
            await self._session.close()
            self._session = None

    async def get(
        self,
        url: str,
        *,
        timeout: float | None = None,
        retries: int | None = None,
        headers: dict[str, str] | None = None,
    ) -> str:
        """Send a GET request and return the response body."""
        return await self.request(
            "GET", url, timeout=timeout, retries=retries, headers=headers
        )

    async def post(
        self,
        url: str,
        data: Any = None,
        *,
        timeout: float | None = None,
        retries: int | None = None,
        headers: dict[str, str] | None = None,
    ) -> str:
        """Send a POST request and return the response body."""
        return await self.request(
            "POST", url, data, timeout=timeout, retries=retries, headers=headers
        )

    async def request(
        self,
        method: str,
        url: str,
        data: Any = None,
        *,
        timeout: float | None = None,
        retries: int | None = None,
        headers: dict[str, str] | None = None,
    ) -> str:
        """Send a request with retry on transient failures.

        Args:
            method: HTTP method ("GET" or "POST").
            url: Request URL.
            data: Request body. dicts and lists are sent as JSON.
            timeout: Per-attempt timeout override in seconds.
            retries: Retry count override. 0 means a single attempt.
            headers: Extra request headers.

        Returns:
            Response body as text.

        Raises:
            HTTPError: When the final attempt fails or a non-retryable
                failure occurs.
        """
        effective_timeout = self._options.timeout if timeout is None else timeout
        max_retries = max(0, self._options.retries if retries is None else retries)

        last_error: Exception | None = None
        for attempt in range(max_retries + 1):
            try:
                return await self._send_once(
                    method, url, data, effective_timeout, headers
                )
            except Exception as exc:
                last_error = exc
                if attempt == max_retries or not self._is_retryable(exc):
                    break
                delay = self._backoff_delay(attempt)
                logger.debug(
                    "%s %s failed (%s), retry %d/%d in %.1fs",
                    method,
                    url,
                    type(exc).__name__,
                    attempt + 1,
                    max_retries,
                    delay,
                )
                await asyncio.sleep(delay)

        if last_error is None:
            raise HTTPError(MSG_UNKNOWN)
        error = self._convert_error(last_error)
        logger.debug("%s %s gave up: %s", method, url, error.message)
        raise error from last_error

    async def _send_once(
        self,
        method: str,
        url: str,
        data: Any,
        timeout: float,
        headers: dict[str, str] | None,
    ) -> str:
        session = await self._ensure_session()

        kwargs: dict[str, Any] = {
            "timeout": aiohttp.ClientTimeout(total=timeout),
            "headers": headers,
        }
        if self._proxy:
            kwargs["proxy"] = self._proxy
        if isinstance(data, (dict, list)):
            kwargs["json"] = data
        elif data is not None:
            kwargs["data"] = data

        async with session.request(method, url, **kwargs) as response:
            if not 200 <= response.status < 300:
                raise aiohttp.ClientResponseError(
                    response.request_info,
                    response.history,
                    status=response.status,
                    message=response.reason or "",
                )
            body: str = await response.text()
            return body

    def _backoff_delay(self, attempt: int) -> float:
        return float(2**attempt) * self.BACKOFF_BASE

    @staticmethod
    def _is_retryable(error: Exception) -> bool:
        if isinstance(error, aiohttp.ClientResponseError):
            return error.status >= 500 or error.status == 429
        # No response received
        return isinstance(error, (asyncio.TimeoutError, aiohttp.ClientError))

    def _convert_error(self, error: Exception) -> HTTPError:
        if isinstance(error, asyncio.TimeoutError):
            return HTTPError(MSG_TIMEOUT, None, error)

        if isinstance(error, aiohttp.ClientResponseError):
            status = error.status
            if status == 400:
                return HTTPError(MSG_INVALID_REQUEST, status, error)
            if status == 429:
                return HTTPError(MSG_RATE_LIMITED, status, error)
            if status in self.UNAVAILABLE_STATUSES:
                return HTTPError(MSG_UNAVAILABLE, status, error)
            return HTTPError(f"request failed with status {status}", status, error)

        # The threaded resolver wraps gaierror; aiodns raises its own subclass.
        if isinstance(error, aiohttp.ClientConnectorDNSError) or (
            isinstance(error, aiohttp.ClientConnectorError)
            and isinstance(error.os_error, socket.gaierror)
        ):
            return HTTPError(MSG_DNS_FAILURE, None, error)

        if isinstance(error, aiohttp.ClientError):
            return HTTPError(MSG_CONNECT_FAILURE, None, error)

        return HTTPError(MSG_UNKNOWN, None, error)
