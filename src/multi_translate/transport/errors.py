# SPDX-License-Identifier: Apache-2.0
"""Transport error definitions."""

from __future__ import annotations

# Messages produced by HTTPClient when converting raw failures.
MSG_TIMEOUT = "request timed out"
MSG_DNS_FAILURE = "could not resolve service address"
MSG_CONNECT_FAILURE = "could not connect to service"
MSG_INVALID_REQUEST = "invalid request"
MSG_RATE_LIMITED = "rate limited, retry later"
MSG_UNAVAILABLE = "service temporarily unavailable"
MSG_UNKNOWN = "unknown error"


class HTTPError(Exception):
    """Request failure raised by HTTPClient after retries are exhausted.

    Attributes:
        message: Human-readable description.
        status_code: HTTP status, or None for network-layer failures
            (timeout, DNS, connection refused).
        cause: Underlying exception, if any.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.cause = cause

    @property
    def is_network_error(self) -> bool:
        """True if no HTTP response was received."""
        return self.status_code is None
