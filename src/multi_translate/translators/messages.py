# SPDX-License-Identifier: Apache-2.0
"""User-facing error messages shared by all translation backends."""

from __future__ import annotations

from multi_translate.translators.base import ResponseParseError
from multi_translate.transport.errors import HTTPError

GENERIC_FAILURE = "translation failed"


def _describe(error: BaseException | None) -> str:
    if isinstance(error, HTTPError):
        return _describe_http_error(error)

    if isinstance(error, ResponseParseError):
        return f"response format error: could not parse result ({error.reason})"

    if isinstance(error, Exception):
        return str(error) or GENERIC_FAILURE

    return GENERIC_FAILURE


def _describe_http_error(error: HTTPError) -> str:
    status = error.status_code

    if status == 429:
        return "too many requests, try again later"

    if status is None:
        message = error.message
        if "timed out" in message:
            return "request timed out"
        if "could not connect" in message:
            return "cannot reach service"
        if "could not resolve" in message:
            return "cannot resolve service address"
        return f"network error: {message}"

    if status >= 500:
        return f"service unavailable ({status})"

    return error.message


def format_error_message(error: BaseException | None, provider_name: str) -> str:
    """Build a provider-prefixed message for a failed translation.

    Args:
        error: The failure captured at the backend boundary.
        provider_name: Display name of the backend ("Google").

    Returns:
        Message of the form ``"[<provider_name>] <description>"``.
    """
    return f"[{provider_name}] {_describe(error)}"
