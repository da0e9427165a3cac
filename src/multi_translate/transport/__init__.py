# SPDX-License-Identifier: Apache-2.0
"""HTTP transport with timeout, proxy, and retry handling."""

from multi_translate.transport.client import HTTPClient, HTTPOptions
from multi_translate.transport.errors import HTTPError

__all__ = [
    "HTTPClient",
    "HTTPError",
    "HTTPOptions",
]
