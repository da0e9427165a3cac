# SPDX-License-Identifier: Apache-2.0
"""Google Translate backend using the public ``translate_a/single`` endpoint."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any
from urllib.parse import urlencode

from multi_translate.translators.base import (
    ResponseParseError,
    TranslationRequest,
    TranslationResult,
    TranslatorType,
)
from multi_translate.translators.messages import format_error_message
from multi_translate.transport import HTTPClient

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Fragment:
    """One translated piece of a Google response.

    Only the first slot of each fragment carries text; the remaining slots
    are provider metadata and are not decoded.
    """

    text: str | None


def decode_fragments(payload: Any) -> list[Fragment]:
    """Decode the fragment container of a parsed Google response.

    Args:
        payload: JSON-decoded response body.

    Returns:
        One Fragment per entry of the container, in order. Entries that are
        not arrays, or whose first slot is not a string, decode to
        ``Fragment(text=None)``.

    Raises:
        ResponseParseError: If the top level is not an array or the
            fragment container is missing.
    """
    if not isinstance(payload, list):
        raise ResponseParseError("not array format")
    if not payload or not isinstance(payload[0], list):
        raise ResponseParseError("missing translation data")

    fragments: list[Fragment] = []
    for item in payload[0]:
        if isinstance(item, list) and item and isinstance(item[0], str):
            fragments.append(Fragment(text=item[0]))
        else:
            fragments.append(Fragment(text=None))
    return fragments


def parse_translation_response(body: str) -> str:
    """Extract the translated text from a Google response body.

    Empty-string fragments are dropped. A response with no surviving
    fragment is a parse failure, not an empty translation.

    Raises:
        ResponseParseError: On invalid JSON, unexpected structure, or no
            valid fragment.
    """
    try:
        payload = json.loads(body)
    except (json.JSONDecodeError, TypeError) as e:
        raise ResponseParseError("invalid JSON") from e

    pieces = [f.text for f in decode_fragments(payload) if f.text]
    if not pieces:
        raise ResponseParseError("no valid translation content")
    return "".join(pieces)


class GoogleTranslator:
    """Google Translate backend.

    Calls the free web endpoint (no API key) through the shared
    HTTPClient, so timeout, proxy and retry behaviour come from the
    transport configuration.

    Attributes:
        name: Backend identifier ("google").
    """

    BASE_URL = "https://translate.googleapis.com/translate_a/single"

    def __init__(self, http_client: HTTPClient) -> None:
        """Initialize GoogleTranslator.

        Args:
            http_client: Transport used for every request.
        """
        self._http_client = http_client

    @property
    def name(self) -> str:
        """Return backend name."""
        return TranslatorType.GOOGLE.value

    @property
    def display_name(self) -> str:
        return "Google"

    def build_url(self, request: TranslationRequest) -> str:
        params = {
            "client": "gtx",
            "sl": request.source_language,
            "tl": request.target_language,
            "dt": "t",
            "q": request.text,
        }
        return f"{self.BASE_URL}?{urlencode(params)}"

    async def translate(self, request: TranslationRequest) -> TranslationResult:
        """Translate a single request using Google Translate.

        Args:
            request: Source language, target language and text.

        Returns:
            TranslationResult with ``language_name`` set to the raw target
            code. Transport and parse failures are captured, not raised.
        """
        try:
            body = await self._http_client.get(self.build_url(request))
            translated = parse_translation_response(body)
        except Exception as e:
            message = format_error_message(e, self.display_name)
            logger.warning(
                "%s -> %s: %s", request.source_language, request.target_language, message
            )
            return TranslationResult.failed(request.target_language, message)

        return TranslationResult.succeeded(request.target_language, translated)
