# SPDX-License-Identifier: Apache-2.0
"""Lookup of translation backends by identifier."""

from __future__ import annotations

from typing import Callable

from multi_translate.translators.base import (
    ConfigurationError,
    TranslatorBackend,
    TranslatorType,
)
from multi_translate.translators.google import GoogleTranslator
from multi_translate.transport import HTTPClient

_BACKENDS: dict[TranslatorType, Callable[[HTTPClient], TranslatorBackend]] = {
    TranslatorType.GOOGLE: GoogleTranslator,
}


def available_translators() -> tuple[str, ...]:
    """Return supported backend identifiers in registration order."""
    return tuple(t.value for t in _BACKENDS)


def is_available(identifier: str | None) -> bool:
    """Check whether an identifier names a supported backend (case-insensitive)."""
    if not identifier:
        return False
    return identifier.strip().lower() in available_translators()


def create_translator(
    identifier: str | TranslatorType,
    http_client: HTTPClient,
) -> TranslatorBackend:
    """Create a translator backend.

    Args:
        identifier: Backend identifier ("google").
        http_client: Transport shared by the backend's requests.

    Returns:
        Translator instance.

    Raises:
        ConfigurationError: If the identifier is unknown.
    """
    if isinstance(identifier, TranslatorType):
        return _BACKENDS[identifier](http_client)

    try:
        translator_type = TranslatorType(identifier.strip().lower())
    except ValueError:
        raise ConfigurationError(
            f"Unknown translator: {identifier}. "
            f"Available translators: {', '.join(available_translators())}"
        ) from None

    return _BACKENDS[translator_type](http_client)
