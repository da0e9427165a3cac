# SPDX-License-Identifier: Apache-2.0
"""Translation backend modules.

Each backend turns a TranslationRequest into a TranslationResult and never
raises for per-request failures; errors are returned as provider-prefixed
messages.

Usage:
    from multi_translate.transport import HTTPClient
    from multi_translate.translators import TranslationRequest, create_translator

    async with HTTPClient() as client:
        translator = create_translator("google", client)
        result = await translator.translate(TranslationRequest("en", "ja", "Hello"))
"""

from multi_translate.translators.base import (
    ConfigurationError,
    ResponseParseError,
    TranslationError,
    TranslationRequest,
    TranslationResult,
    TranslatorBackend,
    TranslatorError,
    TranslatorType,
)
from multi_translate.translators.google import GoogleTranslator
from multi_translate.translators.messages import format_error_message
from multi_translate.translators.registry import (
    available_translators,
    create_translator,
    is_available,
)

__all__ = [
    # Protocol, data and exceptions
    "TranslatorBackend",
    "TranslatorType",
    "TranslationRequest",
    "TranslationResult",
    "TranslatorError",
    "TranslationError",
    "ResponseParseError",
    "ConfigurationError",
    "format_error_message",
    # Backends
    "GoogleTranslator",
    # Registry
    "available_translators",
    "create_translator",
    "is_available",
]
