# SPDX-License-Identifier: Apache-2.0
"""Concurrent multi-language translation with resilient HTTP transport."""

from multi_translate.config import AppConfig, LanguageEntry, load_config
from multi_translate.pipeline import TranslationService
from multi_translate.translators import (
    ConfigurationError,
    TranslationRequest,
    TranslationResult,
    available_translators,
    create_translator,
)
from multi_translate.transport import HTTPClient, HTTPError, HTTPOptions

__version__ = "1.0.0"

__all__ = [
    "AppConfig",
    "ConfigurationError",
    "HTTPClient",
    "HTTPError",
    "HTTPOptions",
    "LanguageEntry",
    "TranslationRequest",
    "TranslationResult",
    "TranslationService",
    "available_translators",
    "create_translator",
    "load_config",
]
