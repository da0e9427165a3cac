# SPDX-License-Identifier: Apache-2.0
"""Configuration data and built-in defaults."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LanguageEntry:
    """A target language and its display name."""

    code: str
    name: str


DEFAULT_ENGINE = "google"

DEFAULT_TARGET_LANGUAGES: tuple[LanguageEntry, ...] = (
    LanguageEntry("en", "English"),
    LanguageEntry("de", "German"),
    LanguageEntry("fr", "French"),
    LanguageEntry("es", "Spanish"),
    LanguageEntry("ru", "Russian"),
    LanguageEntry("el", "Greek"),
    LanguageEntry("hi", "Hindi"),
    LanguageEntry("ar", "Arabic"),
    LanguageEntry("ja", "Japanese"),
    LanguageEntry("zh-CN", "Chinese"),
    LanguageEntry("ko", "Korean"),
)

# Transport defaults
REQUEST_TIMEOUT = 10.0  # seconds
MAX_RETRIES = 3


@dataclass(frozen=True)
class AppConfig:
    """Resolved configuration handed to the translation service.

    Attributes:
        languages: Target languages in display order.
        engine: Translation backend identifier.
    """

    languages: tuple[LanguageEntry, ...] = DEFAULT_TARGET_LANGUAGES
    engine: str = DEFAULT_ENGINE

    @property
    def language_codes(self) -> list[str]:
        return [lang.code for lang in self.languages]
