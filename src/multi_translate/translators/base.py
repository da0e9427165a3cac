# SPDX-License-Identifier: Apache-2.0
"""Base classes and protocols for translation backends."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Protocol, runtime_checkable


class TranslatorError(Exception):
    """Base exception for translator module."""

    pass


class TranslationError(TranslatorError):
    """Error during a single translation (bad response, provider failure).

    Never propagates past a backend's ``translate`` method; it is captured
    into the failed TranslationResult.
    """

    pass


class ResponseParseError(TranslationError):
    """Provider response could not be decoded into translated text.

    Attributes:
        reason: Which layer of the response failed validation.
    """

    def __init__(self, reason: str) -> None:
        super().__init__(f"could not parse response: {reason}")
        self.reason = reason


class ConfigurationError(TranslatorError):
    """Configuration error (unknown backend, invalid parameters, etc.).

    This error type is NOT retryable - fix the configuration first.
    """

    pass


class TranslatorType(str, Enum):
    """Identifiers of the supported translation backends."""

    GOOGLE = "google"


@dataclass(frozen=True)
class TranslationRequest:
    """One source text bound for one target language."""

    source_language: str
    target_language: str
    text: str


@dataclass(frozen=True)
class TranslationResult:
    """Outcome of translating one request.

    ``translated_text`` is empty and ``error`` is set (prefixed with
    ``[<Provider>]``) when ``success`` is False.
    """

    target_language: str
    language_name: str
    translated_text: str
    success: bool
    error: str | None = None

    @classmethod
    def succeeded(cls, target_language: str, translated_text: str) -> TranslationResult:
        return cls(
            target_language=target_language,
            language_name=target_language,
            translated_text=translated_text,
            success=True,
        )

    @classmethod
    def failed(cls, target_language: str, error: str) -> TranslationResult:
        return cls(
            target_language=target_language,
            language_name=target_language,
            translated_text="",
            success=False,
            error=error,
        )

    def with_language_name(self, language_name: str) -> TranslationResult:
        """Return a copy carrying a human-readable language name."""
        return replace(self, language_name=language_name)


@runtime_checkable
class TranslatorBackend(Protocol):
    """Protocol definition for translation backends.

    All translator implementations must conform to this protocol.
    """

    @property
    def name(self) -> str:
        """Backend identifier ("google")."""
        ...

    @property
    def display_name(self) -> str:
        """Name used as the bracketed prefix of error messages ("Google")."""
        ...

    async def translate(self, request: TranslationRequest) -> TranslationResult:
        """Translate a single request.

        Args:
            request: Source language, target language and text.

        Returns:
            TranslationResult. Failures are reported through
            ``success=False`` and ``error``, never raised.
        """
        ...
