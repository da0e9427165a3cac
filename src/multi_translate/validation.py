# SPDX-License-Identifier: Apache-2.0
"""Input validation for language codes and source text."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass, field

from multi_translate.config.models import DEFAULT_TARGET_LANGUAGES, LanguageEntry

LANGUAGE_CODE_PATTERN = re.compile(r"^[a-z]{2}(-[A-Z]{2})?$")

# Accepted as source languages even when not configured as targets
COMMON_LANGUAGE_CODES = frozenset({
    "en", "de", "fr", "es", "ru", "el", "hi", "ar", "ja", "zh-CN", "ko",
    "zh-TW", "pt", "it", "nl", "pl", "tr", "vi", "th", "id", "ms",
})


@dataclass
class ValidationResult:
    """Outcome of a validation check."""

    valid: bool
    errors: list[str] = field(default_factory=list)


def valid_language_codes(languages: Sequence[LanguageEntry] | None = None) -> set[str]:
    """Configured codes plus COMMON_LANGUAGE_CODES."""
    configured = languages if languages is not None else DEFAULT_TARGET_LANGUAGES
    return {lang.code for lang in configured} | COMMON_LANGUAGE_CODES


def validate_language_code(
    code: str | None,
    languages: Sequence[LanguageEntry] | None = None,
) -> ValidationResult:
    """Check that a language code is well-formed and supported."""
    if not code or not code.strip():
        return ValidationResult(False, ["Language code must not be empty"])

    code = code.strip()
    if not LANGUAGE_CODE_PATTERN.match(code):
        return ValidationResult(False, [f"Invalid language code format: {code}"])

    if code not in valid_language_codes(languages):
        return ValidationResult(False, [f"Unsupported language code: {code}"])

    return ValidationResult(True)


def validate_text(text: str | None) -> ValidationResult:
    """Check that the text to translate is not empty or whitespace-only."""
    if not text:
        return ValidationResult(False, ["Text must not be empty"])
    if not text.strip():
        return ValidationResult(False, ["Text must not be empty or whitespace only"])
    return ValidationResult(True)


def validate_input(
    source_language: str | None,
    text: str | None,
    languages: Sequence[LanguageEntry] | None = None,
) -> ValidationResult:
    """Validate source language and text together, collecting all errors."""
    errors = (
        validate_language_code(source_language, languages).errors
        + validate_text(text).errors
    )
    return ValidationResult(valid=not errors, errors=errors)
