# SPDX-License-Identifier: Apache-2.0
"""Concurrent fan-out of one text to many target languages."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence

from multi_translate.config.models import DEFAULT_TARGET_LANGUAGES, AppConfig, LanguageEntry
from multi_translate.pipeline.progress import TRANSLATE_STAGE, ProgressCallback
from multi_translate.translators.base import (
    TranslationRequest,
    TranslationResult,
    TranslatorBackend,
)
from multi_translate.translators.messages import format_error_message
from multi_translate.translators.registry import create_translator
from multi_translate.transport import HTTPClient

logger = logging.getLogger(__name__)


class TranslationService:
    """Translate one text into every configured target language.

    Requests are dispatched concurrently; a failed target never cancels or
    delays its siblings. Results come back in the order the targets were
    requested.
    """

    def __init__(
        self,
        translator: TranslatorBackend,
        languages: Sequence[LanguageEntry] | None = None,
        progress_callback: ProgressCallback | None = None,
    ) -> None:
        """Initialize TranslationService.

        Args:
            translator: Backend used for every request.
            languages: Target languages and their display names
                (default: DEFAULT_TARGET_LANGUAGES).
            progress_callback: Notified as each target settles.
        """
        self._translator = translator
        self._languages = tuple(languages) if languages is not None else DEFAULT_TARGET_LANGUAGES
        self._language_names = {lang.code: lang.name for lang in self._languages}
        self._progress_callback = progress_callback

    @classmethod
    def from_config(
        cls,
        config: AppConfig,
        http_client: HTTPClient,
        progress_callback: ProgressCallback | None = None,
    ) -> TranslationService:
        """Build a service for the configured backend.

        Raises:
            ConfigurationError: If ``config.engine`` is not a known backend.
        """
        translator = create_translator(config.engine, http_client)
        return cls(translator, config.languages, progress_callback)

    @property
    def translator(self) -> TranslatorBackend:
        return self._translator

    @property
    def languages(self) -> tuple[LanguageEntry, ...]:
        return self._languages

    def language_name(self, code: str) -> str:
        """Display name for a code, or the code itself if not configured."""
        return self._language_names.get(code, code)

    async def translate(self, request: TranslationRequest) -> TranslationResult:
        """Translate one request and attach the configured language name."""
        result = await self._translator.translate(request)
        return result.with_language_name(self.language_name(request.target_language))

    async def translate_batch(
        self,
        source_language: str,
        text: str,
        target_languages: Sequence[str] | None = None,
    ) -> list[TranslationResult]:
        """Translate text into every target language concurrently.

        Args:
            source_language: Source language code.
            text: Text to translate.
            target_languages: Target codes (default: every configured
                language, in configured order).

        Returns:
            Exactly one result per target, in the same order as the targets.
        """
        targets = (
            list(target_languages)
            if target_languages is not None
            else [lang.code for lang in self._languages]
        )
        if not targets:
            return []

        requests = [
            TranslationRequest(
                source_language=source_language,
                target_language=target,
                text=text,
            )
            for target in targets
        ]

        completed = 0
        total = len(requests)

        async def run(request: TranslationRequest) -> TranslationResult:
            nonlocal completed
            try:
                result = await self.translate(request)
            finally:
                completed += 1
                self._notify(completed, total, request.target_language)
            return result

        outcomes = await asyncio.gather(
            *(run(request) for request in requests),
            return_exceptions=True,
        )

        results: list[TranslationResult] = []
        for request, outcome in zip(requests, outcomes):
            if isinstance(outcome, TranslationResult):
                results.append(outcome)
                continue
            if isinstance(outcome, asyncio.CancelledError):
                raise outcome
            logger.error(
                "Translation to %s raised unexpectedly: %r",
                request.target_language,
                outcome,
            )
            results.append(
                TranslationResult.failed(
                    request.target_language,
                    format_error_message(None, self._translator.display_name),
                ).with_language_name(self.language_name(request.target_language))
            )

        succeeded = sum(1 for r in results if r.success)
        logger.debug("Batch finished: %d/%d succeeded", succeeded, total)
        return results

    def _notify(self, completed: int, total: int, target_code: str) -> None:
        if self._progress_callback is None:
            return
        try:
            self._progress_callback(TRANSLATE_STAGE, completed, total, target_code)
        except Exception:
            logger.exception("Progress callback failed for %s", target_code)
