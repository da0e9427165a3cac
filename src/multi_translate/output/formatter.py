# SPDX-License-Identifier: Apache-2.0
"""Terminal and file rendering of batch translation results."""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Sequence
from pathlib import Path

from multi_translate.config.models import DEFAULT_TARGET_LANGUAGES, LanguageEntry
from multi_translate.translators.base import TranslationResult

logger = logging.getLogger(__name__)

_ANSI_PATTERN = re.compile(r"\x1b\[[0-9;]*m")
_PROVIDER_PREFIX = re.compile(r"^\[[\w-]+\]\s*")


class Colors:
    """ANSI escape codes for terminal output."""

    GREEN = "\033[92m"
    RED = "\033[91m"
    ENDC = "\033[0m"


def strip_ansi_codes(text: str) -> str:
    return _ANSI_PATTERN.sub("", text)


class ResultFormatter:
    """Render TranslationResults one per line.

    Successful lines are green, failures red. Colour is disabled when
    ``NO_COLOR`` is set.
    """

    def __init__(
        self,
        languages: Sequence[LanguageEntry] | None = None,
        use_color: bool | None = None,
    ) -> None:
        """Initialize ResultFormatter.

        Args:
            languages: Display order of results (default:
                DEFAULT_TARGET_LANGUAGES). Unknown codes sort last.
            use_color: Force colour on or off (default: on unless NO_COLOR
                is set).
        """
        order = languages if languages is not None else DEFAULT_TARGET_LANGUAGES
        self._order = {lang.code: index for index, lang in enumerate(order)}
        self._use_color = "NO_COLOR" not in os.environ if use_color is None else use_color

    def format(
        self,
        results: Sequence[TranslationResult],
        show_errors: bool = True,
        engine_name: str | None = None,
    ) -> str:
        """Format results as text.

        Args:
            results: Batch results.
            show_errors: Include failure messages.
            engine_name: Backend shown as a bracketed prefix.

        Returns:
            One line per result, in configured language order.
        """
        lines = []
        for result in self._sort(results):
            if result.success:
                prefix = f"[{engine_name}] " if engine_name else ""
                line = f"{prefix}{result.language_name}: {result.translated_text}"
                lines.append(self._colorize(line, Colors.GREEN))
            elif show_errors:
                message = self._normalize_error(
                    result.error or "translation failed", engine_name
                )
                line = f"{result.language_name}: [error] {message}"
                lines.append(self._colorize(line, Colors.RED))
            else:
                lines.append(self._colorize(f"{result.language_name}: [error]", Colors.RED))
        return "\n".join(lines)

    def format_error(self, error: BaseException, engine_name: str | None = None) -> str:
        """Format a fatal error (configuration, validation) for stderr."""
        message = self._normalize_error(str(error), engine_name)
        return self._colorize(f"Error: {message}", Colors.RED)

    def save_to_file(self, output: str, path: str | Path) -> None:
        """Write formatted output to a file with ANSI codes stripped.

        Raises:
            OSError: If the file cannot be written.
        """
        file_path = Path(path)
        try:
            file_path.write_text(strip_ansi_codes(output), encoding="utf-8")
        except OSError as e:
            raise OSError(f"Cannot write file {file_path}: {e}") from e
        logger.debug("Saved results to %s", file_path)

    def _sort(self, results: Sequence[TranslationResult]) -> list[TranslationResult]:
        last = len(self._order)
        return sorted(results, key=lambda r: self._order.get(r.target_language, last))

    def _colorize(self, text: str, color: str) -> str:
        if not self._use_color:
            return text
        return f"{color}{text}{Colors.ENDC}"

    @staticmethod
    def _normalize_error(message: str, engine_name: str | None) -> str:
        normalized = _PROVIDER_PREFIX.sub("", message)
        if engine_name:
            normalized = f"[{engine_name}] {normalized}"
        return normalized
