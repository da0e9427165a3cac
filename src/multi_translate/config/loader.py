# SPDX-License-Identifier: Apache-2.0
"""Configuration file discovery and parsing.

File format, one entry per line::

    # comment
    engine=google
    en:English
    de,German
    fr=French

Config file lookup order: explicit path, ``TRANSLATE_CONFIG_PATH``,
``./languages.conf``, then built-in defaults. Engine lookup order: explicit
argument, ``TRANSLATE_ENGINE``, ``engine`` line in the config file, then
``DEFAULT_ENGINE``.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from multi_translate.config.models import (
    DEFAULT_ENGINE,
    DEFAULT_TARGET_LANGUAGES,
    AppConfig,
    LanguageEntry,
)
from multi_translate.translators.registry import is_available

logger = logging.getLogger(__name__)


@dataclass
class ParsedLanguages:
    """Languages read from a config file plus line-numbered warnings."""

    languages: list[LanguageEntry] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


class ConfigLoader:
    """Resolve target languages and backend from file, environment and defaults."""

    SUPPORTED_DELIMITERS = (":", ",", "=")
    COMMENT_PREFIX = "#"
    DEFAULT_CONFIG_FILENAME = "languages.conf"
    CONFIG_PATH_ENV_VAR = "TRANSLATE_CONFIG_PATH"
    ENGINE_ENV_VAR = "TRANSLATE_ENGINE"

    def __init__(self, cwd: Path | None = None) -> None:
        """Initialize ConfigLoader.

        Args:
            cwd: Directory searched for the default config file
                (default: current working directory).
        """
        self._cwd = cwd

    def load(
        self,
        config_path: str | Path | None = None,
        engine: str | None = None,
    ) -> AppConfig:
        """Load configuration.

        Never raises for missing or malformed files; problems are logged and
        the built-in language list is used instead.

        Args:
            config_path: Explicit config file path.
            engine: Explicit backend identifier (highest priority).

        Returns:
            Resolved AppConfig.
        """
        config_file = self.find_config_file(config_path)
        resolved_engine = self._resolve_engine(config_file, engine)

        if config_file is None:
            if config_path:
                logger.warning(
                    "Configuration file not found: %s. Using default language list.",
                    config_path,
                )
            return AppConfig(languages=DEFAULT_TARGET_LANGUAGES, engine=resolved_engine)

        try:
            content = config_file.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(
                "Error reading configuration file %s: %s. Using default language list.",
                config_file,
                e,
            )
            return AppConfig(languages=DEFAULT_TARGET_LANGUAGES, engine=resolved_engine)

        parsed = self.parse_languages(content)
        for warning in parsed.warnings:
            logger.warning("%s: %s", config_file, warning)

        if not parsed.languages:
            logger.warning(
                "No valid language entries found in %s, using defaults", config_file
            )
            return AppConfig(languages=DEFAULT_TARGET_LANGUAGES, engine=resolved_engine)

        return AppConfig(languages=tuple(parsed.languages), engine=resolved_engine)

    def find_config_file(self, config_path: str | Path | None = None) -> Path | None:
        """Locate the config file to use, or None if there is none."""
        if config_path and Path(config_path).is_file():
            return Path(config_path)

        env_path = os.environ.get(self.CONFIG_PATH_ENV_VAR)
        if env_path and Path(env_path).is_file():
            return Path(env_path)

        default_path = (self._cwd or Path.cwd()) / self.DEFAULT_CONFIG_FILENAME
        if default_path.is_file():
            return default_path

        return None

    def _resolve_engine(self, config_file: Path | None, engine: str | None) -> str:
        if engine and is_available(engine):
            return engine.strip().lower()
        if engine:
            logger.warning("Invalid engine from command line: %s", engine)

        env_engine = os.environ.get(self.ENGINE_ENV_VAR)
        if env_engine and is_available(env_engine):
            return env_engine.strip().lower()
        if env_engine:
            logger.warning(
                "Invalid engine from %s environment variable: %s",
                self.ENGINE_ENV_VAR,
                env_engine,
            )

        if config_file is not None:
            try:
                file_engine = self.parse_engine(config_file.read_text(encoding="utf-8"))
            except (OSError, UnicodeDecodeError):
                file_engine = None
            if file_engine and is_available(file_engine):
                return file_engine
            if file_engine:
                logger.warning(
                    "Invalid engine in configuration file %s: %s", config_file, file_engine
                )

        return DEFAULT_ENGINE

    @classmethod
    def parse_engine(cls, content: str) -> str | None:
        """Return the first ``engine<delim><id>`` value in the content."""
        for line in content.splitlines():
            stripped = line.strip()
            if not stripped or stripped.startswith(cls.COMMENT_PREFIX):
                continue
            if not stripped.lower().startswith("engine"):
                continue
            for delimiter in cls.SUPPORTED_DELIMITERS:
                parts = stripped.split(delimiter)
                if len(parts) == 2 and parts[0].strip().lower() == "engine":
                    return parts[1].strip().lower()
        return None

    @classmethod
    def parse_languages(cls, content: str) -> ParsedLanguages:
        """Parse language entries, collecting warnings for bad lines."""
        result = ParsedLanguages()

        for line_number, line in enumerate(content.splitlines(), start=1):
            stripped = line.strip()
            if not stripped or stripped.startswith(cls.COMMENT_PREFIX):
                continue
            if stripped.lower().startswith("engine"):
                continue

            entry = cls._parse_line(stripped)
            if entry is None:
                result.warnings.append(
                    f"Line {line_number}: Malformed entry - expected format: code<delimiter>name"
                )
            elif not entry.code or not entry.name:
                result.warnings.append(
                    f"Line {line_number}: Invalid language configuration - code or name is empty"
                )
            else:
                result.languages.append(entry)

        return result

    @classmethod
    def _parse_line(cls, line: str) -> LanguageEntry | None:
        for delimiter in cls.SUPPORTED_DELIMITERS:
            parts = line.split(delimiter)
            if len(parts) == 2:
                return LanguageEntry(code=parts[0].strip(), name=parts[1].strip())
        return None


def load_config(
    config_path: str | Path | None = None,
    engine: str | None = None,
) -> AppConfig:
    """Load configuration using the default search locations."""
    return ConfigLoader().load(config_path, engine)
