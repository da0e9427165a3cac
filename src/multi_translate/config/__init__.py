# SPDX-License-Identifier: Apache-2.0
"""Configuration loading for target languages and backend selection."""

from multi_translate.config.loader import ConfigLoader, load_config
from multi_translate.config.models import (
    DEFAULT_ENGINE,
    DEFAULT_TARGET_LANGUAGES,
    MAX_RETRIES,
    REQUEST_TIMEOUT,
    AppConfig,
    LanguageEntry,
)

__all__ = [
    "AppConfig",
    "ConfigLoader",
    "DEFAULT_ENGINE",
    "DEFAULT_TARGET_LANGUAGES",
    "LanguageEntry",
    "MAX_RETRIES",
    "REQUEST_TIMEOUT",
    "load_config",
]
