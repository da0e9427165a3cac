# SPDX-License-Identifier: Apache-2.0
"""Batch translation package."""

from .progress import TRANSLATE_STAGE, ProgressCallback, ProgressStage
from .translation_service import TranslationService

__all__ = [
    "TRANSLATE_STAGE",
    "ProgressCallback",
    "ProgressStage",
    "TranslationService",
]
