#!/usr/bin/env python3
# SPDX-License-Identifier: Apache-2.0
"""Batch translation sample script.

Shows the library API without the CLI: one text fanned out to several
target languages, with per-language failures reported inline.

Usage:
    cd examples
    python batch_translate.py

Environment variables (loaded from .env):
    TRANSLATE_ENGINE: Translation backend (default: google)
    TRANSLATE_PROXY: Optional proxy, e.g. 127.0.0.1:8080
"""

from __future__ import annotations

import asyncio
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

# Add project src to path (development use)
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

load_dotenv(PROJECT_ROOT / ".env")


# =============================================================================
# Settings
# =============================================================================

SOURCE_LANG = "en"
TEXT = "The quick brown fox jumps over the lazy dog."

# None = every configured language
TARGET_LANGS: list[str] | None = ["ja", "de", "fr", "ko"]

TIMEOUT = 10.0
RETRIES = 3


# =============================================================================
# Main
# =============================================================================


async def main() -> None:
    from multi_translate import HTTPClient, HTTPOptions, TranslationService, load_config

    config = load_config(engine=os.environ.get("TRANSLATE_ENGINE"))
    options = HTTPOptions(
        timeout=TIMEOUT,
        retries=RETRIES,
        proxy=os.environ.get("TRANSLATE_PROXY"),
    )

    print("=" * 60)
    print("Batch Translation Example")
    print("=" * 60)
    print(f"Engine:  {config.engine}")
    print(f"Source:  {SOURCE_LANG}")
    print(f"Targets: {', '.join(TARGET_LANGS or config.language_codes)}")
    print("=" * 60)

    async with HTTPClient(options) as http_client:
        service = TranslationService.from_config(config, http_client)
        results = await service.translate_batch(SOURCE_LANG, TEXT, TARGET_LANGS)

    for result in results:
        if result.success:
            print(f"{result.language_name:>10}: {result.translated_text}")
        else:
            print(f"{result.language_name:>10}: FAILED {result.error}")

    succeeded = sum(1 for r in results if r.success)
    print(f"\n{succeeded}/{len(results)} succeeded")


if __name__ == "__main__":
    asyncio.run(main())
