# SPDX-License-Identifier: Apache-2.0
"""
Multi Translate - CLI Tool

Translates one text into every configured target language concurrently
and prints one line per language.

Usage:
    multi-translate <source-language> <text> [options]

Examples:
    multi-translate ko "안녕하세요"
    multi-translate en "Hello, world!" -o results.txt
    multi-translate en "Hello" -c ./my-languages.conf -p 127.0.0.1:8080
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import NoReturn

from dotenv import load_dotenv

from multi_translate.config import MAX_RETRIES, REQUEST_TIMEOUT, load_config
from multi_translate.output import ResultFormatter
from multi_translate.pipeline import ProgressStage, TranslationService
from multi_translate.translators import (
    ConfigurationError,
    available_translators,
    is_available,
)
from multi_translate.transport import HTTPClient, HTTPOptions
from multi_translate.validation import validate_input

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Args:
        argv: Argument list (default: sys.argv[1:]).

    Returns:
        Parsed argument Namespace.
    """
    parser = argparse.ArgumentParser(
        prog="multi-translate",
        description="Batch translate text into multiple target languages",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Translation engines:
  Available: {", ".join(available_translators())}
  Selection priority:
    1. --engine option
    2. TRANSLATE_ENGINE environment variable
    3. "engine" line in the configuration file
    4. google

Configuration file:
  One target language per line as <code><delimiter><name>.
  Supported delimiters: ":" "," "="   Comment lines start with "#".
  Lookup order:
    1. --config option
    2. TRANSLATE_CONFIG_PATH environment variable
    3. ./languages.conf
    4. Built-in language list

  Example:
    engine=google
    en:English
    de:German
    zh-CN:Chinese

Examples:
  %(prog)s ko "안녕하세요"
  %(prog)s en "Hello, world!"
  %(prog)s -c ./my-languages.conf ko "안녕하세요"
  %(prog)s -o results.txt en "Hello, world!"
""",
    )

    parser.add_argument(
        "source",
        help="Source language code (e.g., ko, en, ja)",
    )
    parser.add_argument(
        "text",
        help="Text to translate",
    )

    parser.add_argument(
        "-p",
        "--proxy",
        help="Proxy server (e.g., 127.0.0.1:55497)",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="Path to configuration file (default: ./languages.conf)",
    )
    parser.add_argument(
        "-e",
        "--engine",
        help=f"Translation engine to use ({'|'.join(available_translators())})",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Save results to the specified file",
    )

    # Transport options
    http_group = parser.add_argument_group("Network options")
    http_group.add_argument(
        "--timeout",
        type=float,
        default=REQUEST_TIMEOUT,
        help=f"Per-request timeout in seconds (default: {REQUEST_TIMEOUT:g})",
    )
    http_group.add_argument(
        "--retries",
        type=int,
        default=MAX_RETRIES,
        help=f"Retries for transient failures (default: {MAX_RETRIES})",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    return parser.parse_args(argv)


def log_progress(
    stage: ProgressStage, completed: int, total: int, target_code: str = ""
) -> None:
    """ProgressCallback that reports each settled target at DEBUG level."""
    logger.debug("[%s] %d/%d %s", stage, completed, total, target_code)


async def run(args: argparse.Namespace) -> int:
    """Execute batch translation.

    Args:
        args: Command line arguments.

    Returns:
        Exit code (0: success, 1: failure).
    """
    if args.engine and not is_available(args.engine):
        print(f"Error: Invalid engine: {args.engine}", file=sys.stderr)
        print(f"Available engines: {', '.join(available_translators())}", file=sys.stderr)
        return 1

    config = load_config(args.config, args.engine)

    validation = validate_input(args.source, args.text, config.languages)
    if not validation.valid:
        print("Error: Input validation failed:", file=sys.stderr)
        for error in validation.errors:
            print(f"  - {error}", file=sys.stderr)
        return 1

    formatter = ResultFormatter(config.languages)
    options = HTTPOptions(timeout=args.timeout, retries=args.retries, proxy=args.proxy)

    try:
        async with HTTPClient(options) as http_client:
            service = TranslationService.from_config(
                config, http_client, progress_callback=log_progress
            )
            results = await service.translate_batch(
                args.source, args.text, config.language_codes
            )
    except ConfigurationError as e:
        print(formatter.format_error(e, config.engine), file=sys.stderr)
        return 1

    output = formatter.format(results, engine_name=config.engine)

    if args.output:
        try:
            formatter.save_to_file(output, args.output)
        except OSError as e:
            print(formatter.format_error(e), file=sys.stderr)
            return 1
        print(f"\nResults saved to: {args.output}\n")
    else:
        print("\nTranslation results:\n")
        print(output)
        print()

    return 0


def main() -> NoReturn:
    """Main entry point."""
    load_dotenv()
    args = parse_args()

    # Configure logging
    log_level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(level=log_level, format="%(levelname)s: %(message)s")

    exit_code = asyncio.run(run(args))
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
