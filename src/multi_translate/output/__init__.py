# SPDX-License-Identifier: Apache-2.0
"""Rendering of batch translation results."""

from multi_translate.output.formatter import Colors, ResultFormatter, strip_ansi_codes

__all__ = [
    "Colors",
    "ResultFormatter",
    "strip_ansi_codes",
]
