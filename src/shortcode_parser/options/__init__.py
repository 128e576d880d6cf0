#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for the shortcode parser.

Options are frozen dataclasses; use ``create_updated`` to derive a modified
copy instead of mutating an instance.
"""

from __future__ import annotations

from shortcode_parser.options.base import BaseParserOptions, CloneFrozenMixin
from shortcode_parser.options.shortcode import ShortcodeParserOptions

__all__ = [
    "BaseParserOptions",
    "CloneFrozenMixin",
    "ShortcodeParserOptions",
]
