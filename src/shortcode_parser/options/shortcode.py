#  Copyright (c) 2025 Tom Villani, Ph.D.

# shortcode_parser/options/shortcode.py
"""Configuration options for shortcode parsing.

This module defines the options class controlling cache sizing, the nesting
guard and optional entity pre-decoding for the shortcode parser.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from shortcode_parser.constants import (
    DEFAULT_CACHE_CONTENT_THRESHOLD,
    DEFAULT_COPY_CACHED_RESULTS,
    DEFAULT_DECODE_ENTITIES,
    DEFAULT_MAX_NESTING_DEPTH,
)
from shortcode_parser.options.base import BaseParserOptions


@dataclass(frozen=True)
class ShortcodeParserOptions(BaseParserOptions):
    """Configuration options for shortcode-to-AST parsing.

    Parameters
    ----------
    use_cache : bool, default True
        Whether attribute strings and whole documents are memoized.
    cache_content_threshold : int, default 10000
        Documents with this many characters or more are never cached.
    max_nesting_depth : int, default 200
        Deepest shortcode nesting accepted before ``NestingDepthError``.
    copy_cached_results : bool, default True
        Give every caller its own deep copy of a cached tree. When False,
        repeated parses share node objects and results must be treated as
        read-only.
    decode_entities : bool, default False
        Repair HTML-entity-encoded shortcode tags before parsing.

    Examples
    --------
    Basic usage:
        >>> from shortcode_parser.parsers.shortcode import ShortcodeParser
        >>> parser = ShortcodeParser(ShortcodeParserOptions())
        >>> nodes = parser.parse('[su_box title="Test"]Content[/su_box]')

    Content straight from a CMS REST API:
        >>> options = ShortcodeParserOptions(decode_entities=True)
        >>> parser = ShortcodeParser(options)

    """

    cache_content_threshold: int = field(
        default=DEFAULT_CACHE_CONTENT_THRESHOLD,
        metadata={"help": "Only cache documents shorter than this many characters", "importance": "advanced"},
    )
    max_nesting_depth: int = field(
        default=DEFAULT_MAX_NESTING_DEPTH,
        metadata={"help": "Maximum shortcode nesting depth", "importance": "security"},
    )
    copy_cached_results: bool = field(
        default=DEFAULT_COPY_CACHED_RESULTS,
        metadata={"help": "Return deep copies of cached node trees", "importance": "advanced"},
    )
    decode_entities: bool = field(
        default=DEFAULT_DECODE_ENTITIES,
        metadata={"help": "Decode HTML entities inside shortcode tags before parsing", "importance": "core"},
    )

    def __post_init__(self) -> None:
        """Validate numeric ranges.

        Raises
        ------
        ValueError
            If a size or depth limit is not positive.

        """
        super().__post_init__()
        self._require_positive("cache_content_threshold", self.cache_content_threshold)
        self._require_positive("max_nesting_depth", self.max_nesting_depth)
