#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/shortcode_parser/parsers/__init__.py
"""Parsing package: tag scanning, attribute parsing and tree building."""

from shortcode_parser.parsers.attributes import coerce_attribute_value, parse_attributes
from shortcode_parser.parsers.scanner import TagOccurrence, scan_tags
from shortcode_parser.parsers.shortcode import ShortcodeParser, parse_shortcodes

__all__ = [
    "ShortcodeParser",
    "TagOccurrence",
    "coerce_attribute_value",
    "parse_attributes",
    "parse_shortcodes",
    "scan_tags",
]
