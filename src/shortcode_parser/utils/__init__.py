#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/shortcode_parser/utils/__init__.py
"""Utility modules for the shortcode parser.

This package contains the entity pre-decoder used on content from external
content sources and attribute naming helpers for renderers.
"""

from shortcode_parser.utils.entities import decode_html_entities, decode_shortcode_entities, has_encoded_shortcodes
from shortcode_parser.utils.naming import camel_to_kebab, kebab_to_camel

__all__ = [
    "camel_to_kebab",
    "decode_html_entities",
    "decode_shortcode_entities",
    "has_encoded_shortcodes",
    "kebab_to_camel",
]
