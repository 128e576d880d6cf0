#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the shortcode parser.

This module centralizes the hardcoded values, magic numbers, and default
configuration constants used across the library.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Markup Grammar - Regular expression fragments for shortcode tags
3. Cache Behavior - Capacity and threshold defaults
4. Parser Behavior - Nesting and decoding defaults
5. Entity Decoding - Entities repaired inside shortcode tags
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

NodeType = Literal["text", "shortcode"]
OutputFormat = Literal["json", "tree"]

# =============================================================================
# Markup Grammar
# =============================================================================

# Tag names: ASCII letters, digits, underscores and hyphens (case-sensitive)
TAG_NAME_PATTERN = r"[\w-]+"

# Attribute names start with a word character; hyphens allowed afterwards
ATTRIBUTE_NAME_PATTERN = r"\w[\w-]*"

# Signed integer or decimal literal; the whole value must match
NUMERIC_VALUE_PATTERN = r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)"

# =============================================================================
# Cache Behavior
# =============================================================================

# Documents at or above this many characters are never cached
DEFAULT_CACHE_CONTENT_THRESHOLD = 10_000

# Entry counts above which a cache map is wiped wholesale
DEFAULT_MAX_ATTRIBUTE_CACHE_ENTRIES = 1000
DEFAULT_MAX_DOCUMENT_CACHE_ENTRIES = 100

DEFAULT_USE_CACHE = True
DEFAULT_COPY_CACHED_RESULTS = True

# =============================================================================
# Parser Behavior
# =============================================================================

# Each nesting level costs a few interpreter frames; stay well clear of the
# default recursion limit
DEFAULT_MAX_NESTING_DEPTH = 200

DEFAULT_DECODE_ENTITIES = False

# =============================================================================
# Entity Decoding
# =============================================================================

# Keys are lowercase; lookups fold case before indexing
SHORTCODE_ENTITY_MAP: dict[str, str] = {
    "&quot;": '"',
    "&#34;": '"',
    "&#x22;": '"',
    "&apos;": "'",
    "&#39;": "'",
    "&#x27;": "'",
    "&amp;": "&",
    "&#38;": "&",
    "&#x26;": "&",
    "&lt;": "<",
    "&#60;": "<",
    "&#x3c;": "<",
    "&gt;": ">",
    "&#62;": ">",
    "&#x3e;": ">",
    "&nbsp;": " ",
    "&#160;": " ",
    "&#xa0;": " ",
    # Smart quotes inserted by content management systems
    "&#8220;": '"',
    "&#8221;": '"',
    "&ldquo;": '"',
    "&rdquo;": '"',
    "&#8216;": "'",
    "&#8217;": "'",
    "&lsquo;": "'",
    "&rsquo;": "'",
    # Primes used in place of closing quotes
    "&#8243;": '"',
    "&#8242;": "'",
}

# Entities whose presence inside a tag means the tag was encoded upstream
ENCODED_SHORTCODE_MARKERS: tuple[str, ...] = ("&quot;", "&#34;", "&apos;", "&#39;", "&amp;")
