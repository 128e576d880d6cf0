"""shortcode_parser - recover structured trees from bracket shortcode markup.

Content management systems embed shortcodes such as
``[su_box title="Note"]Body[/su_box]`` or ``[su_divider /]`` inside ordinary
HTML. This library turns such content into a tree of ``Text`` and
``Shortcode`` nodes that a rendering layer can walk, mapping tag names to
its own components.

Key Features
------------
- Lenient parsing: malformed markup always yields a valid tree
- Same-name nesting resolved with a depth counter
- Typed attribute values (bool, int, float, str)
- Memoized attribute and document parses with a thread-safe cache
- Entity pre-decoder for shortcodes that were HTML-encoded upstream

Requirements
------------
- Python 3.10+

Examples
--------
Parse content:

    >>> from shortcode_parser import parse_shortcodes
    >>> nodes = parse_shortcodes('[su_box title="Test"]Content here[/su_box]')
    >>> nodes[0].name, nodes[0].attributes, nodes[0].children
    ('su_box', {'title': 'Test'}, [Text(raw='Content here')])

Repair encoded content first:

    >>> from shortcode_parser import decode_shortcode_entities, has_encoded_shortcodes
    >>> content = '[box title=&quot;Test&quot;]'
    >>> if has_encoded_shortcodes(content):
    ...     content = decode_shortcode_entities(content)

See Also
--------
shortcode_parser.ast : node definitions, visitors and serialization

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "shortcode_parser requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from shortcode_parser.ast import Node, NodeVisitor, Shortcode, Text, reconstruct
from shortcode_parser.cache import CacheStats, ShortcodeCache, clear_shortcode_caches, get_default_cache
from shortcode_parser.exceptions import (
    InvalidOptionsError,
    NestingDepthError,
    ParsingError,
    ShortcodeError,
    ValidationError,
)
from shortcode_parser.options import ShortcodeParserOptions
from shortcode_parser.parsers import ShortcodeParser, TagOccurrence, parse_attributes, parse_shortcodes, scan_tags
from shortcode_parser.utils import (
    camel_to_kebab,
    decode_html_entities,
    decode_shortcode_entities,
    has_encoded_shortcodes,
    kebab_to_camel,
)

__all__ = [
    "CacheStats",
    "InvalidOptionsError",
    "NestingDepthError",
    "Node",
    "NodeVisitor",
    "ParsingError",
    "Shortcode",
    "ShortcodeCache",
    "ShortcodeError",
    "ShortcodeParser",
    "ShortcodeParserOptions",
    "TagOccurrence",
    "Text",
    "ValidationError",
    "__version__",
    "camel_to_kebab",
    "clear_shortcode_caches",
    "decode_html_entities",
    "decode_shortcode_entities",
    "get_default_cache",
    "has_encoded_shortcodes",
    "kebab_to_camel",
    "parse_attributes",
    "parse_shortcodes",
    "reconstruct",
    "scan_tags",
]
