#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/shortcode_parser/parsers/attributes.py
"""Shortcode attribute parsing and value coercion.

An attribute list is the text between a tag name and the closing bracket,
for example ``title="Test" width=100 responsive=yes autoplay``. Each
attribute is a name optionally followed by ``=`` and a value that is
double-quoted, single-quoted or an unquoted run of non-space characters.

Values are coerced the same way regardless of quoting:

- ``true`` / ``false`` (exact, case-sensitive) become booleans
- integer and decimal literals, optionally signed, become int / float
- a bare name with no value becomes ``True``
- anything else is kept as a string with the quotes removed

Scanning is best-effort: text that does not fit the grammar is skipped and
no error is ever raised.
"""

from __future__ import annotations

import re
from typing import Optional

from shortcode_parser.ast.nodes import AttributeValue
from shortcode_parser.cache import ShortcodeCache, get_default_cache
from shortcode_parser.constants import ATTRIBUTE_NAME_PATTERN, NUMERIC_VALUE_PATTERN

ATTRIBUTE_PATTERN = re.compile(
    rf"""({ATTRIBUTE_NAME_PATTERN})(?:=(?:"([^"]*)"|'([^']*)'|([^\s\]]+)))?""",
    re.ASCII,
)

_NUMERIC_PATTERN = re.compile(rf"^{NUMERIC_VALUE_PATTERN}$", re.ASCII)


def coerce_attribute_value(value: str) -> AttributeValue:
    """Coerce a raw attribute value to bool, int, float or str.

    Examples
    --------
    >>> coerce_attribute_value("true"), coerce_attribute_value("100"), coerce_attribute_value("1.5")
    (True, 100, 1.5)
    >>> coerce_attribute_value("yes")
    'yes'

    """
    if value == "true":
        return True
    if value == "false":
        return False
    if _NUMERIC_PATTERN.match(value):
        if "." in value:
            return float(value)
        try:
            return int(value)
        except ValueError:
            # Past the interpreter's integer string conversion limit
            return float(value)
    return value


def _parse(attr_string: str) -> dict[str, AttributeValue]:
    attrs: dict[str, AttributeValue] = {}

    for match in ATTRIBUTE_PATTERN.finditer(attr_string):
        name, double_quoted, single_quoted, unquoted = match.groups()

        if double_quoted is not None:
            attrs[name] = coerce_attribute_value(double_quoted)
        elif single_quoted is not None:
            attrs[name] = coerce_attribute_value(single_quoted)
        elif unquoted is not None:
            attrs[name] = coerce_attribute_value(unquoted)
        else:
            # Bare flag
            attrs[name] = True

    return attrs


def parse_attributes(attr_string: str, cache: Optional[ShortcodeCache] = None) -> dict[str, AttributeValue]:
    """Parse an attribute list into a typed mapping.

    Later occurrences of a repeated name overwrite earlier ones. Results are
    memoized by the exact input string; the returned dict is a fresh copy
    that the caller may modify.

    Parameters
    ----------
    attr_string : str
        Text between the tag name and the closing bracket
    cache : ShortcodeCache, optional
        Cache to consult and populate (defaults to the process-wide cache)

    Returns
    -------
    dict
        Attribute names mapped to str, int, float or bool values

    Examples
    --------
    >>> parse_attributes('width=100 height=200 disabled responsive=yes')
    {'width': 100, 'height': 200, 'disabled': True, 'responsive': 'yes'}

    """
    if not attr_string or attr_string.isspace():
        return {}

    cache = cache if cache is not None else get_default_cache()
    cached = cache.get_attributes(attr_string)
    if cached is not None:
        return dict(cached)

    attrs = _parse(attr_string)
    cache.set_attributes(attr_string, attrs)
    return dict(attrs)


def parse_attributes_uncached(attr_string: str) -> dict[str, AttributeValue]:
    """Parse an attribute list without touching any cache."""
    return _parse(attr_string) if attr_string else {}
