#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/shortcode_parser/utils/entities.py
"""Repair HTML-entity-encoded shortcode tags.

Content management REST APIs frequently return shortcode attributes with
their quotes encoded (``[su_box title=&quot;Note&quot;]``), which stops the
tag scanner from seeing quoted values. The helpers here decode entities
inside bracket spans only, leaving entities in ordinary prose untouched.

This is a pure text pre-pass with no knowledge of the node tree; run it
before ``parse_shortcodes`` when needed.

"""

from __future__ import annotations

import re
from typing import Optional

from shortcode_parser.constants import ENCODED_SHORTCODE_MARKERS, SHORTCODE_ENTITY_MAP

_ENTITY_PATTERN = re.compile(
    "|".join(re.escape(entity) for entity in sorted(SHORTCODE_ENTITY_MAP, key=len, reverse=True)),
    re.IGNORECASE,
)

# Opening bracket of a tag-like span
_TAG_START_PATTERN = re.compile(r"\[\w")


def _replace_entity(match: re.Match[str]) -> str:
    return SHORTCODE_ENTITY_MAP[match.group(0).lower()]


def decode_html_entities(content: Optional[str]) -> Optional[str]:
    """Decode the entities that interfere with shortcode parsing.

    Handles quote, apostrophe, ampersand, angle-bracket, non-breaking-space and
    smart-quote entities in named, decimal and hexadecimal form. Matching
    ignores case (``&QUOT;`` and ``&#X22;`` decode too). Each entity is decoded
    once, so ``&amp;quot;`` becomes ``&quot;`` rather than ``"``.

    Parameters
    ----------
    content : str or None
        Text with encoded entities

    Returns
    -------
    str or None
        Decoded text; empty and None input is returned unchanged

    """
    if not content:
        return content
    return _ENTITY_PATTERN.sub(_replace_entity, content)


def decode_shortcode_entities(content: Optional[str]) -> Optional[str]:
    """Decode entities inside ``[...]`` spans only.

    Backslash-escaped quotes and slashes left behind by a JSON encoding step
    (``\\"`` and ``\\/``) are normalized across the whole content first.

    Examples
    --------
    >>> decode_shortcode_entities('<p>&quot;a&quot;</p>[box title=&quot;T&quot;]')
    '<p>&quot;a&quot;</p>[box title="T"]'

    """
    if not content:
        return content

    processed = content.replace('\\"', '"').replace("\\/", "/")

    # A span runs from the first "[" of a "]"-terminated segment to its "]",
    # and needs at least one character between the brackets
    segments = processed.split("]")
    for index in range(len(segments) - 1):
        segment = segments[index]
        bracket = segment.find("[")
        if bracket != -1 and bracket < len(segment) - 1:
            segments[index] = segment[:bracket] + (decode_html_entities(segment[bracket:]) or "")
    return "]".join(segments)


def has_encoded_shortcodes(content: Optional[str]) -> bool:
    """Report whether any shortcode tag in ``content`` carries encoded quotes or ampersands.

    Callers use this to skip ``decode_shortcode_entities`` when it would be a
    no-op. Entities outside bracket spans do not count.
    """
    if not content:
        return False
    # The tag is the text after the last ">" before a "]", starting at the
    # first "[" followed by a word character
    segments = content.split("]")
    for segment in segments[:-1]:
        tail = segment[segment.rfind(">") + 1 :]
        start = _TAG_START_PATTERN.search(tail)
        if start is None:
            continue
        body = tail[start.end() :]
        if any(marker in body for marker in ENCODED_SHORTCODE_MARKERS):
            return True
    return False
