#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/shortcode_parser/parsers/scanner.py
"""Flat scanning of bracket tags.

The scanner finds every ``[name ...]``, ``[/name]`` and ``[name ... /]`` in a
string in one left-to-right pass over its ``]`` characters. It does not resolve
nesting and does not know what any tag means; the tree builder does both.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from shortcode_parser.constants import TAG_NAME_PATTERN

# [ optional "/" ] name, attribute text up to the first "]", optional "/" before "]"
TAG_PATTERN = re.compile(rf"\[(/)?({TAG_NAME_PATTERN})([^\]]*?)(/)?\]", re.ASCII)


@dataclass(frozen=True)
class TagOccurrence:
    """One bracket tag found by the scanner.

    Parameters
    ----------
    text : str
        Full matched tag text, brackets included
    is_closing : bool
        Whether this is a closing tag (``[/name]``)
    is_self_closing : bool
        Whether the tag ends with ``/]``
    name : str
        Tag name
    attributes : str
        Raw attribute substring (unparsed)
    start : int
        Offset of the opening bracket
    end : int
        Offset just past the closing bracket; the span is ``[start, end)``

    """

    text: str
    is_closing: bool
    is_self_closing: bool
    name: str
    attributes: str
    start: int
    end: int

    @property
    def is_opening(self) -> bool:
        """True for a tag that expects a matching closer later on."""
        return not self.is_closing and not self.is_self_closing


def _occurrence_from_match(match: re.Match[str]) -> TagOccurrence:
    return TagOccurrence(
        text=match.group(0),
        is_closing=match.group(1) is not None,
        is_self_closing=match.group(4) is not None,
        name=match.group(2),
        attributes=match.group(3),
        start=match.start(),
        end=match.end(),
    )


def scan_tags(content: str) -> list[TagOccurrence]:
    """Return every bracket tag in ``content`` in source order.

    Attribute text never contains ``]``, so every tag ends at the first ``]``
    after its opening bracket. The content is searched one ``]``-terminated
    segment at a time; each segment holds at most one tag, and text after
    the last ``]`` is never searched. This keeps long runs of ``[`` without
    a closing bracket linear.

    Parameters
    ----------
    content : str
        Text to scan

    Returns
    -------
    list of TagOccurrence
        Tag occurrences ordered by start offset

    """
    if "[" not in content:
        return []

    occurrences: list[TagOccurrence] = []
    segment_start = 0
    close = content.find("]")

    while close != -1:
        match = TAG_PATTERN.search(content, segment_start, close + 1)
        if match is not None:
            occurrences.append(_occurrence_from_match(match))
        segment_start = close + 1
        close = content.find("]", segment_start)

    return occurrences
