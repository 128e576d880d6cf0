#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/shortcode_parser/ast/utils.py
"""Utility functions for working with parsed shortcode trees.

Functions
---------
reconstruct : Rebuild the source string from a node sequence
find_shortcodes : Collect shortcodes anywhere in a tree
count_nodes : Count shortcode and text nodes recursively

Examples
--------
    >>> from shortcode_parser import parse_shortcodes
    >>> from shortcode_parser.ast.utils import find_shortcodes, reconstruct
    >>> nodes = parse_shortcodes('[su_box][su_highlight]hi[/su_highlight][/su_box]')
    >>> [node.name for node in find_shortcodes(nodes)]
    ['su_box', 'su_highlight']
    >>> reconstruct(nodes)
    '[su_box][su_highlight]hi[/su_highlight][/su_box]'

"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Optional

from shortcode_parser.ast.nodes import Node, Shortcode, Text
from shortcode_parser.ast.visitors import walk


@dataclass(frozen=True)
class NodeSummary:
    """Recursive node counts for a parsed tree."""

    shortcodes: int = 0
    text: int = 0

    @property
    def total(self) -> int:
        return self.shortcodes + self.text


def reconstruct(nodes: Iterable[Node]) -> str:
    """Concatenate the ``raw`` values of a top-level node sequence.

    For any input ``s``, ``reconstruct(parse_shortcodes(s)) == s``.
    """
    return "".join(node.raw for node in nodes)


def find_shortcodes(nodes: Iterable[Node], name: Optional[str] = None) -> list[Shortcode]:
    """Return every shortcode in the tree in depth-first pre-order.

    Parameters
    ----------
    nodes : iterable of Node
        Top-level node sequence
    name : str, optional
        Only return shortcodes with this exact (case-sensitive) name

    Returns
    -------
    list of Shortcode
        Matching shortcodes, outer ones before the ones nested inside them

    """
    return [
        node for node in walk(nodes) if isinstance(node, Shortcode) and (name is None or node.name == name)
    ]


def count_nodes(nodes: Iterable[Node]) -> NodeSummary:
    """Count shortcode and text nodes at every nesting level."""
    shortcodes = 0
    text = 0
    for node in walk(nodes):
        if isinstance(node, Text):
            text += 1
        else:
            shortcodes += 1
    return NodeSummary(shortcodes=shortcodes, text=text)
