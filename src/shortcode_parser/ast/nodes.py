#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/shortcode_parser/ast/nodes.py
"""AST node classes for parsed shortcode content.

A parse produces a flat sequence of nodes at each level, alternating between
runs of verbatim text and shortcode elements:

    - Text: a verbatim substring with no further structure
    - Shortcode: a named element with typed attributes and child nodes

Every node carries ``raw``, the exact substring of the input it was parsed
from. Concatenating the ``raw`` values of a top-level sequence yields the
original input.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Union

AttributeValue = Union[str, int, float, bool]


class Node(ABC):
    """Base class for all AST nodes.

    Parameters
    ----------
    raw : str
        Exact source substring this node was parsed from

    """

    raw: str

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        pass


@dataclass
class Text(Node):
    """Verbatim text between (or inside) shortcodes.

    Parameters
    ----------
    raw : str
        Text content, unmodified

    """

    raw: str

    def accept(self, visitor: Any) -> Any:
        """Return ``visitor.visit_text(self)``."""
        return visitor.visit_text(self)


@dataclass
class Shortcode(Node):
    """A bracket-delimited shortcode element.

    Parameters
    ----------
    name : str
        Tag identifier, case-sensitive (e.g. ``su_box``, ``genetic-algorithm``)
    attributes : dict, default = empty dict
        Attribute values coerced to str, int, float or bool
    children : list of Node, default = empty list
        Parsed content between the opening and closing tag; always empty for
        self-closing and unmatched tags
    raw : str, default = ""
        Source substring spanning the opening tag through the closing tag

    """

    name: str
    attributes: dict[str, AttributeValue] = field(default_factory=dict)
    children: list[Node] = field(default_factory=list)
    raw: str = ""

    def accept(self, visitor: Any) -> Any:
        """Return ``visitor.visit_shortcode(self)``."""
        return visitor.visit_shortcode(self)

    def get(self, key: str, default: Any = None) -> Any:
        """Return an attribute value, or ``default`` when it is absent."""
        return self.attributes.get(key, default)

    @property
    def text(self) -> str:
        """Concatenated raw source of the children (the tag body)."""
        return "".join(child.raw for child in self.children)


def get_node_children(node: Node) -> list[Node]:
    """Get all child nodes from a node.

    Parameters
    ----------
    node : Node
        The node to get children from

    Returns
    -------
    list of Node
        List of child nodes (empty list for text nodes)

    """
    if isinstance(node, Shortcode):
        return list(node.children)
    return []
