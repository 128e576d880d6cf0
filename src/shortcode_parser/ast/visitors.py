#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/shortcode_parser/ast/visitors.py
"""Visitor pattern implementation for AST traversal.

Renderers subclass ``NodeVisitor`` and dispatch on tag names inside
``visit_shortcode``; the parser itself attaches no meaning to any name.

"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from typing import Any

from shortcode_parser.ast.nodes import Node, Shortcode, Text
from shortcode_parser.constants import ATTRIBUTE_NAME_PATTERN, TAG_NAME_PATTERN

_TAG_NAME_RE = re.compile(rf"^{TAG_NAME_PATTERN}$", re.ASCII)
_ATTRIBUTE_NAME_RE = re.compile(rf"^{ATTRIBUTE_NAME_PATTERN}$", re.ASCII)


class NodeVisitor(ABC):
    """Abstract base class for AST node visitors.

    Examples
    --------
    Collect button URLs:

        >>> class ButtonCollector(NodeVisitor):
        ...     def __init__(self):
        ...         self.urls = []
        ...
        ...     def visit_text(self, node):
        ...         pass
        ...
        ...     def visit_shortcode(self, node):
        ...         if node.name == "su_button":
        ...             self.urls.append(node.get("url"))
        ...         self.visit_children(node)
        ...
        >>> collector = ButtonCollector()
        >>> collector.visit_all(parse_shortcodes('[su_button url="/a"]A[/su_button]'))
        >>> collector.urls
        ['/a']

    """

    @abstractmethod
    def visit_text(self, node: Text) -> Any:
        """Visit a Text node.

        Parameters
        ----------
        node : Text
            The text node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_shortcode(self, node: Shortcode) -> Any:
        """Visit a Shortcode node.

        Parameters
        ----------
        node : Shortcode
            The shortcode node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    def visit_children(self, node: Shortcode) -> list[Any]:
        """Visit each child of ``node`` in order and return the results."""
        return [child.accept(self) for child in node.children]

    def visit_all(self, nodes: Iterable[Node]) -> list[Any]:
        """Visit a top-level node sequence in order and return the results."""
        return [node.accept(self) for node in nodes]


class ValidationVisitor(NodeVisitor):
    """Visitor that checks a tree against the parser's structural invariants.

    Checks performed on every shortcode:
    - the name is a valid tag identifier
    - every attribute key is a valid attribute name
    - every attribute value is a str, int, float or bool
    - the children's raw text appears inside the shortcode's raw text

    Parameters
    ----------
    strict : bool, default = True
        Raise ``ValueError`` on the first problem. When False, problems are
        collected in ``errors``.

    """

    def __init__(self, strict: bool = True):
        """Initialize the validator."""
        self.strict = strict
        self.errors: list[str] = []

    def _report(self, message: str) -> None:
        if self.strict:
            raise ValueError(message)
        self.errors.append(message)

    def visit_text(self, node: Text) -> None:
        """Text nodes carry no structure to validate."""
        if not isinstance(node.raw, str):
            self._report(f"Text raw must be str, got {type(node.raw).__name__}")

    def visit_shortcode(self, node: Shortcode) -> None:
        """Validate a shortcode and recurse into its children."""
        if not _TAG_NAME_RE.match(node.name):
            self._report(f"Invalid shortcode name: {node.name!r}")

        for key, value in node.attributes.items():
            if not _ATTRIBUTE_NAME_RE.match(key):
                self._report(f"Invalid attribute name {key!r} on [{node.name}]")
            if not isinstance(value, (str, int, float, bool)):
                self._report(f"Attribute {key!r} on [{node.name}] has unsupported type {type(value).__name__}")

        body = node.text
        if body and body not in node.raw:
            self._report(f"Children of [{node.name}] are not contained in its raw source")

        self.visit_children(node)


def walk(nodes: Iterable[Node]) -> Iterator[Node]:
    """Yield every node of a tree in depth-first pre-order.

    Parameters
    ----------
    nodes : iterable of Node
        Top-level node sequence

    Yields
    ------
    Node
        Each node, parents before their children

    """
    stack: list[Node] = list(reversed(list(nodes)))
    while stack:
        node = stack.pop()
        yield node
        if isinstance(node, Shortcode):
            stack.extend(reversed(node.children))
