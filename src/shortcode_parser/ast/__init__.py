#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/shortcode_parser/ast/__init__.py
"""Abstract Syntax Tree (AST) module for parsed shortcode content.

- nodes: ``Text`` and ``Shortcode`` node classes
- visitors: visitor base class, tree validation and traversal
- serialization: JSON conversion in the shape front-end renderers consume
- utils: reconstruction, searching and counting helpers

"""

from __future__ import annotations

from shortcode_parser.ast.nodes import AttributeValue, Node, Shortcode, Text, get_node_children
from shortcode_parser.ast.serialization import ast_to_dict, ast_to_json, dict_to_ast, json_to_ast
from shortcode_parser.ast.utils import NodeSummary, count_nodes, find_shortcodes, reconstruct
from shortcode_parser.ast.visitors import NodeVisitor, ValidationVisitor, walk

__all__ = [
    "AttributeValue",
    "Node",
    "NodeSummary",
    "NodeVisitor",
    "Shortcode",
    "Text",
    "ValidationVisitor",
    "ast_to_dict",
    "ast_to_json",
    "count_nodes",
    "dict_to_ast",
    "find_shortcodes",
    "get_node_children",
    "json_to_ast",
    "reconstruct",
    "walk",
]
