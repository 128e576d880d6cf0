#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/shortcode_parser/ast/serialization.py
"""JSON serialization and deserialization for shortcode trees.

Nodes serialize to the plain-object shape consumed by front-end renderers:

    {"type": "text", "raw": "..."}
    {"type": "shortcode", "name": "...", "attributes": {...}, "content": [...], "raw": "..."}

Examples
--------
    >>> from shortcode_parser import parse_shortcodes
    >>> from shortcode_parser.ast.serialization import ast_to_json, json_to_ast
    >>> nodes = parse_shortcodes('[su_divider top="yes" /]')
    >>> json_str = ast_to_json(nodes)
    >>> json_to_ast(json_str) == nodes
    True

"""

from __future__ import annotations

import json
from typing import Any, Union

from shortcode_parser.ast.nodes import Node, Shortcode, Text


def ast_to_dict(node: Node) -> dict[str, Any]:
    """Convert an AST node to a dictionary representation.

    Parameters
    ----------
    node : Node
        The AST node to convert

    Returns
    -------
    dict
        Dictionary representation of the node

    Raises
    ------
    ValueError
        If ``node`` is not a Text or Shortcode

    """
    if isinstance(node, Text):
        return {"type": "text", "raw": node.raw}
    if isinstance(node, Shortcode):
        return {
            "type": "shortcode",
            "name": node.name,
            "attributes": dict(node.attributes),
            "content": [ast_to_dict(child) for child in node.children],
            "raw": node.raw,
        }
    raise ValueError(f"Unknown node type for serialization: {type(node).__name__}")


def dict_to_ast(data: dict[str, Any]) -> Node:
    """Convert a dictionary representation back to an AST node.

    Raises
    ------
    ValueError
        If the dictionary has no ``type`` or an unknown one

    """
    node_type = data.get("type")
    if not node_type:
        raise ValueError("Dictionary must contain 'type' field")

    if node_type == "text":
        return Text(raw=data.get("raw", ""))
    if node_type == "shortcode":
        if "name" not in data:
            raise ValueError("Shortcode dictionary must contain 'name' field")
        return Shortcode(
            name=data["name"],
            attributes=dict(data.get("attributes") or {}),
            children=[dict_to_ast(child) for child in data.get("content") or []],
            raw=data.get("raw", ""),
        )
    raise ValueError(f"Unknown node type: {node_type}")


def ast_to_json(nodes: Union[Node, list[Node]], indent: int | None = None) -> str:
    """Serialize a node or a node sequence to a JSON string.

    Unicode is written as-is rather than as escape sequences.
    """
    payload: Any
    if isinstance(nodes, Node):
        payload = ast_to_dict(nodes)
    else:
        payload = [ast_to_dict(node) for node in nodes]
    return json.dumps(payload, indent=indent, ensure_ascii=False)


def json_to_ast(json_str: str) -> Union[Node, list[Node]]:
    """Deserialize a JSON string produced by ``ast_to_json``.

    Returns a single node for a JSON object and a list for a JSON array.

    Raises
    ------
    ValueError
        If the JSON is invalid or describes an unknown node type

    """
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON: {e}") from e

    if isinstance(data, list):
        return [dict_to_ast(item) for item in data]
    if isinstance(data, dict):
        return dict_to_ast(data)
    raise ValueError(f"Expected a JSON object or array, got {type(data).__name__}")
