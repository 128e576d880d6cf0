#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for AST JSON serialization."""

import json

import pytest

from shortcode_parser import Shortcode, Text, parse_shortcodes
from shortcode_parser.ast import ast_to_dict, ast_to_json, dict_to_ast, json_to_ast


@pytest.mark.unit
class TestAstToDict:
    """Tests for ast_to_dict."""

    def test_text(self) -> None:
        """Test a text node."""
        assert ast_to_dict(Text(raw="hi")) == {"type": "text", "raw": "hi"}

    def test_shortcode_shape(self) -> None:
        """Test the renderer-facing object shape."""
        node = parse_shortcodes('[su_box title="Test" radius=5]Body[/su_box]')[0]

        assert ast_to_dict(node) == {
            "type": "shortcode",
            "name": "su_box",
            "attributes": {"title": "Test", "radius": 5},
            "content": [{"type": "text", "raw": "Body"}],
            "raw": '[su_box title="Test" radius=5]Body[/su_box]',
        }

    def test_unknown_node(self) -> None:
        """Test that foreign objects are rejected."""
        with pytest.raises(ValueError):
            ast_to_dict("not a node")  # type: ignore[arg-type]


@pytest.mark.unit
class TestDictToAst:
    """Tests for dict_to_ast."""

    def test_missing_type(self) -> None:
        """Test a dictionary without a type."""
        with pytest.raises(ValueError, match="type"):
            dict_to_ast({"raw": "x"})

    def test_unknown_type(self) -> None:
        """Test an unsupported type."""
        with pytest.raises(ValueError, match="Unknown node type"):
            dict_to_ast({"type": "paragraph"})

    def test_shortcode_without_name(self) -> None:
        """Test a shortcode dictionary missing its name."""
        with pytest.raises(ValueError, match="name"):
            dict_to_ast({"type": "shortcode"})

    def test_optional_fields_default(self) -> None:
        """Test that attributes, content and raw may be omitted."""
        assert dict_to_ast({"type": "shortcode", "name": "hr"}) == Shortcode(name="hr")


@pytest.mark.unit
class TestJson:
    """Tests for ast_to_json and json_to_ast."""

    def test_nested_tree(self) -> None:
        """Test a nested tree with typed attributes survives JSON."""
        nodes = parse_shortcodes('[tabs][tab title="Ünïcode" on n=2 r=0.5]x[/tab][/tabs] tail')
        restored = json_to_ast(ast_to_json(nodes))
        assert restored == nodes

    def test_single_node(self) -> None:
        """Test that a single node serializes to an object."""
        payload = ast_to_json(Text(raw="x"))
        assert json.loads(payload) == {"type": "text", "raw": "x"}
        assert json_to_ast(payload) == Text(raw="x")

    def test_unicode_not_escaped(self) -> None:
        """Test that non-ASCII text is written as-is."""
        assert "Ünïcode" in ast_to_json([Text(raw="Ünïcode")])

    def test_invalid_json(self) -> None:
        """Test malformed JSON input."""
        with pytest.raises(ValueError, match="Invalid JSON"):
            json_to_ast("{not json")

    def test_scalar_payload(self) -> None:
        """Test a JSON scalar."""
        with pytest.raises(ValueError):
            json_to_ast("42")
