#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for shortcode attribute parsing and coercion."""

import pytest

from shortcode_parser import ShortcodeCache, parse_attributes, parse_shortcodes, reconstruct
from shortcode_parser.parsers import coerce_attribute_value
from shortcode_parser.parsers.attributes import parse_attributes_uncached


@pytest.mark.unit
class TestCoerceAttributeValue:
    """Tests for coerce_attribute_value."""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("true", True),
            ("false", False),
            ("100", 100),
            ("-3", -3),
            ("+7", 7),
            ("1.5", 1.5),
            ("-0.25", -0.25),
            (".5", 0.5),
            ("5.", 5.0),
        ],
    )
    def test_coerced_values(self, raw: str, expected: object) -> None:
        """Test boolean and numeric literals."""
        result = coerce_attribute_value(raw)
        assert result == expected
        assert type(result) is type(expected)

    @pytest.mark.parametrize("raw", ["True", "FALSE", "yes", "1e5", "0x10", "12px", "1.2.3", "", "-", "."])
    def test_values_kept_as_strings(self, raw: str) -> None:
        """Test values that are neither booleans nor plain numbers."""
        assert coerce_attribute_value(raw) == raw

    def test_integer_past_conversion_limit(self) -> None:
        """Test that an integer too long for int() becomes a float instead of raising."""
        result = coerce_attribute_value("1" * 5000)
        assert isinstance(result, float)

    def test_long_integer_inside_shortcode(self) -> None:
        """Test that a very long numeric attribute does not break parsing."""
        content = "[box n=" + "1" * 5000 + " /]"
        nodes = parse_shortcodes(content)

        assert isinstance(nodes[0].attributes["n"], float)
        assert reconstruct(nodes) == content


@pytest.mark.unit
class TestParseAttributes:
    """Tests for parse_attributes."""

    def test_double_quoted(self) -> None:
        """Test double-quoted values."""
        assert parse_attributes('title="Test Title" style="glass"') == {"title": "Test Title", "style": "glass"}

    def test_single_quoted(self) -> None:
        """Test single-quoted values."""
        assert parse_attributes("title='Test Title' style='glass'") == {"title": "Test Title", "style": "glass"}

    def test_unquoted_values_and_flags(self) -> None:
        """Test unquoted values and bare flags together."""
        attrs = parse_attributes("width=100 height=200 disabled responsive=yes")
        assert attrs == {"width": 100, "height": 200, "disabled": True, "responsive": "yes"}

    def test_boolean_and_numeric_coercion(self) -> None:
        """Test coercion regardless of quoting."""
        attrs = parse_attributes('enabled="true" disabled=false count="42" ratio=1.5')
        assert attrs == {"enabled": True, "disabled": False, "count": 42, "ratio": 1.5}

    def test_quoted_value_keeps_spaces_and_brackets(self) -> None:
        """Test that quoted values may contain spaces and other quote styles."""
        attrs = parse_attributes(""" title="It's here" alt='say "hi"' """)
        assert attrs == {"title": "It's here", "alt": 'say "hi"'}

    def test_empty_quoted_value(self) -> None:
        """Test that an empty quoted value stays an empty string."""
        assert parse_attributes('title=""') == {"title": ""}

    def test_duplicate_names_last_wins(self) -> None:
        """Test that later occurrences overwrite earlier ones."""
        assert parse_attributes("a=1 a=2") == {"a": 2}

    def test_hyphenated_names(self) -> None:
        """Test attribute names with hyphens."""
        assert parse_attributes('mutation-level="5" data-id=x') == {"mutation-level": 5, "data-id": "x"}

    @pytest.mark.parametrize("attr_string", ["", "   ", "\n\t"])
    def test_empty_input(self, attr_string: str) -> None:
        """Test that blank input yields an empty mapping."""
        assert parse_attributes(attr_string) == {}

    def test_garbage_is_skipped(self) -> None:
        """Test that unparseable fragments are ignored without raising."""
        attrs = parse_attributes(' = "orphan" ok=1 ===')
        assert attrs["ok"] == 1
        assert "" not in attrs

    def test_returns_independent_copies(self) -> None:
        """Test that mutating a result does not affect later calls."""
        first = parse_attributes('title="Test"')
        first["title"] = "changed"
        first["extra"] = True

        assert parse_attributes('title="Test"') == {"title": "Test"}

    def test_uses_given_cache(self) -> None:
        """Test that results are memoized in the supplied cache."""
        cache = ShortcodeCache()
        parse_attributes("a=1", cache)
        parse_attributes("a=1", cache)

        stats = cache.stats()
        assert stats.attribute_entries == 1
        assert stats.hits == 1
        assert stats.misses == 1

    def test_uncached_matches_cached(self) -> None:
        """Test the cache-free variant."""
        attr_string = 'url="/contact" target=self newtab'
        assert parse_attributes_uncached(attr_string) == parse_attributes(attr_string)
        assert parse_attributes_uncached("") == {}
