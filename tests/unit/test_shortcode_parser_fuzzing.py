#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Property-based tests for the shortcode parser.

Arbitrary text and generated shortcode-like markup must always parse without
raising, reconstruct exactly and produce structurally valid trees.
"""

import re

import pytest
from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from shortcode_parser import (
    Shortcode,
    ShortcodeParser,
    ShortcodeParserOptions,
    Text,
    decode_html_entities,
    decode_shortcode_entities,
    has_encoded_shortcodes,
    parse_attributes,
    parse_shortcodes,
    reconstruct,
    scan_tags,
)
from shortcode_parser.ast import ValidationVisitor, walk
from shortcode_parser.parsers.scanner import TAG_PATTERN

# Whole-string regex forms of the tag and entity scans
BRACKET_SPAN = re.compile(r"\[[^\]]+\]")
ENCODED_TAG = re.compile(r"\[\w[^>\]]*(?:&quot;|&#34;|&apos;|&#39;|&amp;)[^>\]]*\]")

BRACKET_TEXT = st.lists(
    st.sampled_from(["[", "]", "a", "b", " ", ">", "/", "x=1", "&quot;", "&amp;", "&#39;"]), max_size=30
).map("".join)

TAG_NAMES = st.sampled_from(["a", "b", "box", "su_tab", "genetic-algorithm", "Box"])

ATTRIBUTE_TEXT = st.sampled_from(["", " x=1", ' title="T"', " on", " r='0.5'", " url=/a"])


@st.composite
def shortcode_markup(draw) -> str:
    """Generate fragments of plausible, often malformed, shortcode markup."""
    pieces = draw(
        st.lists(
            st.one_of(
                st.text(alphabet="ab []/=\"'\n", max_size=6),
                st.builds(lambda n, a: f"[{n}{a}]", TAG_NAMES, ATTRIBUTE_TEXT),
                st.builds(lambda n: f"[/{n}]", TAG_NAMES),
                st.builds(lambda n, a: f"[{n}{a} /]", TAG_NAMES, ATTRIBUTE_TEXT),
            ),
            max_size=25,
        )
    )
    return "".join(pieces)


def _uncached_parser() -> ShortcodeParser:
    return ShortcodeParser(ShortcodeParserOptions(use_cache=False))


@pytest.mark.unit
@pytest.mark.fuzzing
class TestParserProperties:
    """Property-based tests for parse_shortcodes."""

    @given(st.text(max_size=300))
    @settings(max_examples=200, deadline=None)
    def test_arbitrary_text_reconstructs(self, content: str) -> None:
        """Test that any text round-trips through raw concatenation."""
        assert reconstruct(parse_shortcodes(content)) == content

    @given(shortcode_markup())
    @settings(max_examples=300, deadline=None, suppress_health_check=[HealthCheck.too_slow])
    def test_markup_reconstructs(self, content: str) -> None:
        """Test that shortcode-like markup round-trips."""
        nodes = _uncached_parser().parse(content)
        assert reconstruct(nodes) == content

    @given(shortcode_markup())
    @settings(max_examples=200, deadline=None)
    def test_children_reconstruct_body(self, content: str) -> None:
        """Test that each shortcode body appears inside its raw source."""
        for node in walk(_uncached_parser().parse(content)):
            if isinstance(node, Shortcode) and node.children:
                body = reconstruct(node.children)
                assert node.raw.startswith(f"[{node.name}")
                assert body in node.raw

    @given(shortcode_markup())
    @settings(max_examples=200, deadline=None)
    def test_trees_are_valid(self, content: str) -> None:
        """Test structural validity of every produced tree."""
        ValidationVisitor(strict=True).visit_all(_uncached_parser().parse(content))

    @given(shortcode_markup())
    @settings(max_examples=100, deadline=None)
    def test_cached_and_uncached_agree(self, content: str) -> None:
        """Test that caching never changes the result."""
        assert parse_shortcodes(content) == _uncached_parser().parse(content)

    @given(shortcode_markup())
    @settings(max_examples=100, deadline=None)
    def test_no_empty_text_nodes(self, content: str) -> None:
        """Test that text nodes are never empty."""
        for node in walk(_uncached_parser().parse(content)):
            if isinstance(node, Text):
                assert node.raw != ""


@pytest.mark.unit
@pytest.mark.fuzzing
class TestHelperProperties:
    """Property-based tests for attribute parsing and entity decoding."""

    @given(st.text(max_size=200))
    @settings(max_examples=200, deadline=None)
    def test_parse_attributes_never_raises(self, attr_string: str) -> None:
        """Test that attribute parsing accepts any text."""
        for key, value in parse_attributes(attr_string).items():
            assert key
            assert isinstance(value, (str, int, float, bool))

    @given(st.text(alphabet=st.characters(blacklist_characters="[]&\\"), max_size=200))
    @settings(max_examples=100, deadline=None)
    def test_decode_leaves_plain_text(self, content: str) -> None:
        """Test that text without brackets, ampersands or backslashes is unchanged."""
        assert decode_shortcode_entities(content) == content

    @given(st.one_of(BRACKET_TEXT, shortcode_markup()))
    @settings(max_examples=200, deadline=None)
    def test_scan_matches_regex_scan(self, content: str) -> None:
        """Test that the segment scan finds the same tags as a whole-string regex scan."""
        expected = [(match.group(0), match.start()) for match in TAG_PATTERN.finditer(content)]
        assert [(tag.text, tag.start) for tag in scan_tags(content)] == expected

    @given(BRACKET_TEXT)
    @settings(max_examples=200, deadline=None)
    def test_entity_helpers_match_regex(self, content: str) -> None:
        """Test the segment-based entity helpers against whole-string regexes."""
        assert has_encoded_shortcodes(content) == (ENCODED_TAG.search(content) is not None)
        expected = BRACKET_SPAN.sub(lambda match: decode_html_entities(match.group(0)) or "", content)
        assert decode_shortcode_entities(content) == expected


def _reference_partners(content: str) -> dict[int, int]:
    """Pair tags by counting same-name depth forward from each opener."""
    tags = scan_tags(content)
    partners = {}
    for index, tag in enumerate(tags):
        if not tag.is_opening:
            continue
        depth = 1
        for later in range(index + 1, len(tags)):
            other = tags[later]
            if other.name != tag.name:
                continue
            if other.is_closing:
                depth -= 1
                if depth == 0:
                    partners[index] = later
                    break
            elif not other.is_self_closing:
                depth += 1
    return partners


@pytest.mark.unit
@pytest.mark.fuzzing
class TestPairingProperties:
    """Single-pass tag pairing against a forward depth counter."""

    @given(shortcode_markup())
    @settings(max_examples=300, deadline=None)
    def test_pairs_match_depth_counter(self, content: str) -> None:
        """Test that stack pairing gives the same pairs as counting depth."""
        partners = ShortcodeParser._pair_tags(scan_tags(content))
        paired = {index: partner for index, partner in enumerate(partners) if partner is not None}
        assert paired == _reference_partners(content)
