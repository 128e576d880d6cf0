#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/shortcode_parser/parsers/shortcode.py
"""Shortcode markup to AST converter.

This module builds a node tree from text that embeds bracket shortcodes such
as ``[su_box title="Note"]Body[/su_box]`` and ``[su_divider /]``. The input is
usually HTML from a content management system; everything outside shortcode
tags is kept verbatim in ``Text`` nodes.

Parsing is lenient. The content source is not trusted to emit
well-formed markup, and renderers always need a tree back:

- an opener with no matching closer becomes a childless shortcode
- a closer with no opener is left in the surrounding text
- stray brackets are plain text

Whatever the input, concatenating the ``raw`` values of the returned nodes
gives back the input exactly.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional

from shortcode_parser.ast.nodes import AttributeValue, Node, Shortcode, Text
from shortcode_parser.cache import ShortcodeCache, get_default_cache
from shortcode_parser.exceptions import InvalidOptionsError, NestingDepthError
from shortcode_parser.options.shortcode import ShortcodeParserOptions
from shortcode_parser.parsers.attributes import parse_attributes, parse_attributes_uncached
from shortcode_parser.parsers.scanner import TagOccurrence, scan_tags
from shortcode_parser.utils.entities import decode_shortcode_entities, has_encoded_shortcodes

logger = logging.getLogger(__name__)


def _copy_nodes(nodes: list[Node]) -> list[Node]:
    """Copy a node tree, one stack frame per nesting level."""
    copied: list[Node] = []
    for node in nodes:
        if isinstance(node, Shortcode):
            node = replace(node, attributes=dict(node.attributes), children=_copy_nodes(node.children))
        else:
            node = replace(node)
        copied.append(node)
    return copied


class ShortcodeParser:
    """Convert shortcode markup to a list of AST nodes.

    Parameters
    ----------
    options : ShortcodeParserOptions or None, default = None
        Parser configuration options
    cache : ShortcodeCache or None, default = None
        Cache for attribute and document results. Defaults to the
        process-wide cache; pass a private instance to isolate callers.

    Examples
    --------
    Basic parsing:

        >>> parser = ShortcodeParser()
        >>> nodes = parser.parse('[su_box title="Test"]Content here[/su_box]')
        >>> nodes[0].name, nodes[0].attributes
        ('su_box', {'title': 'Test'})

    Isolated cache:

        >>> parser = ShortcodeParser(cache=ShortcodeCache(max_document_entries=10))

    """

    def __init__(self, options: ShortcodeParserOptions | None = None, cache: Optional[ShortcodeCache] = None):
        """Initialize the parser with options and cache."""
        if options is not None and not isinstance(options, ShortcodeParserOptions):
            raise InvalidOptionsError(expected_type=ShortcodeParserOptions, received_type=type(options))
        self.options: ShortcodeParserOptions = options or ShortcodeParserOptions()
        self.cache: ShortcodeCache = cache if cache is not None else get_default_cache()

    def parse(self, content: str) -> list[Node]:
        """Parse content into shortcode and text nodes.

        Parameters
        ----------
        content : str
            Text or HTML containing shortcodes

        Returns
        -------
        list of Node
            Top-level nodes in source order

        Raises
        ------
        NestingDepthError
            If shortcodes nest deeper than ``options.max_nesting_depth``

        """
        if not content:
            return []

        if self.options.decode_entities and has_encoded_shortcodes(content):
            logger.debug("Decoding HTML entities inside shortcode tags")
            content = decode_shortcode_entities(content) or ""

        max_depth = self.options.max_nesting_depth
        cacheable = self.options.use_cache and len(content) < self.options.cache_content_threshold
        if cacheable:
            cached = self.cache.get_document(content, max_depth)
            if cached is not None:
                logger.debug("Document cache hit (%d chars)", len(content))
                return _copy_nodes(cached) if self.options.copy_cached_results else list(cached)

        occurrences = scan_tags(content)
        partners = self._pair_tags(occurrences)
        nodes = self._parse_level(content, occurrences, partners, 0, len(occurrences), 0, len(content), depth=0)

        if cacheable:
            self.cache.set_document(content, nodes, max_depth)
            if self.options.copy_cached_results:
                return _copy_nodes(nodes)
        return list(nodes)

    def _parse_level(
        self,
        content: str,
        occurrences: list[TagOccurrence],
        partners: list[Optional[int]],
        first: int,
        last: int,
        start: int,
        end: int,
        depth: int,
    ) -> list[Node]:
        """Build the node sequence for one nesting level.

        A level is the span ``content[start:end]`` (the whole input, or the
        body of a shortcode) together with the occurrences ``first`` up to
        ``last`` that lie inside it. An opener whose partner falls outside
        the level counts as unclosed here.

        Parameters
        ----------
        content : str
            The complete input
        occurrences : list of TagOccurrence
            Every tag in ``content``
        partners : list of int or None
            Closing tag index for each opener, from ``_pair_tags``
        first, last : int
            Occurrence index range of this level
        start, end : int
            Character range of this level
        depth : int
            Number of enclosing shortcodes

        Returns
        -------
        list of Node
            Nodes for this level; shortcode bodies are parsed recursively

        """
        result: list[Node] = []
        pos = start
        index = first

        while index < last:
            occurrence = occurrences[index]

            if occurrence.is_closing:
                # Orphan closer: stays in the text run that follows
                logger.debug("Ignoring unmatched closing tag [/%s] at %d", occurrence.name, occurrence.start)
                index += 1
                continue

            if occurrence.start > pos:
                result.append(Text(raw=content[pos : occurrence.start]))

            closing_index = partners[index]
            if occurrence.is_self_closing or closing_index is None or closing_index >= last:
                if not occurrence.is_self_closing:
                    # No closing tag - treat as self-closing
                    logger.debug("No closing tag for [%s] at %d", occurrence.name, occurrence.start)
                result.append(self._create_shortcode(occurrence, occurrence.text))
                pos = occurrence.end
                index += 1
                continue

            if depth + 1 > self.options.max_nesting_depth:
                raise NestingDepthError(depth + 1, self.options.max_nesting_depth, position=occurrence.start)

            closing = occurrences[closing_index]
            node = self._create_shortcode(occurrence, content[occurrence.start : closing.end])
            node.children = self._parse_level(
                content, occurrences, partners, index + 1, closing_index, occurrence.end, closing.start, depth + 1
            )
            result.append(node)

            pos = closing.end
            index = closing_index + 1

        if pos < end:
            result.append(Text(raw=content[pos:end]))

        return result

    @staticmethod
    def _pair_tags(occurrences: list[TagOccurrence]) -> list[Optional[int]]:
        """Pair every opening tag with its closing tag in a single pass.

        Each tag name keeps its own stack of open tags; a closer pairs with the
        most recent unpaired opener of the same name. This gives the same
        pairs as counting same-name depth forward from each opener.

        Parameters
        ----------
        occurrences : list of TagOccurrence
            Every tag of the document in source order

        Returns
        -------
        list of int or None
            For each opener, the index of its closing tag, or None if it is
            never closed. Entries for other tags are None.

        """
        partners: list[Optional[int]] = [None] * len(occurrences)
        open_tags: dict[str, list[int]] = {}

        for index, occurrence in enumerate(occurrences):
            if occurrence.is_closing:
                stack = open_tags.get(occurrence.name)
                if stack:
                    partners[stack.pop()] = index
            elif not occurrence.is_self_closing:
                open_tags.setdefault(occurrence.name, []).append(index)

        return partners

    def _create_shortcode(self, occurrence: TagOccurrence, raw: str) -> Shortcode:
        return Shortcode(
            name=occurrence.name,
            attributes=self._parse_attributes(occurrence.attributes),
            children=[],
            raw=raw,
        )

    def _parse_attributes(self, attr_string: str) -> dict[str, AttributeValue]:
        if self.options.use_cache:
            return parse_attributes(attr_string, self.cache)
        return parse_attributes_uncached(attr_string)


_default_parser: Optional[ShortcodeParser] = None


def _get_default_parser() -> ShortcodeParser:
    global _default_parser
    if _default_parser is None:
        _default_parser = ShortcodeParser()
    return _default_parser


def parse_shortcodes(content: str) -> list[Node]:
    """Parse content into shortcode and text nodes with default options.

    Uses the process-wide cache; see ``clear_shortcode_caches``.

    Examples
    --------
    >>> [type(node).__name__ for node in parse_shortcodes('[button url="/test"] Some text after')]
    ['Shortcode', 'Text']

    """
    return _get_default_parser().parse(content)
