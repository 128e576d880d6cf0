#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Memoization for attribute strings and whole-document parses.

Two maps are kept, both keyed by exact source text:

- attribute cache: raw attribute substring to parsed attribute mapping
- document cache: full content string and nesting limit to parsed node sequence

Neither map evicts individual entries. When an insert would push a map past
its capacity the map is wiped wholesale before the new entry is stored.
Every read-modify-write happens under a lock, so a cache instance can be
shared between threads; a racing miss only recomputes an identical value.

"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from shortcode_parser.constants import (
    DEFAULT_MAX_ATTRIBUTE_CACHE_ENTRIES,
    DEFAULT_MAX_DOCUMENT_CACHE_ENTRIES,
    DEFAULT_MAX_NESTING_DEPTH,
)

if TYPE_CHECKING:
    from shortcode_parser.ast.nodes import AttributeValue, Node

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CacheStats:
    """Point-in-time snapshot of cache occupancy and hit counts."""

    attribute_entries: int
    document_entries: int
    hits: int
    misses: int


class ShortcodeCache:
    """Thread-safe attribute and document cache.

    Parameters
    ----------
    max_attribute_entries : int, default 1000
        Attribute map size above which the map is wiped
    max_document_entries : int, default 100
        Document map size above which the map is wiped

    """

    def __init__(
        self,
        max_attribute_entries: int = DEFAULT_MAX_ATTRIBUTE_CACHE_ENTRIES,
        max_document_entries: int = DEFAULT_MAX_DOCUMENT_CACHE_ENTRIES,
    ):
        """Initialize empty caches."""
        if max_attribute_entries <= 0:
            raise ValueError(f"max_attribute_entries must be positive, got {max_attribute_entries}")
        if max_document_entries <= 0:
            raise ValueError(f"max_document_entries must be positive, got {max_document_entries}")
        self.max_attribute_entries = max_attribute_entries
        self.max_document_entries = max_document_entries
        self._attributes: dict[str, dict[str, AttributeValue]] = {}
        self._documents: dict[tuple[str, int], list[Node]] = {}
        self._hits = 0
        self._misses = 0
        self.lock = threading.Lock()

    def get_attributes(self, attr_string: str) -> Optional[dict[str, AttributeValue]]:
        """Return the cached mapping for ``attr_string`` or None."""
        with self.lock:
            result = self._attributes.get(attr_string)
            self._record(result is not None)
            return result

    def set_attributes(self, attr_string: str, attributes: dict[str, AttributeValue]) -> None:
        """Store a parsed attribute mapping."""
        with self.lock:
            if attr_string not in self._attributes and len(self._attributes) >= self.max_attribute_entries:
                logger.debug("Attribute cache reached %d entries, clearing", len(self._attributes))
                self._attributes.clear()
            self._attributes[attr_string] = attributes

    def get_document(
        self, content: str, max_nesting_depth: int = DEFAULT_MAX_NESTING_DEPTH
    ) -> Optional[list[Node]]:
        """Return the node sequence cached for ``content`` under ``max_nesting_depth``, or None.

        Trees are stored per nesting limit so a parser with a lower limit never
        receives a tree that only a more permissive parser could build.
        """
        with self.lock:
            result = self._documents.get((content, max_nesting_depth))
            self._record(result is not None)
            return result

    def set_document(
        self, content: str, nodes: list[Node], max_nesting_depth: int = DEFAULT_MAX_NESTING_DEPTH
    ) -> None:
        """Store a parsed node sequence."""
        key = (content, max_nesting_depth)
        with self.lock:
            if key not in self._documents and len(self._documents) >= self.max_document_entries:
                logger.debug("Document cache reached %d entries, clearing", len(self._documents))
                self._documents.clear()
            self._documents[key] = nodes

    def clear(self) -> None:
        """Wipe both maps and reset the hit counters."""
        with self.lock:
            self._attributes.clear()
            self._documents.clear()
            self._hits = 0
            self._misses = 0

    def stats(self) -> CacheStats:
        """Return current entry counts and hit/miss totals."""
        with self.lock:
            return CacheStats(
                attribute_entries=len(self._attributes),
                document_entries=len(self._documents),
                hits=self._hits,
                misses=self._misses,
            )

    def _record(self, hit: bool) -> None:
        if hit:
            self._hits += 1
        else:
            self._misses += 1

    def __len__(self) -> int:
        with self.lock:
            return len(self._attributes) + len(self._documents)

    def __repr__(self) -> str:
        stats = self.stats()
        return (
            f"ShortcodeCache(attributes={stats.attribute_entries}/{self.max_attribute_entries}, "
            f"documents={stats.document_entries}/{self.max_document_entries})"
        )


_default_cache = ShortcodeCache()


def get_default_cache() -> ShortcodeCache:
    """Return the process-wide cache used by the module-level parse functions."""
    return _default_cache


def clear_shortcode_caches() -> None:
    """Wipe the process-wide attribute and document caches immediately."""
    _default_cache.clear()
