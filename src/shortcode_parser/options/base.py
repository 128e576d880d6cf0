"""Base classes for parser options.

Every option class is a frozen dataclass. Field metadata carries the help
text and importance level that the command line tool shows.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, fields, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from shortcode_parser.constants import DEFAULT_USE_CACHE


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)

    def to_dict(self) -> dict[str, Any]:
        """Return the option values keyed by field name."""
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class BaseParserOptions(CloneFrozenMixin):
    """Base class for parser options.

    Parameters
    ----------
    use_cache : bool
        Whether parse results are memoized in the shared cache

    """

    use_cache: bool = field(
        default=DEFAULT_USE_CACHE,
        metadata={"help": "Memoize attribute and document parses", "importance": "core"},
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        pass

    @staticmethod
    def _require_positive(name: str, value: int) -> None:
        if value <= 0:
            raise ValueError(f"{name} must be positive, got {value}")
