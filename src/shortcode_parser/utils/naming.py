"""Conversions between attribute naming styles.

Shortcode attributes are written kebab-case (``mutation-level``) while
component properties on the rendering side are usually camelCase.
"""

from __future__ import annotations

import re

_CAMEL_BOUNDARY = re.compile(r"([a-z0-9]|(?=[A-Z]))([A-Z])")
_KEBAB_BOUNDARY = re.compile(r"-([a-z])")


def camel_to_kebab(name: str) -> str:
    """Convert ``mutationLevel`` to ``mutation-level``."""
    return _CAMEL_BOUNDARY.sub(r"\1-\2", name).lower()


def kebab_to_camel(name: str) -> str:
    """Convert ``mutation-level`` to ``mutationLevel``."""
    return _KEBAB_BOUNDARY.sub(lambda match: match.group(1).upper(), name)
