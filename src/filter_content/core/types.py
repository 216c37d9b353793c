"""Types for property paths and resolved values."""

from dataclasses import dataclass
from typing import Tuple

WILDCARD = "@each"
"""Segment that expands the current value over its elements."""


class _Missing:
    """Marker for a property that is not present on an item."""

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING = _Missing()


@dataclass(frozen=True)
class PropertyPath:
    """A normalized dot-notated property path.

    Examples:
        "first.name" → PropertyPath(raw="first.name", segments=("first", "name"))
        "tags.@each" → PropertyPath(raw="tags.@each", segments=("tags", "@each"))
    """

    raw: str
    """Path text as it appeared in the property list."""

    segments: Tuple[str, ...]
    """Non-empty property names or the ``@each`` wildcard."""

    @property
    def has_wildcard(self) -> bool:
        return WILDCARD in self.segments

    def __str__(self) -> str:
        return ".".join(self.segments)
