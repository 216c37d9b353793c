"""Property list and query normalization.

A property list is a free-form, space-delimited list of dot-notated paths:

    "name  address.city tags.@each"

Stray punctuation is dropped, repeated periods collapse to one, and period
runs glued to a separator are absorbed into it, so ``"name. .city"`` reads as
the two paths ``name`` and ``city``.
"""

import logging
import re
from typing import List, Optional, Tuple

from .types import PropertyPath

logger = logging.getLogger(__name__)

_INVALID_CHARS = re.compile(r"[^\w\s@.\-]+")
_PERIOD_RUNS = re.compile(r"\.{2,}")
_DELIMITER = re.compile(r"(\.+)?\s\1?")
_WHITESPACE = re.compile(r"\s+")
_SEGMENT_SEPARATOR = re.compile(r"\.+")
_BACKSLASHES = re.compile(r"\\+")


def split_path(raw: str) -> Tuple[str, ...]:
    """Split a dotted path into its non-empty segments.

    Examples:
        >>> split_path("address..city")
        ("address", "city")
        >>> split_path(".tags.@each.")
        ("tags", "@each")
    """
    return tuple(segment for segment in _SEGMENT_SEPARATOR.split(raw) if segment)


def _clean(raw: str) -> List[str]:
    cleaned = _INVALID_CHARS.sub("", raw)
    cleaned = _PERIOD_RUNS.sub(".", cleaned)
    cleaned = _DELIMITER.sub(" ", cleaned)
    return [part for part in _WHITESPACE.split(cleaned) if part != ""]


def normalize_properties(raw: Optional[str]) -> List[PropertyPath]:
    """Normalize a property list into an ordered list of paths.

    Args:
        raw: Space-delimited, dot-notated property list from the caller

    Returns:
        Paths in authored order. Empty when ``raw`` is empty, absent or made
        only of characters that cannot appear in a path.

    Examples:
        >>> [str(p) for p in normalize_properties("first.name  last..name")]
        ["first.name", "last.name"]
        >>> normalize_properties("!!!")
        []
    """
    if not raw:
        return []

    try:
        paths = []
        for part in _clean(raw):
            segments = split_path(part)
            if segments:
                paths.append(PropertyPath(raw=part, segments=segments))
        return paths
    except Exception as e:
        logger.error("Could not normalize properties %r: %s", raw, e)
        return []


def normalize_query(raw: Optional[str], escape: bool = False) -> str:
    """Strip backslashes from a query.

    The result is used as a regular expression pattern. With ``escape`` the
    remaining regex metacharacters are escaped so the query matches literally.
    """
    if raw is None:
        return ""

    try:
        query = _BACKSLASHES.sub("", str(raw))
    except Exception as e:
        logger.error("Could not normalize query %r: %s", raw, e)
        return ""

    if escape and query:
        query = re.escape(query)
    return query
