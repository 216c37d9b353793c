"""Resolve dot-notated property paths against content items."""

import logging
from collections.abc import Collection, Mapping, Sequence
from typing import Any, Iterator, List, Tuple, Union

from ..models.settings import DEFAULT_MAX_DEPTH
from .errors import MalformedInputError, RecursionLimitError
from .paths import split_path
from .types import MISSING, WILDCARD, PropertyPath

logger = logging.getLogger(__name__)

PathLike = Union[str, Sequence[str], PropertyPath]


def _segments(path: PathLike) -> Tuple[str, ...]:
    if isinstance(path, PropertyPath):
        return path.segments
    if isinstance(path, str):
        return split_path(path)
    return tuple(path)


def get_property(item: Any, name: str) -> Any:
    """Look up ``name`` on ``item``.

    Mappings are read by key, sequences by a plain decimal index, anything
    else by attribute. Returns ``MISSING`` when the property is absent or
    ``None``.

    Raises:
        MalformedInputError: If reading the property fails for another reason
    """
    if item is None or item is MISSING:
        return MISSING

    try:
        if isinstance(item, Mapping):
            value = item.get(name, MISSING)
        elif isinstance(item, Sequence) and not isinstance(item, (str, bytes)):
            if name.isascii() and name.isdigit() and int(name) < len(item):
                value = item[int(name)]
            else:
                value = MISSING
        else:
            value = getattr(item, name, MISSING)
    except Exception as e:
        raise MalformedInputError(f"cannot read {name!r}: {e}") from e

    return MISSING if value is None else value


def iter_elements(item: Any) -> Iterator[Any]:
    """Iterate the elements of a collection.

    Strings, bytes and mappings are values rather than collections and
    yield nothing, as do non-iterable items and one-shot iterators, which
    iterating would use up.
    """
    if isinstance(item, (str, bytes, Mapping)) or not isinstance(item, Collection):
        return iter(())
    return iter(item)


def resolve(
    item: Any,
    path: PathLike,
    depth: int = 0,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> List[Any]:
    """Return every value reachable from ``item`` along ``path``.

    An ``@each`` segment fans out over the elements of the current value and
    continues with the remaining segments on each element. The result is
    always flat and keeps element order.

    Args:
        item: Content item to walk
        path: Dotted string, segment sequence or PropertyPath
        depth: Current recursion depth
        max_depth: Deepest level allowed before giving up

    Returns:
        Resolved values; empty when a property along the way is missing

    Raises:
        RecursionLimitError: If the walk goes deeper than ``max_depth``

    Examples:
        >>> resolve({"tags": ["red", "blue"]}, "tags.@each")
        ["red", "blue"]
        >>> resolve({"a": {}}, "a.b.c")
        []
    """
    segments = _segments(path)
    if not segments:
        return []
    if depth > max_depth:
        raise RecursionLimitError(max_depth, ".".join(segments))

    segment, remaining = segments[0], segments[1:]

    if segment == WILDCARD:
        values: List[Any] = []
        for element in iter_elements(item):
            if remaining:
                values.extend(resolve(element, remaining, depth + 1, max_depth))
            else:
                values.append(element)
        return values

    value = get_property(item, segment)
    if value is MISSING:
        return []
    if not remaining:
        return [value]
    return resolve(value, remaining, depth + 1, max_depth)
