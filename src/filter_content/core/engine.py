"""Filter a content collection by query against property paths."""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from typing import Any, List, Optional

from ..models.errors import Error, FilterReport
from ..models.settings import Settings
from .errors import RecursionLimitError
from .matcher import matches
from .paths import normalize_properties, normalize_query
from .resolver import resolve
from .types import PropertyPath

logger = logging.getLogger(__name__)


def _item_values(
    index: int,
    item: Any,
    paths: List[PropertyPath],
    settings: Settings,
    errors: List[Error],
) -> List[Any]:
    """Collect values of every path on ``item``; failures add no values."""
    values: List[Any] = []
    for path in paths:
        try:
            values.extend(resolve(item, path, max_depth=settings.max_depth))
        except RecursionLimitError as e:
            logger.error("Item %d, path %r: %s", index, str(path), e)
            errors.append(
                Error(kind="recursion_limit", message=str(e), index=index, path=str(path))
            )
        except Exception as e:
            logger.warning("Item %d, path %r: could not resolve: %s", index, str(path), e)
            errors.append(
                Error(kind="malformed_input", message=str(e), index=index, path=str(path))
            )
    return values


def run_filter(
    content: Optional[Sequence[Any]],
    properties: Optional[str],
    query: Optional[str],
    settings: Optional[Settings] = None,
) -> FilterReport:
    """Filter ``content`` and report what went wrong along the way.

    Items are kept, in order, when any value at any of the normalized
    ``properties`` matches ``query``. An empty query, empty properties or
    empty content leaves ``content`` untouched.

    Args:
        content: Ordered collection of items
        properties: Space-delimited, dot-notated property list
        query: Regular expression text to look for
        settings: Engine settings (defaults when omitted)

    Returns:
        FilterReport with the accepted items and any reported errors
    """
    settings = settings or Settings()
    if content is not None and not isinstance(content, Sequence):
        content = list(content)
    paths = normalize_properties(properties)
    normalized = normalize_query(query, escape=settings.escape_query)
    report = FilterReport(paths=[str(p) for p in paths], query=normalized)

    if not content or not paths or not normalized:
        report.items = content if content is not None else []
        return report

    try:
        pattern = re.compile(normalized)
    except re.error as e:
        logger.error("Invalid query pattern %r: %s", normalized, e)
        report.errors.append(
            Error(kind="malformed_input", message=f"invalid query pattern: {e}")
        )
        report.items = []
        return report

    accepted = []
    for index, item in enumerate(content):
        values = _item_values(index, item, paths, settings, report.errors)
        if any(matches(value, pattern) for value in values):
            accepted.append(item)

    logger.debug(
        "Matched %d of %d items for %r on %s",
        len(accepted),
        len(content),
        normalized,
        report.paths,
    )
    report.items = accepted
    return report


def filter_content(
    content: Optional[Sequence[Any]],
    properties: Optional[str],
    query: Optional[str],
    settings: Optional[Settings] = None,
) -> Any:
    """Return the items of ``content`` matching ``query`` at ``properties``.

    Examples:
        >>> filter_content([{"tags": ["red", "blue"]}, {"tags": ["green"]}], "tags.@each", "red")
        [{"tags": ["red", "blue"]}]
        >>> filter_content(items, "name", "")  # empty query, nothing filtered
        items
    """
    return run_filter(content, properties, query, settings).items


class FilterContent:
    """Caller-owned filter state.

    Holds the inputs of a filter and the last result. Changing inputs through
    ``update`` recomputes; nothing else does, so callers decide when (and how
    often) filtering happens.
    """

    def __init__(
        self,
        content: Optional[Sequence[Any]] = None,
        properties: str = "",
        query: str = "",
        settings: Optional[Settings] = None,
    ):
        self.content = content
        self.properties = properties
        self.query = query
        self.settings = settings or Settings()
        self.filtered_content: Any = []
        self.errors: List[Error] = []
        self.apply_filter()

    @property
    def content(self) -> Sequence[Any]:
        return self._content

    @content.setter
    def content(self, value: Optional[Sequence[Any]]) -> None:
        # Kept as a list so every recompute sees the same items.
        if value is None:
            value = []
        elif not isinstance(value, Sequence):
            value = list(value)
        self._content = value

    @property
    def normalized_properties(self) -> List[str]:
        return [str(p) for p in normalize_properties(self.properties)]

    @property
    def normalized_query(self) -> str:
        return normalize_query(self.query, escape=self.settings.escape_query)

    def apply_filter(self) -> Any:
        """Recompute ``filtered_content`` from the current inputs."""
        report = run_filter(self.content, self.properties, self.query, self.settings)
        self.filtered_content = report.items
        self.errors = report.errors
        return self.filtered_content

    def update(self, **changes: Any) -> Any:
        """Set any of ``content``, ``properties`` or ``query`` and recompute."""
        unknown = set(changes) - {"content", "properties", "query"}
        if unknown:
            raise TypeError(f"Unknown filter inputs: {', '.join(sorted(unknown))}")
        for name, value in changes.items():
            setattr(self, name, value)
        return self.apply_filter()
