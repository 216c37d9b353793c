"""Filtering engine: path normalization, resolution and matching."""

from .engine import FilterContent, filter_content, run_filter
from .errors import (
    ConfigError,
    FilterContentError,
    MalformedInputError,
    RecursionLimitError,
)
from .matcher import matches, stringify
from .paths import normalize_properties, normalize_query, split_path
from .resolver import get_property, iter_elements, resolve
from .types import MISSING, WILDCARD, PropertyPath

__all__ = [
    "MISSING",
    "WILDCARD",
    "ConfigError",
    "FilterContent",
    "FilterContentError",
    "MalformedInputError",
    "PropertyPath",
    "RecursionLimitError",
    "filter_content",
    "get_property",
    "iter_elements",
    "matches",
    "normalize_properties",
    "normalize_query",
    "resolve",
    "run_filter",
    "split_path",
    "stringify",
]
