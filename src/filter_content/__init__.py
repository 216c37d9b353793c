"""filter-content: filter collections by query against dot-notated properties."""

import logging

from .core import (
    FilterContent,
    FilterContentError,
    PropertyPath,
    RecursionLimitError,
    filter_content,
    normalize_properties,
    resolve,
    run_filter,
)
from .models import FilterReport, Settings

__all__ = [
    "__version__",
    "FilterContent",
    "FilterContentError",
    "FilterReport",
    "PropertyPath",
    "RecursionLimitError",
    "Settings",
    "filter_content",
    "normalize_properties",
    "resolve",
    "run_filter",
]

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
