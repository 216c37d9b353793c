"""Pydantic models shared across filter-content."""

from .errors import Error, ErrorKind, FilterReport
from .settings import DEFAULT_MAX_DEPTH, Settings

__all__ = ["DEFAULT_MAX_DEPTH", "Error", "ErrorKind", "FilterReport", "Settings"]
