"""Exceptions raised by the filtering engine."""


class FilterContentError(Exception):
    """Base error for filter-content."""

    pass


class RecursionLimitError(FilterContentError):
    """Path resolution walked deeper than the configured limit."""

    def __init__(self, limit: int, path: str = ""):
        self.limit = limit
        self.path = path
        message = f"recursing too far, limit is {limit} levels"
        if path:
            message = f"{message} (path: {path})"
        super().__init__(message)


class MalformedInputError(FilterContentError):
    """An item, path or value had a shape the engine could not handle.

    Raised when reading a property fails; the engine reports it as a
    ``malformed_input`` error and the item contributes no values.
    """

    pass


class ConfigError(FilterContentError):
    """Settings file could not be read or validated."""

    pass
