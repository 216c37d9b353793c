"""Result and error models returned by a filter pass."""

from __future__ import annotations

from typing import Any, List, Literal, Optional

from pydantic import BaseModel, Field

ErrorKind = Literal["recursion_limit", "malformed_input"]


class Error(BaseModel):
    """A failure reported during a filter pass."""

    kind: ErrorKind
    message: str
    index: Optional[int] = None
    path: Optional[str] = None

    def __str__(self) -> str:
        location = []
        if self.index is not None:
            location.append(f"item {self.index}")
        if self.path:
            location.append(f"path {self.path!r}")
        if location:
            return f"{', '.join(location)}: {self.message}"
        return self.message


class FilterReport(BaseModel):
    """Outcome of one filter pass."""

    items: Any = Field(default_factory=list)
    errors: List[Error] = Field(default_factory=list)
    paths: List[str] = Field(default_factory=list)
    query: str = ""

    @property
    def ok(self) -> bool:
        """True when the pass reported no errors."""

        return not self.errors


__all__ = ["Error", "ErrorKind", "FilterReport"]
