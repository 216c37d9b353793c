"""Settings model for the filtering engine and CLI."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

DEFAULT_MAX_DEPTH = 100


class Settings(BaseModel):
    """Tunable engine behaviour, loaded from ``.filter-content.json``."""

    max_depth: int = Field(default=DEFAULT_MAX_DEPTH, ge=1)
    escape_query: bool = False
    properties: str = ""
    config_path: Path | None = Field(default=None, exclude=True)


__all__ = ["DEFAULT_MAX_DEPTH", "Settings"]
