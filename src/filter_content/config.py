"""Settings resolution and caching."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from .core.errors import ConfigError
from .models import Settings

CONFIG_FILENAME = ".filter-content.json"
CONFIG_ENV = "FILTER_CONTENT_CONFIG"

_SETTINGS: Settings | None = None


def reset() -> None:
    """Reset cached settings (primarily for tests)."""

    global _SETTINGS
    _SETTINGS = None


def _find_project_config(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Walk up from start_dir looking for a .filter-content.json file."""
    current = (start_dir or Path.cwd()).resolve()

    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def resolve_config_path(path: Path | str | None = None) -> Optional[Path]:
    """Resolve which settings file to load.

    Resolution order:
    1. Explicit path (--config)
    2. $FILTER_CONTENT_CONFIG environment variable
    3. Walk up from CWD looking for .filter-content.json
    4. None (built-in defaults)
    """
    if path:
        return Path(path)

    env_path = os.environ.get(CONFIG_ENV)
    if env_path:
        return Path(env_path)

    return _find_project_config()


def load_settings(path: Path | str | None = None) -> Settings:
    """Load settings from the resolved file, or defaults when there is none.

    Raises:
        ConfigError: If the file cannot be read, parsed or validated
    """
    resolved = resolve_config_path(path)
    if resolved is None:
        return Settings()

    try:
        data = json.loads(resolved.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Cannot read settings from {resolved}: {e}") from e

    try:
        settings = Settings.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid settings in {resolved}: {e}") from e

    settings.config_path = resolved
    return settings


def use(path: Path | str | None = None) -> Settings:
    """Load settings from ``path`` (or fallback locations) and cache them."""

    global _SETTINGS
    _SETTINGS = load_settings(path)
    return _SETTINGS


def require() -> Settings:
    """Return the cached settings, loading them if necessary."""

    if _SETTINGS is None:
        return use(None)
    return _SETTINGS
