"""
Per-user file locations.

The store takes a path provider (a zero-argument callable returning the
store file path) instead of resolving the home directory itself.
"""

from pathlib import Path
from typing import Callable

APP_NAME = "fzweb"
STORE_FILENAME = "config.json"
SETTINGS_FILENAMES = ("settings.toml", "settings.json")

PathProvider = Callable[[], Path]


def default_config_dir() -> Path:
    """Return ~/.config/fzweb."""
    return Path.home() / ".config" / APP_NAME


def default_store_path() -> Path:
    """Return ~/.config/fzweb/config.json."""
    return default_config_dir() / STORE_FILENAME


def fixed_path(path: Path) -> PathProvider:
    """Build a provider that always returns ``path`` with ~ expanded."""
    resolved = Path(path).expanduser()

    def provider() -> Path:
        return resolved

    return provider
