"""
Pydantic-based settings for fzweb.

Settings are optional. They are read from the file given with --config,
or from ~/.config/fzweb/settings.toml (or settings.json) when present;
otherwise the defaults below apply.
"""

import json
import logging
from pathlib import Path
from typing import List, Literal, Optional

import toml
from pydantic import BaseModel, Field, ValidationError, field_validator

from fzweb.config.paths import (
    SETTINGS_FILENAMES,
    PathProvider,
    default_config_dir,
    default_store_path,
    fixed_path,
)
from fzweb.utils.error_handler import ConfigurationError

logger = logging.getLogger(__name__)


class StoreConfig(BaseModel):
    """Bookmark store location and recovery settings."""

    path: Optional[Path] = Field(
        default=None,
        description="Store file path; defaults to ~/.config/fzweb/config.json",
    )
    backup_unreadable: bool = Field(
        default=True,
        description="Copy an unparsable store file aside before overwriting it",
    )

    @field_validator("path", mode="before")
    @classmethod
    def validate_path(cls, v):
        """Treat empty strings as unset and expand ~."""
        if v is None or v == "":
            return None
        return Path(v).expanduser()


class SelectorConfig(BaseModel):
    """Interactive fuzzy selector settings."""

    prompt: str = Field(default=">", min_length=1, description="Prompt marker")
    score_cutoff: float = Field(
        default=50.0,
        ge=0.0,
        le=100.0,
        description="Minimum fuzzy score for a candidate to be shown",
    )
    limit: int = Field(
        default=20,
        ge=1,
        le=200,
        description="Maximum number of matches displayed at once",
    )


class LoggingConfig(BaseModel):
    """Logging settings."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="WARNING")
    file: Optional[Path] = Field(default=None, description="Optional log file")

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v):
        if isinstance(v, str):
            return v.upper()
        return v

    @field_validator("file", mode="before")
    @classmethod
    def validate_file(cls, v):
        if v is None or v == "":
            return None
        return Path(v).expanduser()


class FzwebConfig(BaseModel):
    """Top-level settings model."""

    store: StoreConfig = Field(default_factory=StoreConfig)
    selector: SelectorConfig = Field(default_factory=SelectorConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


class ConfigurationManager:
    """Loads and validates settings from an optional TOML or JSON file."""

    def __init__(
        self,
        config_path: Optional[Path] = None,
        config_dir: Optional[Path] = None,
    ):
        """
        Initialize configuration manager.

        Args:
            config_path: Explicit settings file; must exist when given
            config_dir: Directory searched for default settings files
        """
        self._config_dir = config_dir or default_config_dir()
        self._source: Optional[Path] = None
        self._config = self._load_configuration(config_path)

    def _get_default_config_paths(self) -> List[Path]:
        """Get list of default settings file paths to try."""
        return [self._config_dir / name for name in SETTINGS_FILENAMES]

    def _load_configuration(self, config_path: Optional[Path]) -> FzwebConfig:
        config_data = {}

        if config_path:
            config_data = self._load_config_file(Path(config_path))
            self._source = Path(config_path)
        else:
            for path in self._get_default_config_paths():
                if path.exists():
                    config_data = self._load_config_file(path)
                    self._source = path
                    break

        try:
            config = FzwebConfig(**config_data)
        except ValidationError as e:
            raise ConfigurationError(format_config_error(e, self._source)) from e

        if self._source is not None:
            logger.info(f"Loaded settings from {self._source}")
        return config

    def _load_config_file(self, config_path: Path) -> dict:
        """Load settings from a TOML or JSON file."""
        if not config_path.exists():
            raise ConfigurationError(f"Configuration file not found: {config_path}")

        try:
            if config_path.suffix.lower() == ".toml":
                data = toml.load(config_path)
            elif config_path.suffix.lower() == ".json":
                with open(config_path, "r", encoding="utf-8") as f:
                    data = json.load(f)
            else:
                raise ConfigurationError(
                    f"Unsupported configuration file format: {config_path.suffix}"
                )
        except ConfigurationError:
            raise
        except (OSError, ValueError, toml.TomlDecodeError) as e:
            raise ConfigurationError(
                f"Failed to load configuration from {config_path}: {e}"
            ) from e

        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration file {config_path} must contain a table/object"
            )
        return data

    @property
    def config(self) -> FzwebConfig:
        """Get the current configuration."""
        return self._config

    @property
    def source(self) -> Optional[Path]:
        """Settings file the configuration was read from, if any."""
        return self._source

    def store_path_provider(self) -> PathProvider:
        """Path provider for the store: the settings override or the default."""
        if self._config.store.path is not None:
            return fixed_path(self._config.store.path)
        return default_store_path


def _format_error_location(location: tuple) -> str:
    if not location:
        return "settings"
    return ".".join(str(part) for part in location)


def format_config_error(error: ValidationError, source: Optional[Path] = None) -> str:
    """
    Convert a pydantic ValidationError into a readable message.

    Args:
        error: Pydantic ValidationError instance
        source: Settings file the values came from

    Returns:
        Multi-line message, one line per invalid value
    """
    header = "Invalid settings"
    if source is not None:
        header += f" in {source}"

    lines = [header + ":"]
    for detail in error.errors():
        location = _format_error_location(detail["loc"])
        message = detail.get("msg", "Invalid value")
        if "input" in detail and detail["type"] != "missing":
            lines.append(f"  {location}: {message} (got: {detail['input']!r})")
        else:
            lines.append(f"  {location}: {message}")
    return "\n".join(lines)
