"""
Input validation utilities for fzweb.

This module provides validation functions for command-line arguments.
"""

import os
from pathlib import Path
from typing import Optional, Sequence, Tuple, Union

from fzweb.utils.error_handler import ConfigurationError, ValidationError


def validate_entry_name(name: str) -> str:
    """
    Validate a bookmark name supplied on the command line.

    Args:
        name: Raw name argument

    Returns:
        The name, unchanged

    Raises:
        ValidationError: If the name is empty or only whitespace
    """
    if not name or not name.strip():
        raise ValidationError("Bookmark name must not be empty")
    return name


def validate_entry_url(url: str) -> str:
    """Validate a bookmark URL. Any non-empty string is accepted."""
    if not url or not url.strip():
        raise ValidationError("Bookmark URL must not be empty")
    return url


def validate_add_request(
    add_args: Optional[Sequence[Sequence[str]]],
) -> Optional[Tuple[str, str]]:
    """
    Reduce repeated --add occurrences to the first (name, url) pair.

    Args:
        add_args: List of [name, url] lists collected by argparse, or None

    Returns:
        The validated first pair, or None when --add was not given
    """
    if not add_args:
        return None

    name, url = add_args[0]
    return validate_entry_name(name), validate_entry_url(url)


def validate_config_file(file_path: Union[str, Path, None]) -> Optional[Path]:
    """
    Validate an explicitly supplied settings file path.

    Args:
        file_path: Path given with --config, or None

    Returns:
        Absolute Path, or None when no path was given

    Raises:
        ConfigurationError: If the file is missing, not a file, unreadable
            or not TOML/JSON
    """
    if file_path is None:
        return None

    path = Path(file_path).expanduser()

    if not path.exists():
        raise ConfigurationError(f"Configuration file does not exist: {file_path}")

    if not path.is_file():
        raise ConfigurationError(f"Configuration path is not a file: {file_path}")

    if not os.access(path, os.R_OK):
        raise ConfigurationError(f"Configuration file is not readable: {file_path}")

    allowed_extensions = [".toml", ".json"]
    if path.suffix.lower() not in allowed_extensions:
        raise ConfigurationError(
            f"Configuration file must be TOML or JSON, got: {path.suffix}"
        )

    return path.absolute()
