"""
Utility modules for fzweb.

This package contains the error hierarchy, logging setup and
command-line argument validation.
"""

from .error_handler import (
    ConfigurationError,
    FzwebError,
    LaunchError,
    StoreError,
    StoreReadError,
    StoreWriteError,
    ValidationError,
)
from .logging_setup import setup_logging

__all__ = [
    "ConfigurationError",
    "FzwebError",
    "LaunchError",
    "StoreError",
    "StoreReadError",
    "StoreWriteError",
    "ValidationError",
    "setup_logging",
]
