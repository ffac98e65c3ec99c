"""
Error hierarchy for fzweb.

All custom exceptions raised by the store, the launcher, the settings
loader and the command-line front end are defined here. Import them from
fzweb.utils.error_handler.
"""

from pathlib import Path
from typing import Optional


class FzwebError(Exception):
    """Base exception for all fzweb errors."""

    pass


# ============================================================================
# Validation Errors
# ============================================================================


class ValidationError(FzwebError):
    """Invalid command-line argument values."""

    pass


# ============================================================================
# Configuration Errors
# ============================================================================


class ConfigurationError(FzwebError):
    """Settings file could not be found, parsed or validated."""

    pass


# ============================================================================
# Store Errors
# ============================================================================


class StoreError(FzwebError):
    """Base class for bookmark store errors."""

    pass


class StoreReadError(StoreError):
    """The store file exists but could not be read."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read {path}: {reason}")


class StoreWriteError(StoreError):
    """The store file or its directory could not be written."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write {path}: {reason}")


# ============================================================================
# Launch Errors
# ============================================================================


class LaunchError(FzwebError):
    """The operating system could not open a URL."""

    def __init__(self, url: str, diagnostic: str, returncode: Optional[int] = None):
        self.url = url
        self.diagnostic = diagnostic
        self.returncode = returncode
        super().__init__(diagnostic)


def exit_code_for(error: BaseException) -> int:
    """
    Map an exception reaching the process boundary to an exit status.

    Argument parsing failures never get here: argparse exits with 2 itself.
    """
    if isinstance(error, KeyboardInterrupt):
        return 130
    return 1
