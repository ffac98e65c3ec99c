"""
Tests for the error hierarchy.
"""

from pathlib import Path

import pytest

from fzweb.utils.error_handler import (
    ConfigurationError,
    FzwebError,
    LaunchError,
    StoreError,
    StoreReadError,
    StoreWriteError,
    ValidationError,
    exit_code_for,
)


class TestErrorHierarchy:
    """Tests for exception types and messages."""

    @pytest.mark.parametrize(
        "error_class", [ConfigurationError, StoreError, ValidationError]
    )
    def test_base_class(self, error_class):
        assert issubclass(error_class, FzwebError)

    def test_store_read_error(self):
        error = StoreReadError(Path("/tmp/x/config.json"), "Permission denied")

        assert isinstance(error, StoreError)
        assert str(error) == "Failed to read /tmp/x/config.json: Permission denied"

    def test_store_write_error(self):
        error = StoreWriteError(Path("/tmp/x/config.json"), "Permission denied")

        assert isinstance(error, StoreError)
        assert str(error) == "Failed to write /tmp/x/config.json: Permission denied"
        assert error.reason == "Permission denied"

    def test_launch_error_message_is_diagnostic(self):
        error = LaunchError("https://x", "No application knows how to open URL", 4)

        assert str(error) == "No application knows how to open URL"
        assert error.url == "https://x"
        assert error.returncode == 4


class TestExitCodes:
    """Tests for exit_code_for()."""

    def test_fzweb_errors(self):
        assert exit_code_for(ValidationError("bad")) == 1
        assert exit_code_for(LaunchError("u", "d")) == 1

    def test_unexpected_error(self):
        assert exit_code_for(RuntimeError("boom")) == 1

    def test_interrupt(self):
        assert exit_code_for(KeyboardInterrupt()) == 130
