"""
Pytest configuration and shared fixtures for fzweb tests.
"""

import io
import json
import logging
from pathlib import Path
from typing import Callable, Generator

import pytest
from rich.console import Console

from fzweb.config.paths import fixed_path
from fzweb.core.store import Store
from tests.fixtures.fakes import FakeBrowserLauncher, FakeSelector
from tests.fixtures.store_files import SAMPLE_WEBSITES


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers installed by setup_logging() during a test."""
    package_logger = logging.getLogger("fzweb")
    level = package_logger.level
    yield
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(level)


# ============================================================================
# Temporary Store Fixtures
# ============================================================================


@pytest.fixture
def store_path(tmp_path: Path) -> Path:
    """Store file location inside a directory that does not exist yet."""
    return tmp_path / "fzweb" / "config.json"


@pytest.fixture
def path_provider(store_path: Path) -> Callable[[], Path]:
    return fixed_path(store_path)


@pytest.fixture
def write_store(store_path: Path) -> Callable[[str], Path]:
    """Write raw text to the store file and return its path."""

    def _write(content: str) -> Path:
        store_path.parent.mkdir(parents=True, exist_ok=True)
        store_path.write_text(content, encoding="utf-8")
        return store_path

    return _write


@pytest.fixture
def populated_store(write_store, path_provider) -> Store:
    """Store loaded from a file holding three entries."""
    write_store(json.dumps({"websites": SAMPLE_WEBSITES}))
    return Store.load(path_provider)


# ============================================================================
# Console and Collaborator Fixtures
# ============================================================================


class ConsoleCapture:
    """Rich console writing into a StringIO buffer."""

    def __init__(self):
        self.buffer = io.StringIO()
        self.console = Console(file=self.buffer, width=200, color_system=None)

    @property
    def text(self) -> str:
        return self.buffer.getvalue()


@pytest.fixture
def out() -> ConsoleCapture:
    return ConsoleCapture()


@pytest.fixture
def err() -> ConsoleCapture:
    return ConsoleCapture()


@pytest.fixture
def fake_selector() -> FakeSelector:
    return FakeSelector()


@pytest.fixture
def fake_launcher() -> FakeBrowserLauncher:
    return FakeBrowserLauncher()


@pytest.fixture
def settings_dir(tmp_path: Path) -> Generator[Path, None, None]:
    """Empty directory searched for default settings files."""
    directory = tmp_path / "settings"
    directory.mkdir()
    yield directory
