"""
Opening URLs with the operating system's default handler.

BrowserLauncher is the narrow interface the dispatcher depends on, so the
dispatcher can be exercised without opening browser windows.
"""

import logging
import os
import shutil
import subprocess
import sys
import tempfile
import webbrowser
from abc import ABC, abstractmethod
from typing import List, Optional

from fzweb.utils.error_handler import LaunchError

logger = logging.getLogger(__name__)


class BrowserLauncher(ABC):
    """Abstract interface for launching URLs in a browser."""

    @abstractmethod
    def launch(self, url: str) -> None:
        """Open a URL with the default handler for its scheme.

        Args:
            url: The URL to open

        Raises:
            LaunchError: If the operating system could not open it
        """
        ...


class SystemBrowserLauncher(BrowserLauncher):
    """Production implementation using the platform opener."""

    def __init__(self, platform: Optional[str] = None):
        self.platform = platform or sys.platform

    def opener_command(self, url: str) -> Optional[List[str]]:
        """Command line for the platform opener, or None if unavailable."""
        if self.platform == "darwin":
            program = "open"
        else:
            program = "xdg-open"

        if shutil.which(program) is None:
            return None
        return [program, url]

    def launch(self, url: str) -> None:
        logger.info(f"Opening {url}")

        if self.platform.startswith("win"):
            self._launch_windows(url)
            return

        command = self.opener_command(url)
        if command is None:
            self._launch_webbrowser(url)
            return

        self._run_opener(url, command)

    def _run_opener(self, url: str, command: List[str]) -> None:
        """
        Run the opener and wait only for the opener itself.

        A browser started by the opener inherits its standard streams, so
        they must not be pipes: reading a pipe to EOF would block until the
        browser exits. Stderr goes to a temporary file instead.
        """
        with tempfile.TemporaryFile(
            mode="w+", encoding="utf-8", errors="replace"
        ) as stderr:
            try:
                subprocess.run(
                    command,
                    check=True,
                    stdin=subprocess.DEVNULL,
                    stdout=subprocess.DEVNULL,
                    stderr=stderr,
                )
            except subprocess.CalledProcessError as e:
                stderr.seek(0)
                diagnostic = stderr.read().strip() or (
                    f"{command[0]} exited with status {e.returncode}"
                )
                raise LaunchError(url, diagnostic, e.returncode) from e
            except OSError as e:
                raise LaunchError(url, e.strerror or str(e)) from e

    def _launch_windows(self, url: str) -> None:
        try:
            os.startfile(url)  # type: ignore[attr-defined]
        except OSError as e:
            raise LaunchError(url, e.strerror or str(e)) from e

    def _launch_webbrowser(self, url: str) -> None:
        try:
            opened = webbrowser.open(url)
        except webbrowser.Error as e:
            raise LaunchError(url, str(e)) from e

        if not opened:
            raise LaunchError(url, "could not locate a runnable browser")
