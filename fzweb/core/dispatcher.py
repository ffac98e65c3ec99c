"""
Command dispatcher.

Runs the requested steps against an already loaded store, always in the
order: bootstrap save, add, delete, open, list.
"""

import logging
import sys
from dataclasses import dataclass
from typing import Optional, Tuple

from rich.console import Console
from rich.measure import Measurement
from rich.table import Table
from rich.text import Text

from fzweb.core.data_models import Outcome
from fzweb.core.launcher import BrowserLauncher
from fzweb.core.selector import Selector
from fzweb.core.store import Store
from fzweb.utils.error_handler import LaunchError

logger = logging.getLogger(__name__)


@dataclass
class CommandRequest:
    """What one invocation asks for. Any combination may be present."""

    add: Optional[Tuple[str, str]] = None
    delete: Optional[str] = None
    open: bool = False
    list: bool = False


class CommandDispatcher:
    """Applies a CommandRequest to a Store."""

    def __init__(
        self,
        store: Store,
        selector: Selector,
        launcher: BrowserLauncher,
        console: Optional[Console] = None,
        error_console: Optional[Console] = None,
    ):
        self.store = store
        self.selector = selector
        self.launcher = launcher
        self.console = console or Console()
        self.error_console = error_console or Console(stderr=True)

    def run(self, request: CommandRequest) -> int:
        """
        Execute every requested step.

        Store write failures propagate as StoreWriteError.

        Returns:
            Process exit status: 1 if the browser could not be opened,
            0 otherwise
        """
        if self.store.is_empty():
            # First run: make sure the store file exists
            self.store.save()

        if request.add is not None:
            name, url = request.add
            self._add(name, url)

        if request.delete is not None:
            self._delete(request.delete)

        if request.open:
            status = self._open()
            if status != 0:
                return status

        if request.list:
            self._list()

        return 0

    def _add(self, name: str, url: str) -> None:
        outcome = self.store.add(name, url)
        if outcome == Outcome.SUCCESS:
            self.console.print("Added successfully!", markup=False, highlight=False)
        else:
            self.error_console.print(
                f"Error: '{name}' already exists.", markup=False, highlight=False
            )

    def _delete(self, name: str) -> None:
        outcome = self.store.remove(name)
        if outcome == Outcome.SUCCESS:
            self.console.print(f"Deleted '{name}'.", markup=False, highlight=False)
        else:
            self.error_console.print(
                f"Error: '{name}' not found.", markup=False, highlight=False
            )

    def _open(self) -> int:
        selection = self.selector.select(self.store.candidate_names())
        if not selection.is_chosen:
            logger.info(f"Nothing opened ({selection.status.value})")
            return 0

        entry = self.store.find_by_name(selection.value)
        if entry is None:
            logger.warning(f"Selector returned unknown name '{selection.value}'")
            return 0

        try:
            self.launcher.launch(entry.url)
        except LaunchError as e:
            self.error_console.print(
                f"Failed to open URL: {e.diagnostic}", markup=False, highlight=False
            )
            return 1
        return 0

    def _list(self) -> None:
        entries = list(self.store.list())
        if not entries:
            return

        table = Table(show_header=True, header_style="bold")
        table.add_column("name", style="cyan", overflow="fold")
        table.add_column("url", overflow="fold")
        for entry in entries:
            table.add_row(Text(entry.name), Text(entry.url))

        if self.console.is_terminal:
            self.console.print(table)
            return

        # Redirected output keeps every row on one line so URLs stay intact
        unbounded = self.console.options.update_width(sys.maxsize)
        table.width = Measurement.get(self.console, unbounded, table).maximum
        self.console.print(table, crop=False)
