"""
Command-line interface for fzweb.

This module parses the invocation, loads settings and the bookmark store,
and hands the request to the command dispatcher.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from rich.console import Console

from fzweb import __version__
from fzweb.config.paths import PathProvider
from fzweb.config.settings import ConfigurationManager
from fzweb.core.dispatcher import CommandDispatcher, CommandRequest
from fzweb.core.launcher import BrowserLauncher, SystemBrowserLauncher
from fzweb.core.selector import RichFuzzySelector, Selector
from fzweb.core.store import Store
from fzweb.utils.error_handler import FzwebError, ValidationError, exit_code_for
from fzweb.utils.logging_setup import setup_logging
from fzweb.utils.validation import (
    validate_add_request,
    validate_config_file,
    validate_entry_name,
)


class CLIInterface:
    """Command line interface for managing and opening website bookmarks."""

    def __init__(
        self,
        selector: Optional[Selector] = None,
        launcher: Optional[BrowserLauncher] = None,
        path_provider: Optional[PathProvider] = None,
        config_dir: Optional[Path] = None,
        console: Optional[Console] = None,
        error_console: Optional[Console] = None,
    ):
        """
        Initialize the CLI.

        Args:
            selector: Selector to use instead of the terminal picker
            launcher: Launcher to use instead of the system opener
            path_provider: Store path provider overriding settings
            config_dir: Directory searched for default settings files
            console: Console for normal output (stdout)
            error_console: Console for diagnostics (stderr)
        """
        self.selector = selector
        self.launcher = launcher
        self.path_provider = path_provider
        self.config_dir = config_dir
        self.console = console or Console()
        self.error_console = error_console or Console(stderr=True)
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """Create argument parser."""
        parser = argparse.ArgumentParser(
            prog="fzweb",
            description="A CLI tool to manage and open websites interactively.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  fzweb --add docs https://docs.python.org/3/
  fzweb --del docs
  fzweb --open
  fzweb --list
  fzweb -a news https://news.ycombinator.com -l

Steps run in a fixed order: add, delete, open, list.

Bookmarks are stored in ~/.config/fzweb/config.json. Optional settings
are read from ~/.config/fzweb/settings.toml (or --config):

  [store]
  path = "~/.config/fzweb/config.json"
  backup_unreadable = true

  [selector]
  prompt = ">"
  score_cutoff = 50.0
  limit = 20

  [logging]
  level = "WARNING"

In the picker, type to filter, press Enter to open the highlighted
entry, enter a number to open that entry, or press Ctrl-C to cancel.
            """,
        )

        parser.add_argument(
            "--version", "-V", action="version", version=f"%(prog)s {__version__}"
        )

        parser.add_argument(
            "--add",
            "-a",
            nargs=2,
            action="append",
            metavar=("NAME", "URL"),
            help="Add a website with a name and URL",
        )
        parser.add_argument(
            "--list",
            "-l",
            action="store_true",
            help="List all stored websites",
        )
        parser.add_argument(
            "--open",
            "-o",
            action="store_true",
            help="Open a website in your default browser",
        )
        parser.add_argument(
            "--del",
            "-d",
            dest="delete",
            metavar="NAME",
            help="Delete a website by name",
        )

        parser.add_argument(
            "--config",
            "-c",
            help="Settings file path (TOML or JSON). If not specified, looks "
            "for settings.toml/settings.json in ~/.config/fzweb.",
        )
        parser.add_argument(
            "--verbose",
            "-v",
            action="store_true",
            help="Log progress to stderr",
        )

        return parser

    def parse_args(self, args=None) -> argparse.Namespace:
        """Parse command line arguments."""
        return self.parser.parse_args(args)

    def validate_args(self, args: argparse.Namespace) -> dict:
        """
        Validate arguments and return processed values.

        Raises:
            ValidationError: If an argument value is invalid
            ConfigurationError: If the --config file is unusable
        """
        delete = None
        if args.delete is not None:
            delete = validate_entry_name(args.delete)

        return {
            "request": CommandRequest(
                add=validate_add_request(args.add),
                delete=delete,
                open=args.open,
                list=args.list,
            ),
            "config_path": validate_config_file(args.config),
            "verbose": args.verbose,
        }

    def build_dispatcher(self, manager: ConfigurationManager) -> CommandDispatcher:
        """Load the store and wire up the collaborators from settings."""
        config = manager.config
        path_provider = self.path_provider or manager.store_path_provider()

        store = Store.load(path_provider, backup_unreadable=config.store.backup_unreadable)

        selector = self.selector or RichFuzzySelector(
            console=Console(stderr=True),
            prompt=config.selector.prompt,
            score_cutoff=config.selector.score_cutoff,
            limit=config.selector.limit,
        )
        launcher = self.launcher or SystemBrowserLauncher()

        return CommandDispatcher(
            store,
            selector,
            launcher,
            console=self.console,
            error_console=self.error_console,
        )

    def run(self, args=None) -> int:
        """Execute CLI interface."""
        logger = logging.getLogger(__name__)
        try:
            parsed_args = self.parse_args(args)
            validated_args = self.validate_args(parsed_args)

            manager = ConfigurationManager(
                validated_args["config_path"], config_dir=self.config_dir
            )
            setup_logging(
                manager.config.logging.level,
                manager.config.logging.file,
                verbose=validated_args["verbose"],
            )

            request = validated_args["request"]
            logger.info(f"fzweb {__version__} starting")
            logger.info(f"Request: {request}")

            dispatcher = self.build_dispatcher(manager)
            logger.info(f"Store file: {dispatcher.store.path}")
            return dispatcher.run(request)

        except ValidationError as e:
            self._print_error(f"Validation Error: {e}")
            return exit_code_for(e)
        except FzwebError as e:
            self._print_error(f"Error: {e}")
            return exit_code_for(e)
        except KeyboardInterrupt as e:
            return exit_code_for(e)
        except Exception as e:
            self._print_error(f"Error: {e}")
            logger.exception("Unexpected error in CLI")
            return exit_code_for(e)

    def _print_error(self, message: str) -> None:
        self.error_console.print(message, markup=False, highlight=False)


def main(args=None):
    """Main entry point for the CLI."""
    cli = CLIInterface()
    return cli.run(args)


if __name__ == "__main__":
    sys.exit(main())
