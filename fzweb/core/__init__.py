"""
Core bookmark management modules.

This package contains the entry model, the JSON-backed store, the
interactive fuzzy selector, the browser launcher and the command
dispatcher that ties them together.
"""

from .data_models import Entry, LoadStatus, Outcome
from .dispatcher import CommandDispatcher, CommandRequest
from .launcher import BrowserLauncher, SystemBrowserLauncher
from .selector import RichFuzzySelector, Selection, SelectionStatus, Selector
from .store import Store

__all__ = [
    "BrowserLauncher",
    "CommandDispatcher",
    "CommandRequest",
    "Entry",
    "LoadStatus",
    "Outcome",
    "RichFuzzySelector",
    "Selection",
    "SelectionStatus",
    "Selector",
    "Store",
    "SystemBrowserLauncher",
]
