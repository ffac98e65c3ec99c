"""
Data models for fzweb.

This module defines the bookmark entry and the status values reported by
store operations.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict


@dataclass(frozen=True)
class Entry:
    """A single named website bookmark. The URL is not validated."""

    name: str
    url: str

    def to_dict(self) -> Dict[str, str]:
        """Convert to dictionary for serialization, name first."""
        return {"name": self.name, "url": self.url}


class LoadStatus(str, Enum):
    """How a store was obtained at load time."""

    LOADED = "loaded"
    MISSING = "missing"
    UNREADABLE = "unreadable"


class Outcome(str, Enum):
    """Result of a mutating store operation."""

    SUCCESS = "success"
    DUPLICATE = "duplicate"
    NOT_FOUND = "not_found"
