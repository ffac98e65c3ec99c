"""
Interactive selection of a bookmark name.

Selector is the narrow interface the dispatcher depends on: one blocking
call taking the candidate names and returning a Selection. RichFuzzySelector
is the terminal implementation.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, TextIO

from rich.console import Console
from rich.text import Text

from fzweb.core.fuzzy import FUZZY_LIMIT, FUZZY_SCORE_CUTOFF, rank_candidates

logger = logging.getLogger(__name__)


class SelectionStatus(str, Enum):
    """How an interactive selection ended."""

    CHOSEN = "chosen"
    NO_SELECTION = "no_selection"
    ABORTED = "aborted"


@dataclass(frozen=True)
class Selection:
    """Result of a selector session. ``value`` is set only when CHOSEN."""

    status: SelectionStatus
    value: Optional[str] = None

    @classmethod
    def chosen(cls, value: str) -> "Selection":
        return cls(SelectionStatus.CHOSEN, value)

    @classmethod
    def no_selection(cls) -> "Selection":
        return cls(SelectionStatus.NO_SELECTION)

    @classmethod
    def aborted(cls) -> "Selection":
        return cls(SelectionStatus.ABORTED)

    @property
    def is_chosen(self) -> bool:
        return self.status == SelectionStatus.CHOSEN


class Selector(ABC):
    """Abstract interface for picking one name out of a candidate list."""

    @abstractmethod
    def select(self, candidates: Sequence[str]) -> Selection:
        """Run one interactive session.

        Args:
            candidates: Names in display order; may be empty

        Returns:
            A Selection whose value, when chosen, is one of ``candidates``
        """
        ...


class RichFuzzySelector(Selector):
    """
    Line-oriented fuzzy picker drawn with rich.

    Each line the user enters is handled as follows:

    * empty line: pick the highlighted (top) match, or end with
      NO_SELECTION when nothing matches
    * a number N within the displayed list: pick match N
    * a line starting with QUERY_PREFIX: use the rest as the query, so
      names made of digits can still be searched for
    * anything else: use it as the new fuzzy query and redraw

    Ctrl-C or end of input aborts.
    """

    INDICATOR_STYLE = "bold blue"
    HIGHLIGHT_STYLE = "dark_cyan on grey23"
    TEXT_STYLE = "grey50"
    QUERY_PREFIX = "/"
    HELP_TEXT = (
        "  Enter: open top match  N: open row N  /text: search for text"
        "  Ctrl-C: cancel"
    )

    def __init__(
        self,
        console: Optional[Console] = None,
        prompt: str = ">",
        score_cutoff: float = FUZZY_SCORE_CUTOFF,
        limit: int = FUZZY_LIMIT,
        stream: Optional[TextIO] = None,
    ):
        """
        Initialize the selector.

        Args:
            console: Rich console to draw on; defaults to stderr so the
                picker never mixes with standard output
            prompt: Prompt marker
            score_cutoff: Minimum fuzzy score for a match
            limit: Maximum matches shown
            stream: Read lines from this stream instead of the terminal
        """
        self.console = console or Console(stderr=True)
        self.prompt = prompt
        self.score_cutoff = score_cutoff
        self.limit = limit
        self.stream = stream

    def select(self, candidates: Sequence[str]) -> Selection:
        candidates = list(candidates)
        query = ""
        matches = self._rank(query, candidates)

        while True:
            self._render(query, matches, len(candidates))
            line = self._read_line()

            if line is None:
                logger.debug("Selection aborted")
                return Selection.aborted()

            text = line.strip()
            if not text:
                if not matches:
                    return Selection.no_selection()
                return Selection.chosen(matches[0])

            if text.startswith(self.QUERY_PREFIX):
                query = text[len(self.QUERY_PREFIX) :].strip()
            elif text.isdigit() and 1 <= int(text) <= len(matches):
                return Selection.chosen(matches[int(text) - 1])
            else:
                query = text
            matches = self._rank(query, candidates)

    def _rank(self, query: str, candidates: List[str]) -> List[str]:
        return rank_candidates(query, candidates, self.score_cutoff, self.limit)

    def _read_line(self) -> Optional[str]:
        """Read one line; None means the user cancelled or input ended."""
        try:
            line = self.console.input(f"{self.prompt} ", markup=False, stream=self.stream)
        except (KeyboardInterrupt, EOFError):
            return None

        # A stream returns "" at end of input instead of raising EOFError
        if self.stream is not None and line == "":
            return None
        return line.rstrip("\r\n")

    def _render(self, query: str, matches: List[str], total: int) -> None:
        self.console.print()
        for number, name in enumerate(matches, start=1):
            line = Text()
            if number == 1:
                line.append(">", style=self.INDICATOR_STYLE)
                line.append(f" {number:>2} ")
                line.append(name, style=self.HIGHLIGHT_STYLE)
            else:
                line.append(f"  {number:>2} ")
                line.append(name, style=self.TEXT_STYLE)
            self.console.print(line)

        status = f"  {len(matches)}/{total}"
        if query:
            status += f"  query: {query}"
        self.console.print(Text(status, style="dim"))
        self.console.print(Text(self.HELP_TEXT, style="dim"))
