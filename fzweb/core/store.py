"""
Bookmark store.

The store keeps an ordered list of entries with unique names and persists
it as a single JSON document of the form::

    {"websites": [{"name": "...", "url": "..."}, ...]}

Every successful add or remove rewrites the whole file.
"""

import json
import logging
import shutil
from datetime import datetime
from pathlib import Path
from typing import Iterator, List, Optional

from pydantic import BaseModel, ValidationError

from fzweb.config.paths import PathProvider, default_store_path
from fzweb.core.data_models import Entry, LoadStatus, Outcome
from fzweb.utils.error_handler import StoreReadError, StoreWriteError

logger = logging.getLogger(__name__)


class WebsiteRecord(BaseModel):
    """Schema of one persisted entry."""

    name: str
    url: str


class StoreDocument(BaseModel):
    """Schema of the persisted store file."""

    websites: List[WebsiteRecord]


class Store:
    """
    Ordered collection of bookmark entries backed by a JSON file.

    Use Store.load() to build one; the constructor does not touch the
    filesystem.
    """

    def __init__(
        self,
        path_provider: PathProvider = default_store_path,
        entries: Optional[List[Entry]] = None,
        load_status: LoadStatus = LoadStatus.MISSING,
        backup_unreadable: bool = True,
    ):
        self._path_provider = path_provider
        self._entries: List[Entry] = list(entries or [])
        self.load_status = load_status
        self.backup_unreadable = backup_unreadable
        self.backup_path: Optional[Path] = None

    @property
    def path(self) -> Path:
        """Location of the store file."""
        return self._path_provider()

    @classmethod
    def load(
        cls,
        path_provider: PathProvider = default_store_path,
        backup_unreadable: bool = True,
    ) -> "Store":
        """
        Load the store from disk.

        A missing file gives an empty store with LoadStatus.MISSING. A file
        that exists but does not parse as the expected schema gives an empty
        store with LoadStatus.UNREADABLE; its content is lost on the next
        save unless backup_unreadable is set.

        A file that exists but cannot be read raises StoreReadError and is
        left untouched.

        Args:
            path_provider: Callable returning the store file path
            backup_unreadable: Copy an unreadable file aside before the
                first save overwrites it

        Returns:
            Loaded Store

        Raises:
            StoreReadError: If the file exists but reading it fails
        """
        path = path_provider()

        if not path.exists():
            logger.info(f"No store file at {path}, starting empty")
            return cls(path_provider, [], LoadStatus.MISSING, backup_unreadable)

        try:
            raw = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            return cls._unreadable(path_provider, path, e, backup_unreadable)
        except OSError as e:
            raise StoreReadError(path, e.strerror or str(e)) from e

        try:
            document = StoreDocument.model_validate_json(raw)
        except ValidationError as e:
            return cls._unreadable(path_provider, path, e, backup_unreadable)

        entries = cls._dedupe(
            [Entry(name=record.name, url=record.url) for record in document.websites]
        )
        logger.info(f"Loaded {len(entries)} entries from {path}")
        return cls(path_provider, entries, LoadStatus.LOADED, backup_unreadable)

    @classmethod
    def _unreadable(
        cls,
        path_provider: PathProvider,
        path: Path,
        error: Exception,
        backup_unreadable: bool,
    ) -> "Store":
        """Fallback branch for a present but unparsable store file."""
        logger.warning(f"Store file {path} is unreadable, treating as empty: {error}")
        return cls(path_provider, [], LoadStatus.UNREADABLE, backup_unreadable)

    @staticmethod
    def _dedupe(entries: List[Entry]) -> List[Entry]:
        """Keep the first entry for each name."""
        seen = set()
        unique = []
        for entry in entries:
            if entry.name in seen:
                logger.warning(f"Dropping duplicate entry '{entry.name}' from store file")
                continue
            seen.add(entry.name)
            unique.append(entry)
        return unique

    def serialize(self) -> str:
        """Render the store as pretty-printed JSON, name before url."""
        document = {"websites": [entry.to_dict() for entry in self._entries]}
        return json.dumps(document, indent=2, ensure_ascii=False)

    def save(self) -> None:
        """
        Write the full entry list to the store file.

        The parent directory is created if needed. Content goes to a sibling
        temporary file first and is renamed over the target, so the file is
        always fully replaced.

        Raises:
            StoreWriteError: If the directory or the file cannot be written
        """
        path = self.path

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StoreWriteError(path.parent, e.strerror or str(e)) from e

        if self.load_status == LoadStatus.UNREADABLE and self.backup_path is None:
            self._backup_unreadable_file(path)

        temp_file = path.with_name(path.name + ".tmp")
        try:
            temp_file.write_text(self.serialize(), encoding="utf-8")
            temp_file.replace(path)
        except OSError as e:
            temp_file.unlink(missing_ok=True)
            raise StoreWriteError(path, e.strerror or str(e)) from e

        logger.debug(f"Saved {len(self._entries)} entries to {path}")

    def _backup_unreadable_file(self, path: Path) -> None:
        if not self.backup_unreadable or not path.exists():
            return

        timestamp = datetime.now().strftime("%Y%m%d-%H%M%S")
        backup = path.with_name(f"{path.name}.corrupt-{timestamp}")
        try:
            shutil.copy2(path, backup)
        except OSError as e:
            raise StoreWriteError(backup, e.strerror or str(e)) from e

        self.backup_path = backup
        logger.warning(f"Unreadable store file backed up to {backup}")

    def add(self, name: str, url: str) -> Outcome:
        """
        Append a new entry and save.

        Returns:
            Outcome.DUPLICATE without saving when the name exists,
            Outcome.SUCCESS otherwise
        """
        if self.find_by_name(name) is not None:
            logger.info(f"Not adding '{name}': name already exists")
            return Outcome.DUPLICATE

        self._entries.append(Entry(name=name, url=url))
        self.save()
        logger.info(f"Added '{name}' -> {url}")
        return Outcome.SUCCESS

    def remove(self, name: str) -> Outcome:
        """
        Remove the entry with this exact name and save.

        Returns:
            Outcome.NOT_FOUND without saving when nothing matched,
            Outcome.SUCCESS otherwise
        """
        remaining = [entry for entry in self._entries if entry.name != name]
        if len(remaining) == len(self._entries):
            logger.info(f"Not removing '{name}': no such entry")
            return Outcome.NOT_FOUND

        self._entries = remaining
        self.save()
        logger.info(f"Removed '{name}'")
        return Outcome.SUCCESS

    def list(self) -> Iterator[Entry]:
        """Iterate over entries in insertion order. Single pass."""
        return iter(list(self._entries))

    def candidate_names(self) -> List[str]:
        return [entry.name for entry in self._entries]

    def find_by_name(self, name: str) -> Optional[Entry]:
        for entry in self._entries:
            if entry.name == name:
                return entry
        return None

    def is_empty(self) -> bool:
        return not self._entries

    def __len__(self) -> int:
        return len(self._entries)
