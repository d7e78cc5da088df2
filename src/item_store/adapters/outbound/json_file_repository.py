"""JSON file repository adapter.

Implements ItemRepository on a single flat file holding the whole
collection as one JSON array:

    [{"id":1,"name":"a"},{"id":2,"name":"b"}]

Every save truncates the file and writes the full array again. There is no
atomic rename and no backup, so a crash in the middle of a save can leave
the file truncated or partially written.

A missing file loads as an empty collection. A file that exists but does
not parse loads as an empty collection too; the repository logs a warning
and reports ``degraded`` so callers can tell this apart from a genuinely
empty store. The bad file stays on disk until the next save replaces it.

Usage:
    repo = JsonFileItemRepository("items.json")
    items = repo.load()
    repo.save(items + [Item(id=3, name="c")])
"""

from __future__ import annotations

import json
import os
from pathlib import Path

from item_store.domain.entities import Item
from item_store.infrastructure.logging import get_logger
from item_store.ports.outbound import PersistenceError

logger = get_logger(__name__)


class JsonFileItemRepository:
    """File-based implementation of ItemRepository.

    Attributes:
        path: Location of the JSON file.
    """

    def __init__(self, path: str | Path, fsync: bool = False) -> None:
        """Initialize the repository.

        Args:
            path: File to read and rewrite. Parent directories are created
                on the first save.
            fsync: If True, fsync the file after each save.
        """
        self._path = Path(path)
        self._fsync = fsync
        self._degraded = False

    @property
    def path(self) -> Path:
        """Location of the JSON file."""
        return self._path

    @property
    def degraded(self) -> bool:
        """True if the last load discarded an unparseable file."""
        return self._degraded

    def load(self) -> list[Item]:
        """Load the collection from disk.

        Returns:
            Items in file order, or an empty list if the file is missing or
            cannot be parsed.

        Raises:
            PersistenceError: If the file exists but cannot be read.
        """
        self._degraded = False
        if not self._path.exists():
            return []

        try:
            raw = self._path.read_bytes()
        except OSError as e:
            raise PersistenceError(f"Unable to read {self._path}: {e}") from e

        try:
            return decode_items(raw)
        except (ValueError, TypeError, KeyError, RecursionError) as e:
            self._degraded = True
            logger.warning(
                "item_file_corrupt",
                path=str(self._path),
                error=str(e),
                size_bytes=len(raw),
            )
            return []

    def save(self, items: list[Item]) -> None:
        """Overwrite the file with the full collection.

        Args:
            items: The full collection, in order.

        Raises:
            PersistenceError: If the file cannot be written.
        """
        data = encode_items(items)
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with open(self._path, "wb") as f:
                f.write(data)
                if self._fsync:
                    f.flush()
                    os.fsync(f.fileno())
        except OSError as e:
            raise PersistenceError(f"Unable to write {self._path}: {e}") from e


def encode_items(items: list[Item]) -> bytes:
    """Serialize items to the compact JSON array stored on disk."""
    payload = [item.to_dict() for item in items]
    return json.dumps(payload, ensure_ascii=False, separators=(",", ":")).encode("utf-8")


def decode_items(raw: bytes) -> list[Item]:
    """Parse the on-disk JSON array.

    Raises:
        ValueError: On invalid UTF-8, invalid JSON or an id out of range.
        TypeError: If the document is not an array of objects with an
            integer id and a string name.
        KeyError: If an object lacks ``id`` or ``name``.
        RecursionError: If the document nests deeper than the parser allows.
    """
    document = json.loads(raw.decode("utf-8"))
    if not isinstance(document, list):
        raise TypeError(f"Expected a JSON array, got {type(document).__name__}")
    return [Item.from_dict(entry) for entry in document]
