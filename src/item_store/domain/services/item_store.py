"""Record store holding the authoritative item collection.

The store keeps items in a plain list and serializes every read and write
through a single exclusive lock. Mutations hand a snapshot of the whole
collection to the injected repository before the lock is released, so a
slow save blocks every other caller. Throughput is traded for a store that
can never be observed half-updated.

Semantics:
    - create appends unconditionally, duplicate ids included
    - update renames the first item with the id
    - delete removes every item with the id
    - no save is issued when update or delete finds nothing

Persistence failures propagate to the caller after the in-memory change
has been applied; there is no rollback.
"""

from __future__ import annotations

import threading
from typing import Iterable

from item_store.domain.entities import Item
from item_store.ports.outbound import ItemRepository


class ItemStore:
    """Thread-safe ordered collection of items.

    Attributes:
        repository: Persistence target for mutations, or None to keep the
            collection in memory only.
    """

    def __init__(
        self,
        items: Iterable[Item] | None = None,
        repository: ItemRepository | None = None,
    ) -> None:
        """Initialize the store.

        Args:
            items: Initial collection, usually the result of ``repository.load()``.
            repository: Where to save the collection after each mutation.
        """
        self._items: list[Item] = [item.copy() for item in items or ()]
        self._repository = repository
        self._lock = threading.Lock()

    @classmethod
    def open(cls, repository: ItemRepository) -> ItemStore:
        """Create a store seeded from ``repository`` and persisting to it."""
        return cls(items=repository.load(), repository=repository)

    @property
    def repository(self) -> ItemRepository | None:
        """Repository receiving saves, if any."""
        return self._repository

    def create(self, item: Item) -> Item:
        """Append an item to the end of the collection.

        Args:
            item: Item to add. The store keeps its own copy.

        Returns:
            A copy of the stored item.

        Raises:
            PersistenceError: If saving fails. The item stays appended.
        """
        stored = item.copy()
        with self._lock:
            self._items.append(stored)
            self._persist()
            return stored.copy()

    def list(self) -> list[Item]:
        """Return a snapshot of the collection in current order."""
        with self._lock:
            return self._snapshot()

    def update(self, item_id: int, name: str) -> Item | None:
        """Rename the first item whose id matches.

        Args:
            item_id: Id to look for.
            name: Replacement name.

        Returns:
            Copy of the updated item, or None if no item has the id.

        Raises:
            PersistenceError: If saving fails. The rename stays applied.
        """
        with self._lock:
            for item in self._items:
                if item.id == item_id:
                    item.name = name
                    self._persist()
                    return item.copy()
            return None

    def delete(self, item_id: int) -> int:
        """Remove every item whose id matches.

        Args:
            item_id: Id to remove.

        Returns:
            Number of items removed; 0 means nothing matched.

        Raises:
            PersistenceError: If saving fails. The removal stays applied.
        """
        with self._lock:
            remaining = [item for item in self._items if item.id != item_id]
            removed = len(self._items) - len(remaining)
            if removed == 0:
                return 0
            self._items = remaining
            self._persist()
            return removed

    def count(self) -> int:
        """Number of items currently held."""
        with self._lock:
            return len(self._items)

    def __len__(self) -> int:
        return self.count()

    def _snapshot(self) -> list[Item]:
        # Caller holds the lock
        return [item.copy() for item in self._items]

    def _persist(self) -> None:
        # Caller holds the lock
        if self._repository is not None:
            self._repository.save(self._snapshot())
