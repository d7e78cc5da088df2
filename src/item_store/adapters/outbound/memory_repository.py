"""In-memory repository adapter.

Implements ItemRepository without touching the filesystem. Used when
persistence is switched off and as a test double.
"""

from __future__ import annotations

from typing import Iterable

from item_store.domain.entities import Item


class InMemoryItemRepository:
    """Memory-backed implementation of ItemRepository.

    Keeps the most recent saved snapshot so it can be handed back by a
    later ``load``.
    """

    def __init__(self, items: Iterable[Item] | None = None) -> None:
        """Initialize the repository.

        Args:
            items: Collection returned by the first load.
        """
        self._items: list[Item] = [item.copy() for item in items or ()]
        self._save_count = 0

    @property
    def degraded(self) -> bool:
        """Always False; memory never holds unparseable data."""
        return False

    @property
    def items(self) -> list[Item]:
        """Copy of the last saved collection."""
        return [item.copy() for item in self._items]

    @property
    def save_count(self) -> int:
        """Number of saves performed."""
        return self._save_count

    def load(self) -> list[Item]:
        """Return the last saved collection."""
        return self.items

    def save(self, items: list[Item]) -> None:
        """Remember a copy of ``items``."""
        self._items = [item.copy() for item in items]
        self._save_count += 1
