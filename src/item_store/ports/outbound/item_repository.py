"""Item repository port for whole-collection persistence.

This outbound port is deliberately narrow: the store hands the full
collection to ``save`` after each mutation and asks for it back once at
startup via ``load``. An implementation may later persist incrementally
without any change to the store or the request handlers.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Protocol, runtime_checkable

from item_store.domain.entities import Item
from item_store.errors import ItemStoreError


@runtime_checkable
class ItemRepository(Protocol):
    """Protocol for loading and saving the item collection.

    Thread Safety:
        Callers serialize access. The store invokes ``save`` while holding
        its own lock, so implementations need no locking of their own.
    """

    @property
    @abstractmethod
    def degraded(self) -> bool:
        """True if the last ``load`` discarded unreadable persisted data."""
        ...

    @abstractmethod
    def load(self) -> list[Item]:
        """Load the full collection.

        Returns:
            Items in persisted order. Missing or unparseable data yields an
            empty list, never an error.

        Raises:
            PersistenceError: If existing data cannot be read at all.
        """
        ...

    @abstractmethod
    def save(self, items: list[Item]) -> None:
        """Replace the persisted collection with ``items``.

        Args:
            items: The full collection, in order.

        Raises:
            PersistenceError: If the write fails.
        """
        ...


class PersistenceError(ItemStoreError):
    """Raised when the collection cannot be read from or written to storage."""

    pass
