"""Item service port.

The four collection operations exposed at the system boundary. Each maps
directly onto one store call; mutations additionally persist the collection
before returning.
"""

from __future__ import annotations

from abc import abstractmethod
from dataclasses import dataclass
from typing import Protocol

from item_store.domain.entities import Item
from item_store.errors import ItemStoreError


@dataclass
class ItemServiceStats:
    """Statistics for health reporting."""

    item_count: int
    load_degraded: bool


class ItemServicePort(Protocol):
    """Protocol for item collection operations.

    Thread Safety:
        All methods must be thread-safe. Readers observe either the state
        before or after a mutation, never an intermediate one.

    Example:
        service.create(Item(id=1, name="a"))
        service.update(1, "b")
        service.delete(1)
        service.delete(1)  # raises ItemNotFoundError
    """

    @abstractmethod
    def create(self, item: Item) -> Item:
        """Append an item. Duplicate ids are accepted.

        Raises:
            PersistenceError: If the collection could not be saved.
        """
        ...

    @abstractmethod
    def list(self) -> list[Item]:
        """Return a snapshot of all items in insertion order."""
        ...

    @abstractmethod
    def update(self, item_id: int, name: str) -> Item:
        """Rename the first item with ``item_id``.

        Raises:
            ItemNotFoundError: If no item has that id.
            PersistenceError: If the collection could not be saved.
        """
        ...

    @abstractmethod
    def delete(self, item_id: int) -> int:
        """Remove every item with ``item_id``.

        Returns:
            Number of items removed (at least one).

        Raises:
            ItemNotFoundError: If no item has that id.
            PersistenceError: If the collection could not be saved.
        """
        ...

    @abstractmethod
    def stats(self) -> ItemServiceStats:
        """Return current statistics."""
        ...


class ItemNotFoundError(ItemStoreError):
    """Raised when no item matches the requested id."""

    def __init__(self, item_id: int) -> None:
        self.item_id = item_id
        super().__init__(f"Item {item_id} not found")
