"""Outbound ports - interfaces for external dependencies.

Outbound ports define contracts for systems the item store depends on,
currently the durable mirror of the collection.
"""

from item_store.ports.outbound.item_repository import ItemRepository, PersistenceError

__all__ = [
    "ItemRepository",
    "PersistenceError",
]
