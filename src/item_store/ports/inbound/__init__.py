"""Inbound ports - API contracts for the item store.

Inbound ports define the interfaces that the HTTP adapter (or any other
caller) uses to create, list, update and delete items.
"""

from item_store.ports.inbound.item_service import (
    ItemNotFoundError,
    ItemServicePort,
    ItemServiceStats,
)

__all__ = [
    "ItemNotFoundError",
    "ItemServicePort",
    "ItemServiceStats",
]
