"""Application layer - request handling over the record store.

This module provides the ItemService that the HTTP adapter calls for
every collection operation.
"""

from item_store.application.item_service import ItemService

__all__ = [
    "ItemService",
]
