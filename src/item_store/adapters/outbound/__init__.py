"""Outbound adapters - implementations for external dependencies.

Outbound adapters implement the item repository port on top of the
local filesystem or plain memory.
"""

from item_store.adapters.outbound.json_file_repository import JsonFileItemRepository
from item_store.adapters.outbound.memory_repository import InMemoryItemRepository

__all__ = ["JsonFileItemRepository", "InMemoryItemRepository"]
