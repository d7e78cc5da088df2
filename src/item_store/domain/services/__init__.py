"""Domain services for the item store."""

from item_store.domain.services.item_store import ItemStore
from item_store.domain.services.system_clock import current_local_time

__all__ = [
    "ItemStore",
    "current_local_time",
]
