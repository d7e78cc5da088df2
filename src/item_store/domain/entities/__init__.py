"""Domain entities for the item store."""

from item_store.domain.entities.item import MAX_ITEM_ID, Item

__all__ = ["Item", "MAX_ITEM_ID"]
