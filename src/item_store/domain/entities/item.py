"""Item entity.

An item is the unit record of the collection: a caller-supplied
non-negative integer id that fits in 64 bits and an arbitrary name. Ids are not required to be
unique; the collection keeps duplicates in insertion order.

Wire form (HTTP bodies and the persisted file):
    {"id": 1, "name": "a"}
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

MAX_ITEM_ID = 2**64 - 1


@dataclass
class Item:
    """A single record held by the store.

    Attributes:
        id: Integer id in [0, MAX_ITEM_ID]. Immutable once created by convention;
            only the store's update operation touches ``name``.
        name: Free-form text, no length bound.
    """

    id: int
    name: str

    def __post_init__(self) -> None:
        # bool is an int subclass but never a valid id
        if isinstance(self.id, bool) or not isinstance(self.id, int):
            raise TypeError(f"Item id must be an integer, got {type(self.id).__name__}")
        if self.id < 0:
            raise ValueError(f"Item id must be non-negative, got {self.id}")
        if self.id > MAX_ITEM_ID:
            raise ValueError(f"Item id must be at most {MAX_ITEM_ID}, got {self.id}")
        if not isinstance(self.name, str):
            raise TypeError(f"Item name must be a string, got {type(self.name).__name__}")

    def copy(self) -> Item:
        """Return an independent copy of this item."""
        return Item(id=self.id, name=self.name)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the wire form."""
        return {"id": self.id, "name": self.name}

    @classmethod
    def from_dict(cls, data: Any) -> Item:
        """Build an item from its wire form.

        Unknown keys are ignored.

        Args:
            data: Decoded JSON value, expected to be an object.

        Returns:
            The decoded item.

        Raises:
            TypeError: If data is not a mapping or a field has the wrong type.
            KeyError: If ``id`` or ``name`` is missing.
            ValueError: If ``id`` is negative or above MAX_ITEM_ID.
        """
        if not isinstance(data, dict):
            raise TypeError(f"Item must be a JSON object, got {type(data).__name__}")
        return cls(id=data["id"], name=data["name"])
