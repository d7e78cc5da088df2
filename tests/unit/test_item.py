"""Unit tests for the Item entity."""

from __future__ import annotations

import pytest

from item_store.domain.entities import MAX_ITEM_ID, Item


@pytest.mark.unit
class TestItem:
    """Tests for Item construction and wire form."""

    def test_create_item(self) -> None:
        """Valid id and name are accepted."""
        item = Item(id=1, name="a")

        assert item.id == 1
        assert item.name == "a"

    def test_zero_id_allowed(self) -> None:
        """Zero is a valid id."""
        assert Item(id=0, name="").id == 0

    def test_negative_id_rejected(self) -> None:
        """Negative ids raise ValueError."""
        with pytest.raises(ValueError, match="non-negative"):
            Item(id=-1, name="a")

    def test_largest_id_allowed(self) -> None:
        """Ids go up to the 64-bit unsigned maximum."""
        assert Item(id=2**64 - 1, name="a").id == MAX_ITEM_ID

    def test_too_large_id_rejected(self) -> None:
        """Ids above the 64-bit unsigned maximum raise ValueError."""
        with pytest.raises(ValueError, match="at most"):
            Item(id=MAX_ITEM_ID + 1, name="a")

    @pytest.mark.parametrize("bad_id", [True, 1.0, "1", None])
    def test_non_integer_id_rejected(self, bad_id: object) -> None:
        """Only real integers are ids."""
        with pytest.raises(TypeError):
            Item(id=bad_id, name="a")  # type: ignore[arg-type]

    def test_non_string_name_rejected(self) -> None:
        """Names must be strings."""
        with pytest.raises(TypeError):
            Item(id=1, name=5)  # type: ignore[arg-type]

    def test_copy_is_independent(self) -> None:
        """Mutating a copy leaves the original untouched."""
        original = Item(id=1, name="a")
        clone = original.copy()
        clone.name = "b"

        assert original.name == "a"
        assert clone == Item(id=1, name="b")

    def test_to_dict(self) -> None:
        """Wire form has exactly id and name."""
        assert Item(id=7, name="seven").to_dict() == {"id": 7, "name": "seven"}

    def test_from_dict_ignores_extra_keys(self) -> None:
        """Unknown keys are dropped."""
        item = Item.from_dict({"id": 2, "name": "b", "color": "red"})

        assert item == Item(id=2, name="b")

    def test_from_dict_missing_key(self) -> None:
        """Missing fields raise KeyError."""
        with pytest.raises(KeyError):
            Item.from_dict({"id": 2})

    def test_from_dict_not_an_object(self) -> None:
        """Non-object values raise TypeError."""
        with pytest.raises(TypeError):
            Item.from_dict([2, "b"])
