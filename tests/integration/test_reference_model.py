"""Replay random operation sequences against a reference model.

The reference model is a plain list with the same first-match update and
all-match delete rules. After each sequence the service listing, the
persisted file and a freshly loaded store must all equal the model.
"""

from __future__ import annotations

import random
from pathlib import Path

import pytest
from prometheus_client import CollectorRegistry

from item_store.adapters.outbound import JsonFileItemRepository
from item_store.application import ItemService
from item_store.domain.entities import Item
from item_store.infrastructure.metrics import MetricsRegistry
from item_store.ports.inbound import ItemNotFoundError


class ReferenceModel:
    """Plain-list model of the collection semantics."""

    def __init__(self) -> None:
        self.items: list[tuple[int, str]] = []

    def create(self, item_id: int, name: str) -> None:
        self.items.append((item_id, name))

    def update(self, item_id: int, name: str) -> bool:
        for index, (existing_id, _) in enumerate(self.items):
            if existing_id == item_id:
                self.items[index] = (item_id, name)
                return True
        return False

    def delete(self, item_id: int) -> int:
        before = len(self.items)
        self.items = [entry for entry in self.items if entry[0] != item_id]
        return before - len(self.items)


def new_service(data_file: Path) -> ItemService:
    metrics = MetricsRegistry(registry=CollectorRegistry())
    return ItemService.open(JsonFileItemRepository(data_file), metrics=metrics)


@pytest.mark.integration
@pytest.mark.parametrize("seed", range(10))
def test_random_sequences_match_model(seed: int, data_file: Path) -> None:
    """Service, file and reloaded store all agree with the model."""
    rng = random.Random(seed)
    service = new_service(data_file)
    model = ReferenceModel()

    for step in range(150):
        # Small id space so duplicates and misses are common
        item_id = rng.randrange(6)
        name = f"n{step}"
        op = rng.choice(["create", "create", "update", "delete"])

        if op == "create":
            service.create(Item(id=item_id, name=name))
            model.create(item_id, name)
        elif op == "update":
            expected = model.update(item_id, name)
            if expected:
                assert service.update(item_id, name) == Item(id=item_id, name=name)
            else:
                with pytest.raises(ItemNotFoundError):
                    service.update(item_id, name)
        else:
            expected_removed = model.delete(item_id)
            if expected_removed:
                assert service.delete(item_id) == expected_removed
            else:
                with pytest.raises(ItemNotFoundError):
                    service.delete(item_id)

        assert [(item.id, item.name) for item in service.list()] == model.items

    reloaded = new_service(data_file)
    assert [(item.id, item.name) for item in reloaded.list()] == model.items
    assert reloaded.load_degraded is False
