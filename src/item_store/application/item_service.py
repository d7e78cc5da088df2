"""ItemService application service.

Wraps the record store with the request-level concerns: misses become
ItemNotFoundError, every call is timed, counted and traced, and
persistence failures are logged before they propagate.

Usage:
    from item_store.adapters.outbound import JsonFileItemRepository
    from item_store.application import ItemService

    service = ItemService.open(JsonFileItemRepository("items.json"))
    service.create(Item(id=1, name="a"))
    service.update(1, "b")
    service.delete(1)
"""

from __future__ import annotations

import time
from contextlib import contextmanager
from typing import Generator

from item_store.domain.entities import Item
from item_store.domain.services import ItemStore
from item_store.infrastructure.logging import get_logger
from item_store.infrastructure.metrics import MetricsRegistry, get_metrics
from item_store.infrastructure.tracing import item_span, record_outcome
from item_store.ports.inbound import ItemNotFoundError, ItemServiceStats
from item_store.ports.outbound import ItemRepository, PersistenceError

logger = get_logger(__name__)


class ItemService:
    """Main application service for the item collection.

    Implements ItemServicePort.
    """

    def __init__(
        self,
        store: ItemStore,
        metrics: MetricsRegistry | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            store: Record store holding the collection.
            metrics: Metrics registry (defaults to the global one).
        """
        self._store = store
        self._metrics = metrics or get_metrics()
        self._metrics.items_total.set(store.count())
        self._metrics.load_degraded.set(1 if self.load_degraded else 0)

    @classmethod
    def open(
        cls,
        repository: ItemRepository,
        metrics: MetricsRegistry | None = None,
    ) -> ItemService:
        """Load the collection from ``repository`` and build a service on it.

        Raises:
            PersistenceError: If the persisted collection cannot be read.
        """
        store = ItemStore.open(repository)
        logger.info(
            "items_loaded",
            count=store.count(),
            degraded=repository.degraded,
        )
        return cls(store, metrics=metrics)

    @property
    def store(self) -> ItemStore:
        """Underlying record store."""
        return self._store

    @property
    def load_degraded(self) -> bool:
        """True if startup discarded an unreadable persisted collection."""
        repository = self._store.repository
        return repository is not None and repository.degraded

    def create(self, item: Item) -> Item:
        """Append an item, duplicates included."""
        with self._operation("create", item_id=item.id):
            created = self._store.create(item)
        logger.info("item_created", item_id=created.id)
        return created

    def list(self) -> list[Item]:
        """Return all items in insertion order."""
        with self._operation("list"):
            return self._store.list()

    def update(self, item_id: int, name: str) -> Item:
        """Rename the first item with ``item_id``.

        Raises:
            ItemNotFoundError: If no item has that id.
        """
        with self._operation("update", item_id=item_id):
            updated = self._store.update(item_id, name)
            if updated is None:
                raise ItemNotFoundError(item_id)
        logger.info("item_updated", item_id=item_id)
        return updated

    def delete(self, item_id: int) -> int:
        """Remove every item with ``item_id``.

        Raises:
            ItemNotFoundError: If no item has that id.
        """
        with self._operation("delete", item_id=item_id):
            removed = self._store.delete(item_id)
            if removed == 0:
                raise ItemNotFoundError(item_id)
        logger.info("item_deleted", item_id=item_id, removed=removed)
        return removed

    def stats(self) -> ItemServiceStats:
        """Return current statistics."""
        return ItemServiceStats(
            item_count=self._store.count(),
            load_degraded=self.load_degraded,
        )

    @contextmanager
    def _operation(self, name: str, item_id: int | None = None) -> Generator[None, None, None]:
        start = time.perf_counter()
        status = "ok"
        with item_span(name, item_id) as span:
            try:
                yield
            except ItemNotFoundError:
                status = "not_found"
                logger.info("item_not_found", operation=name, item_id=item_id)
                raise
            except PersistenceError:
                status = "error"
                self._metrics.persist_errors_total.inc()
                logger.exception("item_persist_failed", operation=name, item_id=item_id)
                raise
            finally:
                self._metrics.operation_latency_seconds.labels(operation=name).observe(
                    time.perf_counter() - start
                )
                self._metrics.operations_total.labels(operation=name, status=status).inc()
                count = self._store.count()
                self._metrics.items_total.set(count)
                record_outcome(span, status, count)
