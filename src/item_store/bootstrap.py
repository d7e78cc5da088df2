"""Service bootstrap.

Wires configuration, persistence, metrics and the item service together
and binds the HTTP listener. Everything here is glue; the behavior lives
in the application and domain layers.

Usage:
    item-store                      # console script
    python -m item_store            # same thing
    ITEM_STORE_STORAGE__DATA_FILE=/tmp/items.json item-store
"""

from __future__ import annotations

from dataclasses import dataclass

from item_store.adapters.inbound.rest_api import run_server
from item_store.adapters.outbound import InMemoryItemRepository, JsonFileItemRepository
from item_store.application import ItemService
from item_store.infrastructure.config import Config, get_config
from item_store.infrastructure.logging import get_logger, setup_logging
from item_store.infrastructure.metrics import MetricsRegistry, get_metrics, setup_metrics
from item_store.infrastructure.tracing import setup_tracing
from item_store.ports.outbound import ItemRepository

logger = get_logger(__name__)


@dataclass
class ServiceGraph:
    """The objects one running item store is made of."""

    config: Config
    repository: ItemRepository
    metrics: MetricsRegistry
    service: ItemService


def create_repository(config: Config) -> ItemRepository:
    """Pick the repository selected by ``storage.persist``."""
    if config.storage.persist:
        return JsonFileItemRepository(config.storage.data_file, fsync=config.storage.fsync)
    return InMemoryItemRepository()


def build_service_graph(
    config: Config,
    metrics: MetricsRegistry | None = None,
) -> ServiceGraph:
    """Build the repository and load the collection into a service.

    Args:
        config: Configuration to build from.
        metrics: Metrics registry (defaults to the global one).

    Raises:
        PersistenceError: If the persisted collection exists but cannot be read.
    """
    metrics = metrics or get_metrics()
    repository = create_repository(config)
    service = ItemService.open(repository, metrics=metrics)

    logger.info(
        "item_store_initialized",
        persist=config.storage.persist,
        data_file=str(config.storage.data_file),
        item_count=service.stats().item_count,
        load_degraded=service.load_degraded,
    )
    return ServiceGraph(config=config, repository=repository, metrics=metrics, service=service)


def main() -> None:
    """Start the item store HTTP service from environment configuration."""
    config = get_config()
    observability = config.observability

    setup_logging(
        level=observability.log_level,
        log_format=observability.log_format,
        access_log=observability.access_log,
    )
    setup_tracing(
        service_name=observability.otel_service_name,
        otlp_endpoint=observability.otel_endpoint,
        console_export=observability.console_traces,
        environment=observability.environment,
    )
    if observability.metrics_enabled:
        setup_metrics(port=observability.metrics_port)

    graph = build_service_graph(config)
    if graph.service.load_degraded:
        logger.warning("item_store_started_empty", data_file=str(config.storage.data_file))

    run_server(
        graph.service,
        host=config.server.host,
        port=config.server.port,
        api_config=config.api,
    )
