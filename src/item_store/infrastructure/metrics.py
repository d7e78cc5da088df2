"""Prometheus metrics for the item store."""

from __future__ import annotations

from prometheus_client import (
    Counter,
    Gauge,
    Histogram,
    Info,
    start_http_server,
    REGISTRY,
    CollectorRegistry,
)


class MetricsRegistry:
    """Registry of all item store metrics."""

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        """Initialize metrics registry."""
        self._registry = registry or REGISTRY

        # Operation metrics
        self.operations_total = Counter(
            "item_store_operations_total",
            "Total item operations",
            ["operation", "status"],  # status: ok, not_found, error
            registry=self._registry,
        )

        self.operation_latency_seconds = Histogram(
            "item_store_operation_latency_seconds",
            "Item operation latency in seconds, lock wait included",
            ["operation"],  # create, list, update, delete
            buckets=(0.0005, 0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0),
            registry=self._registry,
        )

        # Persistence metrics
        self.persist_errors_total = Counter(
            "item_store_persist_errors_total",
            "Total failed saves of the collection",
            registry=self._registry,
        )

        self.load_degraded = Gauge(
            "item_store_load_degraded",
            "1 if the persisted file was unreadable at startup and discarded",
            registry=self._registry,
        )

        # Collection metrics
        self.items_total = Gauge(
            "item_store_items",
            "Number of items in the collection",
            registry=self._registry,
        )

        # Server info
        self.info = Info(
            "item_store",
            "Item store information",
            registry=self._registry,
        )


# Global metrics registry
_metrics: MetricsRegistry | None = None


def setup_metrics(port: int = 9108, registry: CollectorRegistry | None = None) -> MetricsRegistry:
    """
    Set up Prometheus metrics server.

    Args:
        port: Port for the metrics HTTP server
        registry: Optional custom registry

    Returns:
        The metrics registry
    """
    metrics = get_metrics() if registry is None else MetricsRegistry(registry)

    from item_store import __version__
    metrics.info.info({
        "version": __version__,
    })

    # Start HTTP server for Prometheus scraping
    start_http_server(port, registry=registry or REGISTRY)

    return metrics


def get_metrics() -> MetricsRegistry:
    """Get the global metrics registry."""
    global _metrics
    if _metrics is None:
        _metrics = MetricsRegistry()
    return _metrics
