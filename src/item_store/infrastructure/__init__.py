"""Infrastructure layer - cross-cutting concerns."""

from item_store.infrastructure.config import Config, get_config
from item_store.infrastructure.logging import setup_logging, get_logger
from item_store.infrastructure.metrics import setup_metrics, get_metrics, MetricsRegistry
from item_store.infrastructure.tracing import setup_tracing, get_tracer, item_span

__all__ = [
    "Config",
    "get_config",
    "setup_logging",
    "get_logger",
    "setup_metrics",
    "get_metrics",
    "MetricsRegistry",
    "setup_tracing",
    "get_tracer",
    "item_span",
]
