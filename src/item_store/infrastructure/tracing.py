"""OpenTelemetry tracing for item operations.

Each ItemService call runs inside one ``item.<operation>`` span carrying the
operation name, the target id when there is one, and the outcome:

    item.operation = "update"
    item.id        = "42"
    item.outcome   = "ok" | "not_found" | "error"

Only ``error`` (a failed save) marks the span status as ERROR; a miss is an
ordinary outcome for a lookup by id.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter
from opentelemetry.trace import Status, StatusCode

from item_store import __version__

TRACER_NAME = "item_store"

ATTR_OPERATION = "item.operation"
ATTR_ITEM_ID = "item.id"
ATTR_OUTCOME = "item.outcome"
ATTR_ITEM_COUNT = "item.count"

_tracer: trace.Tracer | None = None


def build_resource(service_name: str, environment: str) -> Resource:
    """Resource attributes attached to every exported span."""
    return Resource.create(
        {
            "service.name": service_name,
            "service.version": __version__,
            "deployment.environment": environment,
        }
    )


def setup_tracing(
    service_name: str = "item_store",
    otlp_endpoint: str | None = None,
    console_export: bool = False,
    environment: str = "development",
) -> trace.Tracer:
    """Install the global tracer provider.

    With neither an endpoint nor console export the provider records spans
    and drops them.

    Args:
        service_name: ``service.name`` resource attribute.
        otlp_endpoint: OTLP gRPC collector, e.g. ``http://localhost:4317``.
        console_export: Also print finished spans to stdout.
        environment: ``deployment.environment`` resource attribute.
    """
    global _tracer

    provider = TracerProvider(resource=build_resource(service_name, environment))
    if otlp_endpoint:
        provider.add_span_processor(
            BatchSpanProcessor(OTLPSpanExporter(endpoint=otlp_endpoint, insecure=True))
        )
    if console_export:
        provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))

    trace.set_tracer_provider(provider)
    _tracer = trace.get_tracer(TRACER_NAME, __version__)
    return _tracer


def get_tracer() -> trace.Tracer:
    """Tracer installed by setup_tracing, else one from the global provider."""
    global _tracer
    if _tracer is None:
        _tracer = trace.get_tracer(TRACER_NAME, __version__)
    return _tracer


@contextmanager
def item_span(operation: str, item_id: int | None = None) -> Iterator[trace.Span]:
    """Open the span for one item operation.

    Ids are recorded as strings: span attributes are signed 64-bit and item
    ids go up to 2**64 - 1.
    """
    attributes: dict[str, str] = {ATTR_OPERATION: operation}
    if item_id is not None:
        attributes[ATTR_ITEM_ID] = str(item_id)

    with get_tracer().start_as_current_span(
        f"item.{operation}",
        attributes=attributes,
        set_status_on_exception=False,
    ) as span:
        yield span


def record_outcome(span: trace.Span, outcome: str, item_count: int) -> None:
    """Tag a finished item operation with its outcome and the collection size."""
    span.set_attribute(ATTR_OUTCOME, outcome)
    span.set_attribute(ATTR_ITEM_COUNT, item_count)
    if outcome == "error":
        span.set_status(Status(StatusCode.ERROR, "persist failed"))
