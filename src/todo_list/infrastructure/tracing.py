"""OpenTelemetry tracing configuration.

Two span helpers are used across the project: ``trace_span`` for plain
spans such as a storage write, and ``trace_operation`` for list commands,
which records the rejection kind of a ``TodoError`` on the span before
re-raising it.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Generator

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter
from opentelemetry.trace import Status, StatusCode

from todo_list.ports.inbound.todo_list import TodoError

_TRACER_NAME = "todo_list"

_tracer: trace.Tracer | None = None


def setup_tracing(
    service_name: str = "todo_list",
    otlp_endpoint: str | None = None,
    console_export: bool = False,
) -> trace.Tracer:
    """
    Install a tracer provider for this process.

    Without an endpoint and without console export, spans are still
    created (so code paths are identical) but never leave the process.

    Args:
        service_name: ``service.name`` resource attribute
        otlp_endpoint: OTLP gRPC collector endpoint (e.g. "http://localhost:4317")
        console_export: Also print finished spans to stdout

    Returns:
        The tracer used by ``trace_span`` and ``trace_operation``
    """
    global _tracer

    from todo_list import __version__

    provider = TracerProvider(
        resource=Resource.create({"service.name": service_name, "service.version": __version__})
    )
    if otlp_endpoint:
        provider.add_span_processor(
            BatchSpanProcessor(OTLPSpanExporter(endpoint=otlp_endpoint, insecure=True))
        )
    if console_export:
        provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))

    trace.set_tracer_provider(provider)
    _tracer = trace.get_tracer(_TRACER_NAME)
    return _tracer


def get_tracer() -> trace.Tracer:
    """Get the tracer, falling back to the global (no-op by default) provider."""
    global _tracer
    if _tracer is None:
        _tracer = trace.get_tracer(_TRACER_NAME)
    return _tracer


@contextmanager
def trace_span(
    name: str,
    attributes: dict[str, Any] | None = None,
) -> Generator[trace.Span, None, None]:
    """Run the body inside a span named ``name``."""
    with get_tracer().start_as_current_span(name, attributes=attributes) as span:
        yield span


@contextmanager
def trace_operation(operation: str, **attributes: Any) -> Generator[trace.Span, None, None]:
    """
    Run a list command inside a ``todo.<operation>`` span.

    A ``TodoError`` raised by the body marks the span as failed and sets
    ``todo.error_kind``; the exception is re-raised unchanged.
    """
    span_attributes = {"todo.operation": operation}
    span_attributes.update({f"todo.{key}": value for key, value in attributes.items()})

    with get_tracer().start_as_current_span(
        f"todo.{operation}",
        attributes=span_attributes,
        record_exception=False,
        set_status_on_exception=False,
    ) as span:
        try:
            yield span
        except TodoError as e:
            span.set_attribute("todo.error_kind", e.kind.value)
            span.set_status(Status(StatusCode.ERROR, e.message))
            raise
