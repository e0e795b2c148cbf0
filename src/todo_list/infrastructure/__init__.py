"""Infrastructure layer - cross-cutting concerns."""

from todo_list.infrastructure.config import Config, get_config
from todo_list.infrastructure.container import Container, get_container, reset_container
from todo_list.infrastructure.logging import (
    bind_request_context,
    clear_request_context,
    get_logger,
    setup_logging,
)
from todo_list.infrastructure.metrics import setup_metrics, MetricsRegistry
from todo_list.infrastructure.tracing import (
    get_tracer,
    setup_tracing,
    trace_operation,
    trace_span,
)

__all__ = [
    "Config",
    "get_config",
    "Container",
    "get_container",
    "reset_container",
    "setup_logging",
    "get_logger",
    "bind_request_context",
    "clear_request_context",
    "setup_metrics",
    "MetricsRegistry",
    "setup_tracing",
    "get_tracer",
    "trace_span",
    "trace_operation",
]
