"""Prometheus metrics for the todo list service."""

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
    """Registry of all todo list metrics."""

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        """Initialize metrics registry."""
        self._registry = registry or REGISTRY

        # Operation metrics
        self.operations_total = Counter(
            "todo_operations_total",
            "Total list operations",
            ["operation", "status"],  # status: success, error
            registry=self._registry,
        )

        self.rejections_total = Counter(
            "todo_rejections_total",
            "Total rejected operations by error kind",
            ["kind"],
            registry=self._registry,
        )

        # Collection metrics
        self.items = Gauge(
            "todo_items",
            "Number of items in the collection",
            registry=self._registry,
        )

        self.placeholder_present = Gauge(
            "todo_placeholder_present",
            "Whether the collection holds an empty-title placeholder (0 or 1)",
            registry=self._registry,
        )

        # Persistence metrics
        self.persist_latency_seconds = Histogram(
            "todo_persist_latency_seconds",
            "Write-through persist latency in seconds",
            buckets=(0.0001, 0.0005, 0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.5),
            registry=self._registry,
        )

        self.persist_failures_total = Counter(
            "todo_persist_failures_total",
            "Total failed persist attempts",
            registry=self._registry,
        )

        # Service info
        self.info = Info(
            "todo_list",
            "Todo list service information",
            registry=self._registry,
        )

    @property
    def registry(self) -> CollectorRegistry:
        """The collector registry these metrics are registered with."""
        return self._registry


def setup_metrics(port: int = 8001, registry: CollectorRegistry | None = None) -> MetricsRegistry:
    """
    Create the process metrics and start the Prometheus scrape endpoint.

    Args:
        port: Port for the metrics HTTP server
        registry: Optional custom registry

    Returns:
        The metrics registry
    """
    from todo_list import __version__

    metrics = MetricsRegistry(registry)
    metrics.info.info({"version": __version__})

    start_http_server(port, registry=metrics.registry)
    return metrics
