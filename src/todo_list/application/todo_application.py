"""Todo Application - entry point for the presentation layer.

This module composes storage, the list service and metrics, and exposes
command methods that never raise for expected failures. Each command
returns a ``CommandResult`` carrying the post-command snapshot, so a UI
can re-render unconditionally and branch on ``error_kind``.

It also keeps the alternating sort direction of the list view: sorting
flips it, and a successful add or edit resets it to ascending.

Usage:
    from todo_list.application import TodoApplication

    app = TodoApplication.from_config()
    result = app.add_todo()
    if not result.success:
        show_error(result.message)
    render(result.todos)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, TypeVar

from todo_list.adapters.outbound.json_file_storage import JsonFileTodoStorage
from todo_list.adapters.outbound.memory_storage import InMemoryTodoStorage
from todo_list.domain.entities.todo import Todo
from todo_list.domain.services.todo_service import TodoService
from todo_list.domain.value_objects.identifiers import FIRST_TODO_ID, TodoId
from todo_list.infrastructure.config import Config, get_config
from todo_list.infrastructure.container import Container, get_container
from todo_list.infrastructure.logging import get_logger
from todo_list.infrastructure.metrics import MetricsRegistry
from todo_list.infrastructure.tracing import trace_operation
from todo_list.ports.inbound.todo_list import ErrorKind, TodoError
from todo_list.ports.outbound.todo_storage import TodoStorage

logger = get_logger(__name__)

T = TypeVar("T")


@dataclass
class CommandResult:
    """Outcome of an application command."""

    success: bool
    todos: list[Todo] = field(default_factory=list)
    item: Todo | None = None
    error_kind: ErrorKind | None = None
    message: str = ""


def build_storage(config: Config) -> TodoStorage:
    """Create the storage adapter selected by configuration."""
    storage_config = config.storage
    if storage_config.backend == "memory":
        return InMemoryTodoStorage(key=storage_config.key)
    return JsonFileTodoStorage(
        storage_config.path.expanduser(),
        key=storage_config.key,
        fsync=storage_config.fsync,
    )


def default_seed(config: Config) -> list[Todo]:
    """Seed for empty storage: one placeholder item, unless disabled."""
    if config.collection.seed_placeholder:
        return [Todo(id=FIRST_TODO_ID, title="")]
    return []


class TodoApplication:
    """Presentation-facing facade over the list service.

    Attributes:
        service: The underlying list service.
        sort_ascending: Direction the next toggled sort will use.
    """

    def __init__(
        self,
        service: TodoService,
        metrics: MetricsRegistry | None = None,
    ) -> None:
        self._service = service
        self._metrics = metrics
        self._sort_ascending = True

    @classmethod
    def from_config(
        cls,
        config: Config | None = None,
        container: Container | None = None,
        metrics: MetricsRegistry | None = None,
    ) -> TodoApplication:
        """Compose the application from configuration.

        The storage adapter and service are registered in the container,
        so callers that already registered a ``TodoStorage`` (e.g. tests)
        get it wired in instead of the configured backend.

        Args:
            config: Configuration (default: global config).
            container: DI container (default: global container).
            metrics: Optional metrics registry.
        """
        config = config or get_config()
        container = container or get_container()

        if not container.has(TodoStorage):
            container.register_factory(TodoStorage, lambda _: build_storage(config))
        if not container.has(TodoService):
            container.register_factory(
                TodoService,
                lambda c: TodoService(
                    c.resolve(TodoStorage),
                    seed=default_seed(config),
                    metrics=metrics,
                ),
            )

        application = cls(container.resolve(TodoService), metrics=metrics)
        logger.info(
            "todo_application_initialized",
            backend=config.storage.backend,
            key=config.storage.key,
            items=len(application.service),
        )
        return application

    @property
    def service(self) -> TodoService:
        return self._service

    @property
    def sort_ascending(self) -> bool:
        return self._sort_ascending

    def list_todos(self) -> CommandResult:
        """Return the current collection."""
        return CommandResult(success=True, todos=self._service.get_all())

    def add_todo(self, title: str = "") -> CommandResult:
        """Add an item; resets the sort toggle on success."""
        result = self._run("add", lambda: self._service.add(title))
        if result.success:
            self._sort_ascending = True
        return result

    def edit_todo(self, todo_id: TodoId, title: str) -> CommandResult:
        """Rename an item; resets the sort toggle on success."""
        result = self._run("edit", lambda: self._service.edit(todo_id, title))
        if result.success:
            self._sort_ascending = True
        return result

    def delete_todo(self, todo_id: TodoId) -> CommandResult:
        """Delete an item. Succeeds whether or not the id existed."""
        return self._run("delete", lambda: self._delete(todo_id))

    def sort_todos(self, ascending: bool | None = None) -> CommandResult:
        """Sort the collection.

        Args:
            ascending: Explicit direction. If None, the toggle direction is
                used and then flipped for the next call.
        """
        if ascending is not None:
            return self._run("sort", lambda: self._sort(ascending))

        result = self._run("sort", lambda: self._sort(self._sort_ascending))
        if result.success:
            self._sort_ascending = not self._sort_ascending
        return result

    def _delete(self, todo_id: TodoId) -> None:
        self._service.delete(todo_id)

    def _sort(self, ascending: bool) -> None:
        self._service.sort(ascending)

    def _run(self, operation: str, action: Callable[[], T]) -> CommandResult:
        try:
            with trace_operation(operation):
                item = action()
        except TodoError as e:
            if self._metrics is not None:
                self._metrics.operations_total.labels(operation=operation, status="error").inc()
                self._metrics.rejections_total.labels(kind=e.kind.value).inc()
            return CommandResult(
                success=False,
                todos=self._service.get_all(),
                error_kind=e.kind,
                message=e.message,
            )

        if self._metrics is not None:
            self._metrics.operations_total.labels(operation=operation, status="success").inc()
        return CommandResult(
            success=True,
            todos=self._service.get_all(),
            item=item if isinstance(item, Todo) else None,
        )
