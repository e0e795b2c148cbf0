"""List service - sole owner and mutator of the todo collection.

Every mutation follows the same unit of work under one lock:
read the current collection, validate, build the next collection value,
persist it, and only then adopt it in memory. A rejected operation or a
failed persist therefore leaves both memory and storage untouched.

Collection values are tuples of frozen ``Todo`` items, so a snapshot
handed to a caller can never be used to bypass validation.
"""

from __future__ import annotations

import threading
import time
from typing import Any, Iterable, Mapping, Sequence

from todo_list.domain.entities.todo import (
    Todo,
    ensure_collection_invariants,
    normalize_title,
)
from todo_list.domain.value_objects.identifiers import TodoId, next_todo_id
from todo_list.infrastructure.logging import get_logger
from todo_list.infrastructure.metrics import MetricsRegistry
from todo_list.ports.inbound.todo_list import (
    DuplicateEmptyTitleError,
    EmptyTitleError,
    NotFoundError,
    TodoListStats,
)
from todo_list.ports.outbound.todo_storage import StorageError, TodoStorage


SeedItem = Todo | Mapping[str, Any]


class TodoService:
    """Authoritative, write-through todo collection; implements ``TodoListPort``.

    On construction the collection is loaded from storage. If storage is
    empty, ``seed`` becomes the collection and is persisted immediately,
    so storage and memory agree from the first observable moment.

    Thread Safety:
        Each public method holds a re-entrant lock for its whole
        read-validate-mutate-persist cycle.

    Example:
        service = TodoService(InMemoryTodoStorage(), seed=[Todo(1, "")])
        service.edit(1, "Write report")
        service.add("buy milk")
        service.sort()
        [t.title for t in service.get_all()]  # ['buy milk', 'Write report']
    """

    def __init__(
        self,
        storage: TodoStorage,
        seed: Iterable[SeedItem] = (),
        metrics: MetricsRegistry | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            storage: Storage adapter; the service is its only writer.
            seed: Items used only when storage holds no collection.
            metrics: Optional metrics registry.

        Raises:
            ValueError: If the seed violates the collection invariants.
            StorageError: If storage cannot be read or the seed cannot be saved.
        """
        self._storage = storage
        self._metrics = metrics
        self._logger = get_logger(__name__, storage_key=storage.key)
        self._lock = threading.RLock()
        self._todos: tuple[Todo, ...] = ()

        with self._lock:
            self._initialize(seed)

    def _initialize(self, seed: Iterable[SeedItem]) -> None:
        loaded = tuple(self._storage.load())
        if loaded:
            self._todos = loaded
            self._update_gauges()
            self._logger.info("todos_loaded", count=len(loaded))
            return

        seeded = tuple(self._coerce_seed_item(item) for item in seed)
        ensure_collection_invariants(seeded)
        self._commit(seeded)
        self._logger.info("todos_seeded", count=len(seeded))

    @staticmethod
    def _coerce_seed_item(item: SeedItem) -> Todo:
        todo = item if isinstance(item, Todo) else Todo.from_dict(item)
        return todo.with_title(normalize_title(todo.title))

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def get_all(self) -> list[Todo]:
        """Return a snapshot of the collection in its current order."""
        with self._lock:
            return list(self._todos)

    def get(self, todo_id: TodoId) -> Todo:
        """Return the item with the given id.

        Raises:
            NotFoundError: If no item has this id.
        """
        with self._lock:
            return self._todos[self._index_of(todo_id)]

    @property
    def has_placeholder(self) -> bool:
        """True if the collection holds the empty-title placeholder."""
        with self._lock:
            return any(todo.is_placeholder for todo in self._todos)

    def __len__(self) -> int:
        with self._lock:
            return len(self._todos)

    def get_stats(self) -> TodoListStats:
        """Return list statistics."""
        with self._lock:
            return TodoListStats(
                total_items=len(self._todos),
                has_placeholder=any(todo.is_placeholder for todo in self._todos),
                next_id=next_todo_id(todo.id for todo in self._todos),
            )

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def add(self, title: str = "") -> Todo:
        """Append a new item at the end of the collection.

        Any existing placeholder blocks the add, whatever the new title.

        Args:
            title: Item title; trimmed. Empty creates the placeholder.

        Returns:
            The new item.

        Raises:
            DuplicateEmptyTitleError: If a placeholder already exists.
        """
        cleaned = normalize_title(title)

        with self._lock:
            if any(todo.is_placeholder for todo in self._todos):
                self._logger.warning("todo_add_rejected", reason="placeholder_exists")
                raise DuplicateEmptyTitleError()

            todo = Todo(id=next_todo_id(t.id for t in self._todos), title=cleaned)
            self._commit((*self._todos, todo))

        self._logger.info("todo_added", todo_id=todo.id, placeholder=todo.is_placeholder)
        return todo

    def edit(self, todo_id: TodoId, title: str) -> Todo:
        """Replace the title of an item, keeping its position.

        The title check runs before the id lookup.

        Returns:
            The updated item.

        Raises:
            EmptyTitleError: If the trimmed title is empty.
            NotFoundError: If no item has this id.
        """
        cleaned = normalize_title(title)
        if not cleaned:
            self._logger.warning("todo_edit_rejected", todo_id=todo_id, reason="empty_title")
            raise EmptyTitleError()

        with self._lock:
            index = self._index_of(todo_id)
            updated = self._todos[index].with_title(cleaned)
            todos = list(self._todos)
            todos[index] = updated
            self._commit(tuple(todos))

        self._logger.info("todo_edited", todo_id=todo_id)
        return updated

    def delete(self, todo_id: TodoId) -> bool:
        """Remove the item with the given id, if present.

        Deleting a missing id changes nothing but still persists.

        Returns:
            True if an item was removed.
        """
        with self._lock:
            remaining = tuple(todo for todo in self._todos if todo.id != todo_id)
            removed = len(remaining) != len(self._todos)
            self._commit(remaining)

        self._logger.info("todo_deleted", todo_id=todo_id, removed=removed)
        return removed

    def sort(self, ascending: bool = True) -> list[Todo]:
        """Reorder the collection by title, ignoring case.

        The placeholder is dropped; a later ``add()`` may create a new one.
        Equal titles keep their relative order when ascending; descending
        is the exact reverse of the ascending order.

        Args:
            ascending: Sort direction.

        Returns:
            The new snapshot.
        """
        with self._lock:
            ordered = sorted(
                (todo for todo in self._todos if not todo.is_placeholder),
                key=lambda todo: todo.title.casefold(),
            )
            if not ascending:
                ordered.reverse()

            dropped = len(self._todos) - len(ordered)
            self._commit(tuple(ordered))
            snapshot = list(self._todos)

        self._logger.info("todos_sorted", ascending=ascending, dropped_placeholders=dropped)
        return snapshot

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _index_of(self, todo_id: TodoId) -> int:
        for index, todo in enumerate(self._todos):
            if todo.id == todo_id:
                return index
        raise NotFoundError(todo_id)

    def _commit(self, todos: Sequence[Todo]) -> None:
        """Persist ``todos`` and adopt it as the current collection.

        The in-memory collection is replaced only after storage accepted
        the write.
        """
        start = time.perf_counter()
        try:
            self._storage.save(list(todos))
        except StorageError:
            if self._metrics is not None:
                self._metrics.persist_failures_total.inc()
            self._logger.error("todos_persist_failed", exc_info=True)
            raise

        self._todos = tuple(todos)
        if self._metrics is not None:
            self._metrics.persist_latency_seconds.observe(time.perf_counter() - start)
        self._update_gauges()

    def _update_gauges(self) -> None:
        if self._metrics is None:
            return
        self._metrics.items.set(len(self._todos))
        self._metrics.placeholder_present.set(
            1 if any(todo.is_placeholder for todo in self._todos) else 0
        )
