"""In-memory key-value storage adapter.

Keeps each value as a serialized JSON string, the way browser local
storage does, so the unparseable-value path behaves exactly as it would
against a real key-value store. Nothing survives the process.
"""

from __future__ import annotations

import threading
from typing import Mapping, Sequence

from todo_list.adapters.outbound.todo_codec import dumps_todos, loads_todos
from todo_list.domain.entities.todo import Todo
from todo_list.infrastructure.logging import get_logger
from todo_list.ports.outbound.todo_storage import DEFAULT_STORAGE_KEY

logger = get_logger(__name__)


class InMemoryTodoStorage:
    """Dict-backed implementation of the TodoStorage protocol.

    Attributes:
        key: Storage key the collection lives under.
        save_count: Number of successful saves, for observing write-through.
    """

    def __init__(
        self,
        key: str = DEFAULT_STORAGE_KEY,
        initial: Mapping[str, str] | None = None,
    ) -> None:
        """Initialize the store.

        Args:
            key: Storage key for the collection.
            initial: Raw string values to pre-populate, keyed by storage key.
        """
        self._key = key
        self._values: dict[str, str] = dict(initial or {})
        self._lock = threading.Lock()
        self.save_count = 0

    @property
    def key(self) -> str:
        return self._key

    def get_raw(self, key: str | None = None) -> str | None:
        """Return the raw stored string for a key (default: the collection key)."""
        with self._lock:
            return self._values.get(key or self._key)

    def set_raw(self, value: str, key: str | None = None) -> None:
        """Store a raw string, bypassing serialization."""
        with self._lock:
            self._values[key or self._key] = value

    def load(self) -> list[Todo]:
        raw = self.get_raw()
        if not raw:
            return []
        try:
            return loads_todos(raw)
        except (ValueError, RecursionError) as e:
            logger.warning("todo_storage_unparseable", key=self._key, error=str(e))
            return []

    def save(self, todos: Sequence[Todo]) -> None:
        payload = dumps_todos(todos)
        with self._lock:
            self._values[self._key] = payload
            self.save_count += 1
