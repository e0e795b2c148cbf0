"""Todo Storage port for persisting the collection.

This outbound port defines the key-value persistence boundary: the whole
collection is stored as one serialized value under a single key.

The storage adapter is responsible for:
- Loading the persisted collection, treating absent or unparseable
  values as an empty collection
- Saving the collection synchronously and durably
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Protocol, Sequence

from todo_list.domain.entities.todo import Todo
from todo_list.ports.inbound.todo_list import ErrorKind, TodoError


DEFAULT_STORAGE_KEY = "TODOS"


class TodoStorage(Protocol):
    """Protocol for collection persistence.

    The list service is the only caller. It treats ``save`` as blocking:
    once it returns, the collection must survive a restart.
    """

    @property
    @abstractmethod
    def key(self) -> str:
        """Return the storage key the collection lives under."""
        ...

    @abstractmethod
    def load(self) -> list[Todo]:
        """Load the persisted collection.

        Returns:
            Items in stored order. Empty if nothing is stored or the
            stored value cannot be parsed.

        Raises:
            StorageError: If the underlying medium cannot be read at all.
        """
        ...

    @abstractmethod
    def save(self, todos: Sequence[Todo]) -> None:
        """Replace the persisted collection.

        Args:
            todos: The complete collection in order.

        Raises:
            StorageError: If the write fails.
        """
        ...


class StorageError(TodoError):
    """Raised when the persistence layer fails."""

    kind = ErrorKind.STORAGE
