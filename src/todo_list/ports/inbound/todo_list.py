"""Todo List port - the contract offered to the presentation layer.

The presentation layer renders from ``get_all()`` after every call and
never touches storage itself. Every fallible operation raises a
``TodoError`` subclass whose ``kind`` can be matched without parsing
messages.
"""

from __future__ import annotations

from abc import abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from todo_list.domain.entities.todo import Todo
from todo_list.domain.value_objects.identifiers import TodoId


class ErrorKind(str, Enum):
    """Kinds of failure a list operation can report."""

    DUPLICATE_EMPTY_TITLE = "duplicate_empty_title"
    EMPTY_TITLE = "empty_title"
    NOT_FOUND = "not_found"
    STORAGE = "storage"


class TodoError(Exception):
    """Base class for list operation failures.

    The collection is unchanged and nothing was persisted when one of
    these is raised.
    """

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class DuplicateEmptyTitleError(TodoError):
    """Raised by add when the collection already holds a placeholder."""

    kind = ErrorKind.DUPLICATE_EMPTY_TITLE

    def __init__(self, message: str = "There is already an item with an empty title.") -> None:
        super().__init__(message)


class EmptyTitleError(TodoError):
    """Raised by edit when the new title is blank."""

    kind = ErrorKind.EMPTY_TITLE

    def __init__(self, message: str = "An item title cannot be empty.") -> None:
        super().__init__(message)


class NotFoundError(TodoError):
    """Raised when an operation targets an id that is not in the collection."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, todo_id: int) -> None:
        super().__init__(f"There is no item with id {todo_id}.")
        self.todo_id = todo_id


@dataclass
class TodoListStats:
    """Statistics for list monitoring."""

    total_items: int
    has_placeholder: bool
    next_id: int


class TodoListPort(Protocol):
    """Protocol for list management operations.

    Implementations own the collection exclusively and write every
    successful mutation through to storage before returning.

    Example:
        service.add()                     # placeholder slot
        service.edit(todo.id, "Buy milk")
        service.sort(ascending=False)
        for todo in service.get_all():
            render(todo)
    """

    @abstractmethod
    def get_all(self) -> list[Todo]:
        """Return a snapshot of the collection in its current order."""
        ...

    @abstractmethod
    def add(self, title: str = "") -> Todo:
        """Append a new item.

        Args:
            title: Item title, trimmed before storing. Empty adds a placeholder.

        Returns:
            The new item.

        Raises:
            DuplicateEmptyTitleError: If a placeholder already exists.
        """
        ...

    @abstractmethod
    def edit(self, todo_id: TodoId, title: str) -> Todo:
        """Rename an item in place.

        Returns:
            The updated item.

        Raises:
            EmptyTitleError: If the trimmed title is empty.
            NotFoundError: If no item has this id.
        """
        ...

    @abstractmethod
    def delete(self, todo_id: TodoId) -> bool:
        """Remove an item. Deleting a missing id is a no-op.

        Returns:
            True if an item was removed.
        """
        ...

    @abstractmethod
    def sort(self, ascending: bool = True) -> list[Todo]:
        """Reorder by case-insensitive title, dropping the placeholder.

        Returns:
            The new snapshot.
        """
        ...

    @abstractmethod
    def get_stats(self) -> TodoListStats:
        """Return list statistics."""
        ...
