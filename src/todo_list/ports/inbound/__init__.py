"""Inbound ports - API contracts for the todo list.

Inbound ports define the interfaces that the presentation layer uses
to read and mutate the collection.
"""

from todo_list.ports.inbound.todo_list import (
    DuplicateEmptyTitleError,
    EmptyTitleError,
    ErrorKind,
    NotFoundError,
    TodoError,
    TodoListPort,
    TodoListStats,
)

__all__ = [
    "DuplicateEmptyTitleError",
    "EmptyTitleError",
    "ErrorKind",
    "NotFoundError",
    "TodoError",
    "TodoListPort",
    "TodoListStats",
]
