"""Ports layer - interface definitions following Hexagonal Architecture.

Ports are abstract interfaces (protocols) that define contracts:
- Inbound ports: APIs offered to the presentation layer (TodoListPort)
- Outbound ports: Dependencies on external systems (TodoStorage)

Adapters implement these ports with concrete functionality.
"""

from todo_list.ports.inbound import (
    DuplicateEmptyTitleError,
    EmptyTitleError,
    ErrorKind,
    NotFoundError,
    TodoError,
    TodoListPort,
    TodoListStats,
)
from todo_list.ports.outbound import DEFAULT_STORAGE_KEY, StorageError, TodoStorage

__all__ = [
    # Inbound ports
    "DuplicateEmptyTitleError",
    "EmptyTitleError",
    "ErrorKind",
    "NotFoundError",
    "TodoError",
    "TodoListPort",
    "TodoListStats",
    # Outbound ports
    "DEFAULT_STORAGE_KEY",
    "StorageError",
    "TodoStorage",
]
