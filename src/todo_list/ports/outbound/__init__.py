"""Outbound ports - interfaces for external dependencies.

Outbound ports define contracts for the systems the list service
depends on, i.e. durable key-value storage.
"""

from todo_list.ports.outbound.todo_storage import (
    DEFAULT_STORAGE_KEY,
    StorageError,
    TodoStorage,
)

__all__ = [
    "DEFAULT_STORAGE_KEY",
    "StorageError",
    "TodoStorage",
]
