"""Adapters layer - concrete implementations of port interfaces.

Adapters provide the actual implementations:
- Inbound adapters: Handle incoming requests (REST)
- Outbound adapters: Implement external dependencies (JSON file, memory)

Inbound adapters are imported from ``todo_list.adapters.inbound``
directly, since they depend on the application layer.
"""

from todo_list.adapters.outbound import (
    InMemoryTodoStorage,
    JsonFileTodoStorage,
)

__all__ = [
    # Outbound adapters
    "InMemoryTodoStorage",
    "JsonFileTodoStorage",
]
