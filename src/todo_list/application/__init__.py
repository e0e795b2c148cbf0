"""Application layer for the todo list.

The application layer composes adapters and the list service and turns
service exceptions into typed command results.

Exports:
    - TodoApplication: Presentation-facing facade with the sort toggle
    - CommandResult: Outcome of a command
    - build_storage: Storage adapter factory from configuration
    - default_seed: Seed used for empty storage
"""

from todo_list.application.todo_application import (
    CommandResult,
    TodoApplication,
    build_storage,
    default_seed,
)

__all__ = [
    "TodoApplication",
    "CommandResult",
    "build_storage",
    "default_seed",
]
