"""Value objects for the todo list domain.

Exports:
    Identifiers:
        - TodoId: Type-safe item identifier
        - FIRST_TODO_ID: Id assigned to the first item of an empty collection
        - next_todo_id: Id generation over the current ids
        - is_valid_todo_id: Positive-integer check
"""

from todo_list.domain.value_objects.identifiers import (
    FIRST_TODO_ID,
    TodoId,
    is_valid_todo_id,
    next_todo_id,
)

__all__ = [
    "TodoId",
    "FIRST_TODO_ID",
    "is_valid_todo_id",
    "next_todo_id",
]
