"""Domain services for business logic.

Services implement domain logic that spans the whole collection rather
than a single entity.
"""

from todo_list.domain.services.todo_service import TodoService

__all__ = [
    "TodoService",
]
