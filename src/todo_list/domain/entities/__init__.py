"""Domain entities."""

from todo_list.domain.entities.todo import (
    Todo,
    ensure_collection_invariants,
    normalize_title,
)

__all__ = [
    "Todo",
    "ensure_collection_invariants",
    "normalize_title",
]
