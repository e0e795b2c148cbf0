"""Identifiers for items in the todo collection.

Item ids are positive integers, unique within a collection and never
reassigned to a different item while the item exists.
"""

from __future__ import annotations

from typing import Iterable, NewType


TodoId = NewType("TodoId", int)
"""Unique identifier for an item. Positive and immutable once assigned."""

FIRST_TODO_ID = TodoId(1)


def is_valid_todo_id(value: object) -> bool:
    """Return True if value can serve as an item id.

    ``bool`` is rejected even though it subclasses ``int``.
    """
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def next_todo_id(existing: Iterable[int]) -> TodoId:
    """Generate the id for a new item.

    The result is one past the largest id present, scanning every id, so
    neither storage order nor gaps left by deletions matter. An empty
    collection starts at ``FIRST_TODO_ID``.

    Example:
        >>> next_todo_id([1, 3, 2])
        4
        >>> next_todo_id([])
        1
    """
    highest = max(existing, default=0)
    return TodoId(highest + 1)
