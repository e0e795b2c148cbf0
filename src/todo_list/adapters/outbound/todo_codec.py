"""Serialization of the todo collection for key-value storage.

Stored form is a JSON array of ``{"id": int, "title": str}`` records in
collection order.
"""

from __future__ import annotations

import json
from typing import Any, Sequence

from todo_list.domain.entities.todo import Todo, ensure_collection_invariants


def encode_todos(todos: Sequence[Todo]) -> list[dict[str, Any]]:
    """Convert a collection into its list-of-records form."""
    return [todo.to_dict() for todo in todos]


def decode_todos(value: Any) -> list[Todo]:
    """Rebuild a collection from its list-of-records form.

    Raises:
        ValueError: If the value is not a list of valid records, or the
            records break the collection invariants.
    """
    if not isinstance(value, list):
        raise ValueError(f"Stored collection must be a list, got {type(value).__name__}")

    try:
        todos = [Todo.from_dict(record) for record in value]
    except TypeError as e:
        raise ValueError(str(e)) from e

    ensure_collection_invariants(todos)
    return todos


def dumps_todos(todos: Sequence[Todo]) -> str:
    """Serialize a collection to a JSON string."""
    return json.dumps(encode_todos(todos), ensure_ascii=False)


def loads_todos(raw: str) -> list[Todo]:
    """Parse a collection from a JSON string.

    Raises:
        ValueError: If the string is not valid JSON or not a valid collection.
    """
    return decode_todos(json.loads(raw))
