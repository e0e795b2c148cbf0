"""Todo item entity and collection invariants."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Iterable, Mapping

from todo_list.domain.value_objects.identifiers import TodoId, is_valid_todo_id


def normalize_title(title: str) -> str:
    """Trim leading and trailing whitespace from a title.

    Raises:
        TypeError: If title is not a string.
    """
    if not isinstance(title, str):
        raise TypeError(f"title must be a string, got {type(title).__name__}")
    return title.strip()


@dataclass(frozen=True, slots=True)
class Todo:
    """A single labeled item.

    Items are immutable; renaming produces a new ``Todo`` with the same id.
    An item whose title is empty is the collection's placeholder, a draft
    slot waiting for a real title.

    Attributes:
        id: Positive identifier, unique within the collection.
        title: Item text. Empty only for the placeholder.
    """

    id: TodoId
    title: str = ""

    def __post_init__(self) -> None:
        """Validate the item."""
        if not is_valid_todo_id(self.id):
            raise ValueError(f"id must be a positive integer, got {self.id!r}")
        if not isinstance(self.title, str):
            raise TypeError(f"title must be a string, got {type(self.title).__name__}")

    @property
    def is_placeholder(self) -> bool:
        """True if this item has no title."""
        return not self.title

    def with_title(self, title: str) -> Todo:
        """Return a copy of this item carrying a new title."""
        return replace(self, title=title)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the ``{id, title}`` storage record."""
        return {"id": self.id, "title": self.title}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Todo:
        """Build an item from an ``{id, title}`` record.

        A missing title reads as the empty placeholder title.

        Raises:
            ValueError: If the record is not a mapping or its id is invalid.
            TypeError: If the title is not a string.
        """
        if not isinstance(data, Mapping):
            raise ValueError(f"Todo record must be a mapping, got {type(data).__name__}")
        if "id" not in data:
            raise ValueError("Todo record is missing 'id'")
        return cls(id=data["id"], title=data.get("title", ""))

    def __repr__(self) -> str:
        return f"Todo({self.id}, {self.title!r})"


def ensure_collection_invariants(todos: Iterable[Todo]) -> None:
    """Check that a collection could have been produced by the list service.

    Raises:
        ValueError: On duplicate ids or more than one placeholder item.
    """
    seen: set[int] = set()
    placeholders = 0
    for todo in todos:
        if todo.id in seen:
            raise ValueError(f"Duplicate todo id: {todo.id}")
        seen.add(todo.id)
        if todo.is_placeholder:
            placeholders += 1
            if placeholders > 1:
                raise ValueError("Collection holds more than one empty-title item")
