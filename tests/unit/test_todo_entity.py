"""Unit tests for the Todo entity and collection invariants."""

from __future__ import annotations

import pytest

from todo_list.domain.entities import Todo, ensure_collection_invariants, normalize_title


@pytest.mark.unit
class TestTodo:
    """Tests for Todo."""

    def test_defaults_to_placeholder(self) -> None:
        """A todo without a title is the placeholder."""
        todo = Todo(1)

        assert todo.title == ""
        assert todo.is_placeholder

    def test_titled_is_not_placeholder(self) -> None:
        assert not Todo(1, "x").is_placeholder

    @pytest.mark.parametrize("bad_id", [0, -1, True, 1.5, "1", None])
    def test_invalid_id(self, bad_id: object) -> None:
        """Ids must be positive integers (bool excluded)."""
        with pytest.raises(ValueError, match="positive integer"):
            Todo(bad_id)  # type: ignore[arg-type]

    def test_invalid_title(self) -> None:
        with pytest.raises(TypeError):
            Todo(1, 5)  # type: ignore[arg-type]

    def test_with_title_keeps_id(self) -> None:
        """Renaming returns a new item with the same id."""
        original = Todo(3, "old")

        renamed = original.with_title("new")

        assert renamed == Todo(3, "new")
        assert original.title == "old"

    def test_to_dict(self) -> None:
        assert Todo(2, "milk").to_dict() == {"id": 2, "title": "milk"}

    def test_from_dict(self) -> None:
        assert Todo.from_dict({"id": 2, "title": "milk"}) == Todo(2, "milk")

    def test_from_dict_missing_title(self) -> None:
        """A record without a title reads as the placeholder."""
        assert Todo.from_dict({"id": 7}) == Todo(7, "")

    def test_from_dict_missing_id(self) -> None:
        with pytest.raises(ValueError, match="missing 'id'"):
            Todo.from_dict({"title": "x"})

    def test_from_dict_not_mapping(self) -> None:
        with pytest.raises(ValueError, match="mapping"):
            Todo.from_dict([1, "x"])  # type: ignore[arg-type]

    def test_equality_and_hash(self) -> None:
        """Items compare by value."""
        assert Todo(1, "a") == Todo(1, "a")
        assert Todo(1, "a") != Todo(1, "b")
        assert len({Todo(1, "a"), Todo(1, "a")}) == 1


@pytest.mark.unit
class TestNormalizeTitle:
    """Tests for title trimming."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("plain", "plain"),
            ("  both  ", "both"),
            ("\tinner  space\n", "inner  space"),
            ("   ", ""),
            ("", ""),
        ],
    )
    def test_trims(self, raw: str, expected: str) -> None:
        assert normalize_title(raw) == expected

    def test_rejects_non_string(self) -> None:
        with pytest.raises(TypeError):
            normalize_title(None)  # type: ignore[arg-type]


@pytest.mark.unit
class TestCollectionInvariants:
    """Tests for ensure_collection_invariants."""

    def test_valid_collection(self) -> None:
        ensure_collection_invariants([Todo(1, "a"), Todo(2, ""), Todo(3, "c")])

    def test_empty_collection(self) -> None:
        ensure_collection_invariants([])

    def test_duplicate_ids(self) -> None:
        with pytest.raises(ValueError, match="Duplicate todo id: 2"):
            ensure_collection_invariants([Todo(2, "a"), Todo(2, "b")])

    def test_two_placeholders(self) -> None:
        with pytest.raises(ValueError, match="more than one"):
            ensure_collection_invariants([Todo(1, ""), Todo(2, "")])
