"""Unit tests for todo identifiers."""

from __future__ import annotations

import pytest

from todo_list.domain.value_objects import FIRST_TODO_ID, is_valid_todo_id, next_todo_id


@pytest.mark.unit
class TestNextTodoId:
    """Tests for id generation."""

    def test_empty(self) -> None:
        assert next_todo_id([]) == FIRST_TODO_ID == 1

    def test_sequential(self) -> None:
        assert next_todo_id([1, 2, 3]) == 4

    def test_unordered(self) -> None:
        """The maximum is found wherever it sits."""
        assert next_todo_id([1, 3, 2]) == 4
        assert next_todo_id([9, 1]) == 10

    def test_gaps_ignored(self) -> None:
        """Ids are not reused from gaps, and length is irrelevant."""
        assert next_todo_id([1, 2]) == 3
        assert next_todo_id([5]) == 6

    def test_accepts_generator(self) -> None:
        assert next_todo_id(i for i in (4, 2)) == 5


@pytest.mark.unit
class TestIsValidTodoId:
    """Tests for id validation."""

    @pytest.mark.parametrize("value", [1, 2, 10**12])
    def test_valid(self, value: int) -> None:
        assert is_valid_todo_id(value)

    @pytest.mark.parametrize("value", [0, -3, True, False, 2.0, "2", None])
    def test_invalid(self, value: object) -> None:
        assert not is_valid_todo_id(value)
