"""Pytest configuration and fixtures for todo_list tests."""

from __future__ import annotations

import tempfile
from pathlib import Path
from typing import Generator

import pytest
from prometheus_client import CollectorRegistry

from todo_list.adapters.outbound import InMemoryTodoStorage, JsonFileTodoStorage
from todo_list.domain.entities import Todo
from todo_list.domain.services import TodoService
from todo_list.infrastructure.config import Config, StorageConfig
from todo_list.infrastructure.container import Container, reset_container
from todo_list.infrastructure.metrics import MetricsRegistry


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Provide a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def test_config(temp_dir: Path) -> Config:
    """Provide a test configuration storing to a temporary file."""
    return Config(
        storage=StorageConfig(
            backend="json",
            path=temp_dir / "todos.json",
            fsync=False,  # Faster for tests
        ),
    )


@pytest.fixture
def container() -> Generator[Container, None, None]:
    """Provide a fresh DI container for each test."""
    reset_container()
    c = Container()
    yield c
    c.clear()


@pytest.fixture
def metrics_registry() -> MetricsRegistry:
    """Provide a fresh metrics registry for each test."""
    # Use a separate registry to avoid conflicts between tests
    return MetricsRegistry(registry=CollectorRegistry(auto_describe=True))


@pytest.fixture
def memory_storage() -> InMemoryTodoStorage:
    """Provide an empty in-memory storage adapter."""
    return InMemoryTodoStorage()


@pytest.fixture
def json_storage(temp_dir: Path) -> JsonFileTodoStorage:
    """Provide a JSON file storage adapter in a temporary directory."""
    return JsonFileTodoStorage(temp_dir / "todos.json", fsync=False)


@pytest.fixture
def make_storage():
    """Build an in-memory storage pre-populated with the given items."""

    def _make(*todos: Todo) -> InMemoryTodoStorage:
        storage = InMemoryTodoStorage()
        if todos:
            storage.save(list(todos))
            storage.save_count = 0
        return storage

    return _make


@pytest.fixture
def service(memory_storage: InMemoryTodoStorage) -> TodoService:
    """Provide a service over empty in-memory storage with no seed."""
    return TodoService(memory_storage)


# Markers for test categories
def pytest_configure(config: pytest.Config) -> None:
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Integration tests")
