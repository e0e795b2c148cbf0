"""Integration tests for the REST API adapter."""

from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from todo_list.adapters.inbound import create_app, rest_api
from todo_list.adapters.outbound import InMemoryTodoStorage, JsonFileTodoStorage
from todo_list.application import TodoApplication
from todo_list.domain.entities import Todo
from todo_list.domain.services import TodoService
from todo_list.infrastructure.config import (
    Config,
    ObservabilityConfig,
    ServerConfig,
    StorageConfig,
)
from todo_list.infrastructure.container import reset_container
from todo_list.ports.outbound import StorageError


@pytest.fixture
def storage() -> InMemoryTodoStorage:
    return InMemoryTodoStorage()


@pytest.fixture
def client(storage: InMemoryTodoStorage) -> TestClient:
    application = TodoApplication(TodoService(storage, seed=[Todo(1, "")]))
    return TestClient(create_app(application))


class ReadOnlyStorage(InMemoryTodoStorage):
    """Storage that keeps its pre-populated collection and refuses writes."""

    def save(self, todos) -> None:
        raise StorageError("storage is read-only")


@pytest.mark.integration
class TestRestApi:
    """End-to-end tests through HTTP."""

    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_list_seeded(self, client: TestClient) -> None:
        response = client.get("/todos")

        assert response.status_code == 200
        assert response.json() == {
            "todos": [{"id": 1, "title": ""}],
            "sort_ascending": True,
        }

    def test_add_rejected_while_placeholder(self, client: TestClient) -> None:
        response = client.post("/todos", json={})

        assert response.status_code == 422
        body = response.json()
        assert body["error"] == "duplicate_empty_title"
        assert body["todos"] == [{"id": 1, "title": ""}]

    def test_fill_placeholder_then_add(
        self, client: TestClient, storage: InMemoryTodoStorage
    ) -> None:
        assert client.put("/todos/1", json={"title": " Buy milk "}).json() == {
            "id": 1,
            "title": "Buy milk",
        }

        response = client.post("/todos", json={"title": "walk dog"})

        assert response.status_code == 201
        assert response.json() == {"id": 2, "title": "walk dog"}
        assert storage.load() == [Todo(1, "Buy milk"), Todo(2, "walk dog")]

    def test_add_without_body(self, client: TestClient) -> None:
        client.put("/todos/1", json={"title": "x"})

        response = client.post("/todos")

        assert response.status_code == 201
        assert response.json() == {"id": 2, "title": ""}

    def test_edit_blank(self, client: TestClient) -> None:
        response = client.put("/todos/1", json={"title": "   "})

        assert response.status_code == 422
        assert response.json()["error"] == "empty_title"

    def test_edit_missing(self, client: TestClient) -> None:
        response = client.put("/todos/42", json={"title": "x"})

        assert response.status_code == 404
        assert response.json()["error"] == "not_found"

    def test_delete(self, client: TestClient) -> None:
        response = client.delete("/todos/1")

        assert response.status_code == 200
        assert response.json()["todos"] == []

    def test_delete_missing_is_ok(self, client: TestClient) -> None:
        response = client.delete("/todos/42")

        assert response.status_code == 200
        assert response.json()["todos"] == [{"id": 1, "title": ""}]

    def test_sort_toggles(self, client: TestClient) -> None:
        client.put("/todos/1", json={"title": "banana"})
        client.post("/todos", json={"title": "Apple"})
        client.post("/todos", json={"title": "cherry"})
        client.post("/todos", json={})

        first = client.post("/todos/sort").json()
        second = client.post("/todos/sort").json()

        assert [t["title"] for t in first["todos"]] == ["Apple", "banana", "cherry"]
        assert first["sort_ascending"] is False
        assert [t["title"] for t in second["todos"]] == ["cherry", "banana", "Apple"]
        assert second["sort_ascending"] is True

    def test_sort_explicit_direction(self, client: TestClient) -> None:
        client.put("/todos/1", json={"title": "b"})
        client.post("/todos", json={"title": "a"})

        body = client.post("/todos/sort", params={"ascending": "false"}).json()

        assert [t["title"] for t in body["todos"]] == ["b", "a"]
        assert body["sort_ascending"] is True

    def test_stats(self, client: TestClient) -> None:
        assert client.get("/stats").json() == {
            "total_items": 1,
            "has_placeholder": True,
            "next_id": 2,
        }

    def test_json_file_backend(self, temp_dir: Path) -> None:
        """The API writes through to the JSON document."""
        storage = JsonFileTodoStorage(temp_dir / "todos.json", fsync=False)
        client = TestClient(create_app(TodoApplication(TodoService(storage))))

        client.post("/todos", json={"title": "persist me"})

        reopened = JsonFileTodoStorage(temp_dir / "todos.json")
        assert reopened.load() == [Todo(1, "persist me")]

    def test_request_id_generated(self, client: TestClient) -> None:
        response = client.get("/todos")

        assert len(response.headers["X-Request-ID"]) == 32

    def test_request_id_propagated(self, client: TestClient) -> None:
        response = client.get("/todos", headers={"X-Request-ID": "abc-123"})

        assert response.headers["X-Request-ID"] == "abc-123"

    def test_storage_failure_maps_to_500(self) -> None:
        storage = ReadOnlyStorage(initial={"TODOS": '[{"id": 1, "title": "keep"}]'})
        client = TestClient(create_app(TodoApplication(TodoService(storage))))

        response = client.post("/todos", json={"title": "new"})

        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "storage"
        assert body["message"] == "storage is read-only"
        assert body["todos"] == [{"id": 1, "title": "keep"}]
        assert client.get("/todos").json()["todos"] == [{"id": 1, "title": "keep"}]


@pytest.mark.integration
class TestServerEntryPoint:
    """Tests for the console entry point wiring."""

    def test_main_wires_configuration(self, monkeypatch: pytest.MonkeyPatch) -> None:
        config = Config(
            storage=StorageConfig(backend="memory"),
            server=ServerConfig(host="0.0.0.0", port=9001),
            observability=ObservabilityConfig(log_format="console", otel_console_export=True),
        )
        calls: dict[str, object] = {}
        monkeypatch.setattr(rest_api, "get_config", lambda: config)
        monkeypatch.setattr(
            rest_api, "setup_logging", lambda *args, **kwargs: calls.update(logging=(args, kwargs))
        )
        monkeypatch.setattr(
            rest_api, "setup_tracing", lambda *args, **kwargs: calls.update(tracing=(args, kwargs))
        )
        monkeypatch.setattr(
            rest_api,
            "run_server",
            lambda application, host, port: calls.update(server=(application, host, port)),
        )
        reset_container()

        try:
            rest_api.main()
        finally:
            reset_container()

        assert calls["logging"] == (("INFO", "console"), {"service_name": "todo_list"})
        assert calls["tracing"] == (("todo_list", None), {"console_export": True})
        application, host, port = calls["server"]
        assert (host, port) == ("0.0.0.0", 9001)
        assert application.list_todos().todos == [Todo(1, "")]
