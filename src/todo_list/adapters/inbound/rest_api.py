"""REST API adapter for the todo list.

This module provides a FastAPI-based presentation layer. It only talks
to ``TodoApplication``; storage is never touched directly.

Endpoints:
    GET /todos - List items
    POST /todos - Add an item (empty title adds the placeholder)
    PUT /todos/{todo_id} - Rename an item
    DELETE /todos/{todo_id} - Delete an item (missing ids are a no-op)
    POST /todos/sort - Sort items, alternating direction on each call
    GET /stats - Collection statistics
    GET /health - Health check

Usage:
    from todo_list.adapters.inbound.rest_api import create_app
    from todo_list.application import TodoApplication

    app = create_app(TodoApplication.from_config())
    # Run with uvicorn: uvicorn app:app --host 127.0.0.1 --port 8000
"""

from __future__ import annotations

import uuid

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from todo_list import __version__
from todo_list.application import CommandResult, TodoApplication
from todo_list.domain.entities.todo import Todo
from todo_list.domain.value_objects.identifiers import TodoId
from todo_list.infrastructure.config import get_config
from todo_list.infrastructure.logging import (
    bind_request_context,
    clear_request_context,
    get_logger,
    setup_logging,
)
from todo_list.infrastructure.metrics import setup_metrics
from todo_list.infrastructure.tracing import setup_tracing
from todo_list.ports.inbound.todo_list import ErrorKind

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


class TodoModel(BaseModel):
    """A single item."""

    id: int = Field(..., description="Item identifier")
    title: str = Field(..., description="Item title; empty for the placeholder")

    @classmethod
    def from_entity(cls, todo: Todo) -> TodoModel:
        return cls(id=todo.id, title=todo.title)


class CreateTodoRequest(BaseModel):
    """Request model for adding an item."""

    title: str = Field("", description="Item title; omitted or blank adds the placeholder")


class EditTodoRequest(BaseModel):
    """Request model for renaming an item."""

    title: str = Field(..., description="New title; must not be blank")


class TodoListResponse(BaseModel):
    """Response model for the collection."""

    todos: list[TodoModel] = Field(default_factory=list, description="Items in order")
    sort_ascending: bool = Field(..., description="Direction of the next toggled sort")


class ErrorResponse(BaseModel):
    """Response model for a rejected operation."""

    error: ErrorKind = Field(..., description="Error kind")
    message: str = Field(..., description="Human-readable message")
    todos: list[TodoModel] = Field(default_factory=list, description="Unchanged items")


class StatsResponse(BaseModel):
    """Response model for collection statistics."""

    total_items: int = Field(..., description="Number of items")
    has_placeholder: bool = Field(..., description="Whether an empty-title item exists")
    next_id: int = Field(..., description="Id the next added item will receive")


class HealthResponse(BaseModel):
    """Response model for health check."""

    status: str = Field(..., description="Health status")
    version: str = Field(..., description="API version")


_ERROR_STATUS: dict[ErrorKind, int] = {
    ErrorKind.DUPLICATE_EMPTY_TITLE: 422,
    ErrorKind.EMPTY_TITLE: 422,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.STORAGE: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _error_response(result: CommandResult) -> JSONResponse:
    """Convert a failed CommandResult to a JSON error response."""
    kind = result.error_kind or ErrorKind.STORAGE
    body = ErrorResponse(
        error=kind,
        message=result.message,
        todos=[TodoModel.from_entity(t) for t in result.todos],
    )
    return JSONResponse(status_code=_ERROR_STATUS[kind], content=body.model_dump(mode="json"))


def create_app(application: TodoApplication) -> FastAPI:
    """Create a FastAPI application for the todo list.

    Args:
        application: The application facade to serve.

    Returns:
        A configured FastAPI application.
    """
    app = FastAPI(
        title="Todo List API",
        description="REST API for managing a persistent todo list",
        version=__version__,
    )

    @app.middleware("http")
    async def request_context(request: Request, call_next):
        """Bind a request id to every log line emitted while handling the request."""
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        clear_request_context()
        bind_request_context(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
        )
        try:
            response = await call_next(request)
            logger.info("http_request", status_code=response.status_code)
        finally:
            clear_request_context()
        response.headers[REQUEST_ID_HEADER] = request_id
        return response

    def _list_response(result: CommandResult) -> TodoListResponse:
        return TodoListResponse(
            todos=[TodoModel.from_entity(t) for t in result.todos],
            sort_ascending=application.sort_ascending,
        )

    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health_check() -> HealthResponse:
        """Health check endpoint."""
        return HealthResponse(status="healthy", version=__version__)

    @app.get("/stats", response_model=StatsResponse, tags=["Stats"])
    async def get_stats() -> StatsResponse:
        """Get collection statistics."""
        stats = application.service.get_stats()
        return StatsResponse(
            total_items=stats.total_items,
            has_placeholder=stats.has_placeholder,
            next_id=stats.next_id,
        )

    @app.get("/todos", response_model=TodoListResponse, tags=["Todos"])
    async def list_todos() -> TodoListResponse:
        """List all items in their current order."""
        return _list_response(application.list_todos())

    @app.post(
        "/todos",
        response_model=TodoModel,
        status_code=status.HTTP_201_CREATED,
        responses={422: {"model": ErrorResponse}},
        tags=["Todos"],
    )
    async def add_todo(request: CreateTodoRequest | None = None):
        """Add an item at the end of the list."""
        result = application.add_todo(request.title if request else "")
        if not result.success or result.item is None:
            return _error_response(result)
        return TodoModel.from_entity(result.item)

    @app.put(
        "/todos/{todo_id}",
        response_model=TodoModel,
        responses={404: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
        tags=["Todos"],
    )
    async def edit_todo(todo_id: int, request: EditTodoRequest):
        """Rename an item."""
        result = application.edit_todo(TodoId(todo_id), request.title)
        if not result.success or result.item is None:
            return _error_response(result)
        return TodoModel.from_entity(result.item)

    @app.delete("/todos/{todo_id}", response_model=TodoListResponse, tags=["Todos"])
    async def delete_todo(todo_id: int):
        """Delete an item. Deleting a missing item is not an error."""
        result = application.delete_todo(TodoId(todo_id))
        if not result.success:
            return _error_response(result)
        return _list_response(result)

    @app.post("/todos/sort", response_model=TodoListResponse, tags=["Todos"])
    async def sort_todos(ascending: bool | None = None):
        """Sort items by title, ignoring case.

        Without ``ascending`` the direction alternates between calls.
        """
        result = application.sort_todos(ascending)
        if not result.success:
            return _error_response(result)
        return _list_response(result)

    return app


def run_server(
    application: TodoApplication,
    host: str = "127.0.0.1",
    port: int = 8000,
) -> None:
    """Run the REST API server.

    Args:
        application: The application facade.
        host: Host to bind to.
        port: Port to bind to.
    """
    import uvicorn

    app = create_app(application)
    uvicorn.run(app, host=host, port=port)


def main() -> None:
    """Console entry point: configure observability and serve the API."""
    config = get_config()
    observability = config.observability

    setup_logging(
        observability.log_level,
        observability.log_format,
        service_name=observability.otel_service_name,
    )
    setup_tracing(
        observability.otel_service_name,
        observability.otel_endpoint,
        console_export=observability.otel_console_export,
    )
    metrics = setup_metrics(observability.metrics_port) if observability.metrics_enabled else None

    application = TodoApplication.from_config(config, metrics=metrics)
    logger.info("todo_server_starting", host=config.server.host, port=config.server.port)
    run_server(application, host=config.server.host, port=config.server.port)


if __name__ == "__main__":
    main()
