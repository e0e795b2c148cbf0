"""Inbound adapters for the todo list.

Inbound adapters handle incoming requests and convert them to
application commands.

Exports:
    REST API:
        - create_app: Create a FastAPI application
        - run_server: Run the REST API server
"""

from todo_list.adapters.inbound.rest_api import (
    CreateTodoRequest,
    EditTodoRequest,
    ErrorResponse,
    TodoListResponse,
    TodoModel,
    create_app,
    run_server,
)

__all__ = [
    "create_app",
    "run_server",
    "TodoModel",
    "CreateTodoRequest",
    "EditTodoRequest",
    "TodoListResponse",
    "ErrorResponse",
]
