"""Outbound adapters - implementations of outbound ports.

These adapters implement the TodoStorage port against concrete media.
"""

from todo_list.adapters.outbound.json_file_storage import JsonFileTodoStorage
from todo_list.adapters.outbound.memory_storage import InMemoryTodoStorage
from todo_list.adapters.outbound.todo_codec import (
    decode_todos,
    dumps_todos,
    encode_todos,
    loads_todos,
)

__all__ = [
    "JsonFileTodoStorage",
    "InMemoryTodoStorage",
    "encode_todos",
    "decode_todos",
    "dumps_todos",
    "loads_todos",
]
