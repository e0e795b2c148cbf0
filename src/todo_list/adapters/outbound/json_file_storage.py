"""JSON file storage adapter.

This adapter implements the TodoStorage protocol on top of a single JSON
document on local disk. The document is a key-value map; the collection
occupies one key and any other keys are preserved across saves.

File Format:
    {
        "TODOS": [{"id": 1, "title": "Buy milk"}, {"id": 2, "title": ""}]
    }

Durability:
    Each save writes a temporary file in the target directory, flushes
    (and optionally fsyncs) it, then atomically replaces the document.
    A crash mid-save leaves the previous document intact.

Thread Safety:
    Loads and saves on one instance are serialized by an internal lock.
"""

from __future__ import annotations

import contextlib
import json
import os
import tempfile
import threading
from pathlib import Path
from typing import Any, Sequence

from todo_list.adapters.outbound.todo_codec import decode_todos, encode_todos
from todo_list.domain.entities.todo import Todo
from todo_list.infrastructure.logging import get_logger
from todo_list.infrastructure.tracing import trace_span
from todo_list.ports.outbound.todo_storage import DEFAULT_STORAGE_KEY, StorageError

logger = get_logger(__name__)


class JsonFileTodoStorage:
    """File-based implementation of the TodoStorage protocol.

    Attributes:
        file_path: Path to the JSON document.
        key: Storage key the collection lives under.
    """

    def __init__(
        self,
        file_path: str | Path,
        key: str = DEFAULT_STORAGE_KEY,
        fsync: bool = True,
    ) -> None:
        """Initialize the adapter. The file is not touched until first use.

        Args:
            file_path: Path to the JSON document; created on first save.
            key: Storage key for the collection.
            fsync: If True, fsync the temporary file before replacing.
        """
        self._file_path = Path(file_path)
        self._key = key
        self._fsync = fsync
        self._lock = threading.Lock()

    @property
    def file_path(self) -> Path:
        return self._file_path

    @property
    def key(self) -> str:
        return self._key

    def load(self) -> list[Todo]:
        """Load the collection.

        A missing file, a corrupt document, a missing key, or a malformed
        collection all read as empty.

        Raises:
            StorageError: If the file exists but cannot be read.
        """
        with self._lock:
            document = self._read_document()

        value = document.get(self._key)
        if value is None:
            return []

        try:
            return decode_todos(value)
        except ValueError as e:
            logger.warning(
                "todo_storage_unparseable",
                path=str(self._file_path),
                key=self._key,
                error=str(e),
            )
            return []

    def save(self, todos: Sequence[Todo]) -> None:
        """Replace the stored collection.

        Raises:
            StorageError: If the document cannot be written.
        """
        attributes = {"storage.key": self._key, "todo.count": len(todos)}
        with self._lock, trace_span("todo_storage.save", attributes):
            document = self._read_document()
            document[self._key] = encode_todos(todos)
            self._write_document(document)

    def _read_document(self) -> dict[str, Any]:
        """Read the whole key-value document. Must hold the lock."""
        try:
            text = self._file_path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except UnicodeDecodeError as e:
            logger.warning("todo_storage_corrupt", path=str(self._file_path), error=str(e))
            return {}
        except OSError as e:
            raise StorageError(f"Failed to read {self._file_path}: {e}") from e

        if not text.strip():
            return {}

        try:
            document = json.loads(text)
        except (json.JSONDecodeError, RecursionError) as e:
            logger.warning("todo_storage_corrupt", path=str(self._file_path), error=str(e))
            return {}

        if not isinstance(document, dict):
            logger.warning(
                "todo_storage_corrupt",
                path=str(self._file_path),
                error=f"document is a {type(document).__name__}, expected an object",
            )
            return {}

        return document

    def _write_document(self, document: dict[str, Any]) -> None:
        """Atomically write the document. Must hold the lock."""
        directory = self._file_path.parent
        try:
            directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=directory, prefix=f".{self._file_path.name}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    json.dump(document, handle, ensure_ascii=False, indent=2)
                    handle.flush()
                    if self._fsync:
                        os.fsync(handle.fileno())
                os.replace(tmp_name, self._file_path)
            except BaseException:
                with contextlib.suppress(FileNotFoundError):
                    os.unlink(tmp_name)
                raise
        except OSError as e:
            raise StorageError(f"Failed to write {self._file_path}: {e}") from e
