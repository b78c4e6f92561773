"""
JSON-file persistence for the todo collection.

The whole collection lives in one file as a JSON array and is read and
rewritten as a unit. Writes go through a temp file in the same directory
followed by os.replace, so readers never observe a half-written document.
"""

from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Sequence
import json
import logging
import os
import tempfile
import threading

from pydantic import ValidationError

from todo_api.domain.todos import Todo

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Base exception for the persistence layer."""


class CorruptStorageError(StorageError):
    """Raised when the data file exists but does not hold a todo list."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class JSONTodoStorage:
    """Reads/writes the todo collection from a single JSON file."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        self._lock = threading.RLock()

    @contextmanager
    def locked(self) -> Iterator[None]:
        with self._lock:
            yield

    def ensure_initialized(self) -> None:
        with self._lock:
            if self.path.exists():
                return
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text("[]", encoding="utf-8")
            logger.info("Created empty todo file at %s", self.path)

    def load_all(self) -> List[Todo]:
        with self._lock:
            try:
                raw = self.path.read_text(encoding="utf-8")
            except FileNotFoundError:
                return []
            except UnicodeDecodeError as exc:
                raise self._corrupt(f"not valid UTF-8 (byte {exc.start})") from exc
        if not raw.strip():
            return []
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise self._corrupt(f"invalid JSON ({exc.msg} at line {exc.lineno})") from exc
        if not isinstance(data, list):
            raise self._corrupt(f"expected a JSON array, found {type(data).__name__}")
        try:
            return [Todo.model_validate(item) for item in data]
        except ValidationError as exc:
            raise self._corrupt(f"invalid todo entry ({exc.error_count()} errors)") from exc

    def save_all(self, todos: Sequence[Todo]) -> None:
        payload = json.dumps([todo.to_json() for todo in todos], ensure_ascii=False, indent=2)
        with self._lock:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent)
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as fh:
                    fh.write(payload)
                    fh.flush()
                    os.fsync(fh.fileno())
                os.replace(tmp_name, self.path)
            except BaseException:
                try:
                    os.unlink(tmp_name)
                except FileNotFoundError:
                    pass
                raise

    def _corrupt(self, reason: str) -> CorruptStorageError:
        logger.error("Todo file %s is unreadable: %s", self.path, reason)
        return CorruptStorageError(self.path, reason)
