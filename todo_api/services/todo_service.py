"""Todo use cases: list, create, update, delete over the whole collection."""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from typing import Callable, List, Optional

from todo_api.domain.todos import Todo, TodoCreate, TodoUpdate, iso_timestamp
from todo_api.repositories import TodoStorage

logger = logging.getLogger(__name__)


class TodoError(Exception):
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class TodoValidationError(TodoError):
    """Raised when a payload does not satisfy the create rules."""


class TodoNotFoundError(TodoError):
    """Raised when no todo carries the requested id."""

    status_code = 404

    def __init__(self, todo_id: str):
        super().__init__("Todo not found")
        self.todo_id = todo_id


def _new_id() -> str:
    return uuid.uuid4().hex


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TodoService:
    """Each call loads the full collection and, for writes, saves it back."""

    def __init__(
        self,
        storage: TodoStorage,
        *,
        id_factory: Callable[[], str] = _new_id,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self.storage = storage
        self._id_factory = id_factory
        self._clock = clock

    def list_todos(self) -> List[Todo]:
        return self.storage.load_all()

    def create_todo(self, payload: Optional[TodoCreate]) -> Todo:
        if payload is None or not payload.title:
            raise TodoValidationError("Title is required")
        todo = Todo(
            id=self._id_factory(),
            title=payload.title,
            completed=bool(payload.completed),
            created_at=iso_timestamp(self._clock()),
        )
        with self.storage.locked():
            todos = self.storage.load_all()
            todos.append(todo)
            self.storage.save_all(todos)
        logger.info("Created todo %s", todo.id)
        return todo

    def update_todo(self, todo_id: str, payload: Optional[TodoUpdate]) -> Todo:
        changes = payload.changes() if payload is not None else {}
        with self.storage.locked():
            todos = self.storage.load_all()
            index = next((i for i, todo in enumerate(todos) if todo.id == todo_id), None)
            if index is None:
                raise TodoNotFoundError(todo_id)
            updated = todos[index].model_copy(update=changes)
            todos[index] = updated
            self.storage.save_all(todos)
        logger.info("Updated todo %s (%s)", todo_id, ", ".join(sorted(changes)) or "no changes")
        return updated

    def delete_todo(self, todo_id: str) -> None:
        with self.storage.locked():
            todos = self.storage.load_all()
            remaining = [todo for todo in todos if todo.id != todo_id]
            if len(remaining) == len(todos):
                raise TodoNotFoundError(todo_id)
            self.storage.save_all(remaining)
        logger.info("Deleted todo %s", todo_id)
