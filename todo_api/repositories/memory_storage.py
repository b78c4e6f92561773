"""In-memory TodoStorage, used by tests and anything that must not touch disk."""
from __future__ import annotations

from contextlib import contextmanager
from typing import Iterable, Iterator, List, Sequence
import threading

from todo_api.domain.todos import Todo


class InMemoryTodoStorage:
    """
    Test double for JSONTodoStorage. ``saves`` counts save_all calls so tests
    can assert that rejected requests never wrote anything.
    """

    def __init__(self, todos: Iterable[Todo] = ()) -> None:
        self._todos: List[Todo] = [todo.model_copy() for todo in todos]
        self._lock = threading.RLock()
        self.saves = 0

    @contextmanager
    def locked(self) -> Iterator[None]:
        with self._lock:
            yield

    def ensure_initialized(self) -> None:
        return None

    def load_all(self) -> List[Todo]:
        # Copies, so callers only see their changes after save_all.
        return [todo.model_copy() for todo in self._todos]

    def save_all(self, todos: Sequence[Todo]) -> None:
        self._todos = [todo.model_copy() for todo in todos]
        self.saves += 1
