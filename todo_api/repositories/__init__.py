"""
Persistence adapters.

Services depend on the TodoStorage interface below rather than on a concrete
file, so tests can swap the JSON file for the in-memory implementation.
"""
from __future__ import annotations

from typing import ContextManager, List, Protocol, Sequence

from todo_api.domain.todos import Todo


class TodoStorage(Protocol):
    def ensure_initialized(self) -> None: ...

    def load_all(self) -> List[Todo]: ...

    def save_all(self, todos: Sequence[Todo]) -> None: ...

    def locked(self) -> ContextManager[None]: ...
