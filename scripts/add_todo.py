#!/usr/bin/env python3
"""
Add a todo directly to the JSON data file.

Usage:
  python scripts/add_todo.py --title "Buy milk" [--completed] [--file path/to/todos.json]
"""
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from todo_api.core.config import get_settings  # noqa: E402
from todo_api.domain.todos import TodoCreate  # noqa: E402
from todo_api.repositories.json_storage import JSONTodoStorage, StorageError  # noqa: E402
from todo_api.services.todo_service import TodoError, TodoService  # noqa: E402


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Add a todo to the JSON data file")
    ap.add_argument("--title", required=True, help="Todo title (must not be empty)")
    ap.add_argument("--completed", action="store_true", help="Mark the new todo as done")
    ap.add_argument("--file", help="Data file (default: TODO_DATA_FILE or ./todos.json)")
    args = ap.parse_args(argv)

    path = Path(args.file) if args.file else get_settings().data_file
    storage = JSONTodoStorage(path)
    storage.ensure_initialized()
    svc = TodoService(storage)
    try:
        todo = svc.create_todo(TodoCreate(title=args.title, completed=args.completed))
    except (TodoError, StorageError) as exc:
        sys.stderr.write(f"Error: {exc}\n")
        return 1
    print(json.dumps(todo.to_json(), ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
