from __future__ import annotations

import importlib.util
import json
import sys
from pathlib import Path

# Make the todo_api package importable when running tests locally
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

_spec = importlib.util.spec_from_file_location("add_todo", ROOT / "scripts" / "add_todo.py")
add_todo = importlib.util.module_from_spec(_spec)
_spec.loader.exec_module(add_todo)


def test_add_todo_appends_to_file(tmp_path, capsys):
    data_file = tmp_path / "todos.json"

    assert add_todo.main(["--title", "Buy milk", "--file", str(data_file)]) == 0
    assert add_todo.main(["--title", "Walk dog", "--completed", "--file", str(data_file)]) == 0

    stored = json.loads(data_file.read_text(encoding="utf-8"))
    assert [(t["title"], t["completed"]) for t in stored] == [("Buy milk", False), ("Walk dog", True)]
    printed = capsys.readouterr().out
    assert stored[0]["id"] in printed


def test_add_todo_rejects_empty_title(tmp_path, capsys):
    data_file = tmp_path / "todos.json"
    assert add_todo.main(["--title", "", "--file", str(data_file)]) == 1
    assert "Title is required" in capsys.readouterr().err
    assert json.loads(data_file.read_text(encoding="utf-8")) == []


def test_add_todo_keeps_title_verbatim(tmp_path):
    data_file = tmp_path / "todos.json"
    assert add_todo.main(["--title", "  padded  ", "--file", str(data_file)]) == 0
    assert json.loads(data_file.read_text(encoding="utf-8"))[0]["title"] == "  padded  "
