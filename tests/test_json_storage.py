"""
Tests for the JSON-file storage accessor against files in tmp_path.
"""
from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

# Make the todo_api package importable when running tests locally
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from todo_api.domain.todos import Todo  # noqa: E402
from todo_api.repositories.json_storage import CorruptStorageError, JSONTodoStorage  # noqa: E402


def _todo(todo_id: str, title: str, completed: bool = False) -> Todo:
    return Todo(id=todo_id, title=title, completed=completed, created_at="2026-10-19T12:00:00.000Z")


@pytest.fixture()
def data_file(tmp_path):
    return tmp_path / "data" / "todos.json"


def test_ensure_initialized_creates_empty_array(data_file):
    storage = JSONTodoStorage(data_file)
    storage.ensure_initialized()
    assert data_file.exists()
    assert json.loads(data_file.read_text(encoding="utf-8")) == []
    assert storage.load_all() == []


def test_ensure_initialized_keeps_existing_contents(data_file):
    storage = JSONTodoStorage(data_file)
    storage.save_all([_todo("1", "A")])
    before = data_file.read_bytes()

    storage.ensure_initialized()
    storage.ensure_initialized()

    assert data_file.read_bytes() == before
    assert [t.title for t in storage.load_all()] == ["A"]


def test_missing_and_empty_files_load_as_empty(data_file):
    storage = JSONTodoStorage(data_file)
    assert storage.load_all() == []
    data_file.parent.mkdir(parents=True)
    data_file.write_text("  \n", encoding="utf-8")
    assert storage.load_all() == []


@pytest.mark.parametrize(
    "content",
    [
        "{not json",
        '{"id": "1"}',
        '[{"id": "1"}]',
    ],
)
def test_unreadable_documents_raise_corrupt_error(data_file, content):
    data_file.parent.mkdir(parents=True)
    data_file.write_text(content, encoding="utf-8")
    with pytest.raises(CorruptStorageError) as info:
        JSONTodoStorage(data_file).load_all()
    assert info.value.path == data_file


def test_save_all_pretty_prints_with_camel_case_keys(data_file):
    storage = JSONTodoStorage(data_file)
    storage.save_all([_todo("1", "Buy milk")])
    text = data_file.read_text(encoding="utf-8")
    assert text == json.dumps(
        [{"id": "1", "title": "Buy milk", "completed": False, "createdAt": "2026-10-19T12:00:00.000Z"}],
        indent=2,
    )


def test_round_trip_preserves_order_and_fields(data_file):
    todos = [_todo("b", "Second"), _todo("a", "First", completed=True), _todo("c", "Café")]
    JSONTodoStorage(data_file).save_all(todos)
    assert JSONTodoStorage(data_file).load_all() == todos


def test_save_all_leaves_no_temp_files(data_file):
    storage = JSONTodoStorage(data_file)
    storage.save_all([_todo("1", "A")])
    storage.save_all([_todo("1", "A"), _todo("2", "B")])
    assert sorted(p.name for p in data_file.parent.iterdir()) == ["todos.json"]


def test_invalid_utf8_raises_corrupt_error(data_file):
    data_file.parent.mkdir(parents=True)
    data_file.write_bytes(b'[{"id": "1", "title": "\xff", "completed": false, "createdAt": "x"}]')
    with pytest.raises(CorruptStorageError) as info:
        JSONTodoStorage(data_file).load_all()
    assert "UTF-8" in info.value.reason
