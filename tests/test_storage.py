from __future__ import annotations

import json
from pathlib import Path

from user_directory.storage import JsonFileStorage, MemoryStorage


def test_memory_storage_roundtrip():
    s = MemoryStorage()
    assert s.get_item("users") is None
    s.set_item("users", "[]")
    assert s.get_item("users") == "[]"
    assert s.write_count == 1
    s.remove_item("users")
    assert s.get_item("users") is None


def test_json_file_storage_persists_across_instances(tmp_path: Path):
    path = tmp_path / "nested" / "local_storage.json"
    JsonFileStorage(path).set_item("users", "[1]")
    JsonFileStorage(path).set_item("other", "x")

    fresh = JsonFileStorage(path)
    assert fresh.get_item("users") == "[1]"
    assert fresh.get_item("other") == "x"
    assert json.loads(path.read_text(encoding="utf-8")) == {"users": "[1]", "other": "x"}


def test_json_file_storage_remove(tmp_path: Path):
    s = JsonFileStorage(tmp_path / "ls.json")
    s.set_item("users", "[]")
    s.remove_item("users")
    s.remove_item("missing")
    assert s.get_item("users") is None


def test_corrupt_file_reads_as_empty(tmp_path: Path):
    path = tmp_path / "ls.json"
    path.write_text("{not json", encoding="utf-8")
    s = JsonFileStorage(path)
    assert s.get_item("users") is None
    s.set_item("users", "[]")
    assert s.get_item("users") == "[]"


def test_non_object_file_reads_as_empty(tmp_path: Path):
    path = tmp_path / "ls.json"
    path.write_text("[1, 2]", encoding="utf-8")
    assert JsonFileStorage(path).get_item("users") is None
