from __future__ import annotations

import json

import pytest

from src.absence_tracker.absence_tracker.storage.json_file_store import JsonFileKeyValueStore
from src.absence_tracker.absence_tracker.storage.memory_store import InMemoryKeyValueStore
from src.absence_tracker.absence_tracker.students.kv_student_repository import KeyValueStudentRepository
from src.absence_tracker.absence_tracker.students.model import Student
from src.absence_tracker.absence_tracker.students.service import RosterService


def test_memory_store_get_set_remove():
    store = InMemoryKeyValueStore()

    assert store.get_item("k") is None
    store.set_item("k", "v")
    assert store.get_item("k") == "v"
    store.remove_item("k")
    store.remove_item("k")
    assert store.get_item("k") is None


def test_json_file_store_missing_file(tmp_path):
    store = JsonFileKeyValueStore(tmp_path / "nope.json")
    assert store.get_item("k") is None


def test_json_file_store_persists_across_instances(tmp_path):
    path = tmp_path / "data" / "faltas.json"
    JsonFileKeyValueStore(path).set_item("a", "1")
    JsonFileKeyValueStore(path).set_item("b", "2")

    reopened = JsonFileKeyValueStore(path)
    assert reopened.get_item("a") == "1"
    assert reopened.get_item("b") == "2"
    assert json.loads(path.read_text(encoding="utf-8")) == {"a": "1", "b": "2"}


def test_json_file_store_remove(tmp_path):
    store = JsonFileKeyValueStore(tmp_path / "s.json")
    store.set_item("a", "1")
    store.remove_item("a")

    assert store.get_item("a") is None


def test_json_file_store_replaces_unreadable_file_on_write(tmp_path):
    path = tmp_path / "s.json"
    path.write_text("[1, 2", encoding="utf-8")
    store = JsonFileKeyValueStore(path)

    store.set_item("a", "1")

    assert store.get_item("a") == "1"


def test_roster_survives_restart_with_json_file(tmp_path):
    path = tmp_path / "faltas.json"

    first = RosterService(KeyValueStudentRepository(JsonFileKeyValueStore(path)))
    first.add_student("Ana", "1")
    first.update_absences("1", "2,5")

    second = RosterService(KeyValueStudentRepository(JsonFileKeyValueStore(path)))
    assert second.students == (Student(id="1", name="Ana", absences=2.5),)


def test_roster_starts_empty_on_corrupted_file(tmp_path):
    path = tmp_path / "faltas.json"
    path.write_text("garbage", encoding="utf-8")

    roster = RosterService(KeyValueStudentRepository(JsonFileKeyValueStore(path)))

    assert roster.students == ()


def test_json_file_store_failed_write_keeps_previous_file(tmp_path, monkeypatch):
    path = tmp_path / "s.json"
    store = JsonFileKeyValueStore(path)
    store.set_item("a", "1")

    def fail_replace(src, dst):
        raise OSError("disk full")

    monkeypatch.setattr("src.absence_tracker.absence_tracker.storage.json_file_store.os.replace", fail_replace)

    with pytest.raises(OSError):
        store.set_item("a", "2")

    assert json.loads(path.read_text(encoding="utf-8")) == {"a": "1"}
    assert [p.name for p in tmp_path.iterdir()] == ["s.json"]
