"""Tests for local visitor storage."""

import json

import pytest

from app.visitors import FileStorage, MemoryStorage, safe_get, safe_set


class TestFileStorage:
    def test_missing_file_reads_none(self, tmp_path):
        assert FileStorage(tmp_path / "storage.json").get_item("k") is None

    def test_values_survive_new_instance(self, tmp_path):
        path = tmp_path / "nested" / "storage.json"
        FileStorage(path).set_item("a", "1")
        FileStorage(path).set_item("b", "2")

        storage = FileStorage(path)
        assert storage.get_item("a") == "1"
        assert storage.get_item("b") == "2"
        assert json.loads(path.read_text()) == {"a": "1", "b": "2"}

    def test_no_temp_file_left_behind(self, tmp_path):
        FileStorage(tmp_path / "storage.json").set_item("a", "1")
        assert [p.name for p in tmp_path.iterdir()] == ["storage.json"]

    def test_corrupted_file_raises(self, tmp_path):
        path = tmp_path / "storage.json"
        path.write_text('["a", "b"]')
        with pytest.raises(ValueError):
            FileStorage(path).get_item("a")


class TestSafeAccess:
    def test_safe_get_swallows_errors(self, tmp_path):
        path = tmp_path / "storage.json"
        path.write_text("{broken")
        assert safe_get(FileStorage(path), "a") is None

    def test_safe_set_swallows_errors(self, tmp_path):
        # Parent is a regular file, so the directory cannot be created
        blocker = tmp_path / "blocker"
        blocker.write_text("")
        safe_set(FileStorage(blocker / "storage.json"), "a", "1")

    def test_memory_storage(self):
        storage = MemoryStorage()
        safe_set(storage, "a", "1")
        assert safe_get(storage, "a") == "1"
        assert safe_get(storage, "b") is None
