"""Tests for key-value stores."""

import json

from quadratic_pkg.storage import JsonFileStore, MemoryStore


class TestMemoryStore:
    def test_get_set_delete(self):
        store = MemoryStore()
        assert store.get("k") is None
        store.set("k", "v")
        assert store.get("k") == "v"
        assert "k" in store
        store.delete("k")
        assert store.get("k") is None
        store.delete("k")  # deleting a missing key is a no-op


class TestJsonFileStore:
    def test_persists_across_instances(self, tmp_path):
        path = tmp_path / "store.json"
        JsonFileStore(path).set("theme", "light")
        assert JsonFileStore(path).get("theme") == "light"

    def test_creates_parent_directories(self, tmp_path):
        path = tmp_path / "nested" / "dir" / "store.json"
        JsonFileStore(path).set("k", "v")
        assert path.exists()
        assert json.loads(path.read_text(encoding="utf-8")) == {"k": "v"}

    def test_missing_file_reads_empty(self, tmp_path):
        assert JsonFileStore(tmp_path / "absent.json").get("k") is None

    def test_corrupt_file_reads_empty(self, tmp_path, caplog):
        path = tmp_path / "store.json"
        path.write_text("{not json", encoding="utf-8")
        store = JsonFileStore(path)
        assert store.get("k") is None
        assert "Failed to read store" in caplog.text
        store.set("k", "v")
        assert store.get("k") == "v"

    def test_deeply_nested_file_reads_empty(self, tmp_path, caplog):
        path = tmp_path / "store.json"
        path.write_text("[" * 100000, encoding="utf-8")
        assert JsonFileStore(path).get("k") is None
        assert "Failed to read store" in caplog.text

    def test_non_object_file_reads_empty(self, tmp_path):
        path = tmp_path / "store.json"
        path.write_text("[1, 2, 3]", encoding="utf-8")
        assert JsonFileStore(path).get("0") is None

    def test_delete(self, tmp_path):
        store = JsonFileStore(tmp_path / "store.json")
        store.set("a", "1")
        store.set("b", "2")
        store.delete("a")
        assert store.get("a") is None
        assert store.get("b") == "2"

    def test_no_temp_file_left_behind(self, tmp_path):
        store = JsonFileStore(tmp_path / "store.json")
        store.set("k", "v")
        assert not (tmp_path / "store.tmp").exists()
