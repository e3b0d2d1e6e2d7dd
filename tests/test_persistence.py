"""Storage backends and the persistence adapter."""

from __future__ import annotations

import pytest

from aistudy.state import FileStorage, MemoryStorage, PersistenceAdapter, StorageError, StorageFullError


class TestMemoryStorage:
    def test_missing_key(self):
        assert MemoryStorage().get_item("k") is None

    def test_quota(self):
        s = MemoryStorage(quota_bytes=8)
        with pytest.raises(StorageFullError):
            s.set_item("k", "0123456789")


class TestFileStorage:
    def test_write_read(self, tmp_path):
        s = FileStorage(tmp_path / "nested" / "dir")
        s.set_item("glassy_v3_data", '{"a": "é"}')
        assert s.get_item("glassy_v3_data") == '{"a": "é"}'
        assert (tmp_path / "nested" / "dir" / "glassy_v3_data.json").exists()

    def test_missing_file_is_absent(self, tmp_path):
        assert FileStorage(tmp_path).get_item("nope") is None

    def test_no_temp_files_left(self, tmp_path):
        s = FileStorage(tmp_path)
        s.set_item("k", "1")
        s.set_item("k", "2")
        assert [p.name for p in tmp_path.iterdir()] == ["k.json"]

    def test_quota_leaves_previous_value(self, tmp_path):
        s = FileStorage(tmp_path, quota_bytes=32)
        s.set_item("k", "small")
        with pytest.raises(StorageFullError):
            s.set_item("k", "x" * 100)
        assert s.get_item("k") == "small"

    def test_unwritable_directory(self, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("not a dir")
        with pytest.raises(StorageError):
            FileStorage(blocker).set_item("k", "v")

    def test_remove(self, tmp_path):
        s = FileStorage(tmp_path)
        s.set_item("k", "v")
        s.remove_item("k")
        s.remove_item("k")
        assert s.get_item("k") is None


class TestPersistenceAdapter:
    def test_load_absent(self):
        assert PersistenceAdapter(MemoryStorage(), "k").load() is None

    def test_save_then_load(self):
        p = PersistenceAdapter(MemoryStorage(), "k")
        result = p.save("{}")
        assert result.ok and result.size == 2
        assert p.load() == "{}"

    def test_save_failure_not_raised(self, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("x")
        result = PersistenceAdapter(FileStorage(blocker), "k").save("{}")
        assert result.ok is False
        assert result.error.startswith("StorageError")

    def test_quota_failure_not_raised(self):
        result = PersistenceAdapter(MemoryStorage(quota_bytes=1), "k").save("{}")
        assert not result
        assert result.error.startswith("StorageFullError")

    def test_unreadable_file_loads_as_absent(self, tmp_path):
        (tmp_path / "k.json").write_bytes(b"\xff\xfe\x00bad")
        assert PersistenceAdapter(FileStorage(tmp_path), "k").load() is None


class TestDefaultKey:
    def test_uses_configured_storage_key(self):
        storage = MemoryStorage()
        PersistenceAdapter(storage).save("{}")
        assert storage.get_item("glassy_v3_data") == "{}"
