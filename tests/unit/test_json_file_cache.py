"""Unit tests for the JSON file cache store."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from src.providers.cache.json_file_cache import JsonFileCacheStore
from src.utils.errors import CacheStoreError


# ======================================================================
# load
# ======================================================================


class TestLoad:
    def test_missing_file_is_empty(self, cache_path: Path) -> None:
        store = JsonFileCacheStore(cache_path)
        assert store.load() == {}

    def test_reads_existing_mapping(self, cache_path: Path) -> None:
        cache_path.write_text(json.dumps({"甲公司": "91110000XXXXXXXXXX"}), encoding="utf-8")
        store = JsonFileCacheStore(cache_path)
        assert store.load() == {"甲公司": "91110000XXXXXXXXXX"}

    def test_corrupt_json_is_cold_start(self, cache_path: Path) -> None:
        cache_path.write_text('{"Acme Co": "91', encoding="utf-8")
        store = JsonFileCacheStore(cache_path)
        assert store.load() == {}

    def test_non_object_json_is_cold_start(self, cache_path: Path) -> None:
        cache_path.write_text('["Acme Co", "91XXXXXXXX"]', encoding="utf-8")
        store = JsonFileCacheStore(cache_path)
        assert store.load() == {}

    def test_undecodable_bytes_is_cold_start(self, cache_path: Path) -> None:
        cache_path.write_bytes(b"\xff\xfe\x00garbage")
        store = JsonFileCacheStore(cache_path)
        assert store.load() == {}

    def test_directory_in_place_of_file_is_fatal(self, cache_path: Path) -> None:
        cache_path.mkdir()
        store = JsonFileCacheStore(cache_path)
        with pytest.raises(CacheStoreError):
            store.load()

    def test_permission_denied_is_fatal(self, cache_path: Path) -> None:
        cache_path.write_text("{}", encoding="utf-8")
        store = JsonFileCacheStore(cache_path)
        with patch.object(Path, "read_text", side_effect=PermissionError("denied")):
            with pytest.raises(CacheStoreError, match="denied"):
                store.load()


# ======================================================================
# get / put_and_persist
# ======================================================================


class TestPutAndPersist:
    def test_get_returns_none_for_unknown_key(self, cache_path: Path) -> None:
        store = JsonFileCacheStore(cache_path)
        assert store.get({"a": 1}, "b") is None
        assert store.get({"a": 1}, "a") == 1

    def test_write_is_visible_on_disk_immediately(self, cache_path: Path) -> None:
        store = JsonFileCacheStore(cache_path)
        mapping = store.load()

        store.put_and_persist(mapping, "Acme Co", "91XXXXXXXX")

        assert mapping == {"Acme Co": "91XXXXXXXX"}
        assert json.loads(cache_path.read_text(encoding="utf-8")) == {"Acme Co": "91XXXXXXXX"}

    def test_each_write_rewrites_whole_mapping(self, cache_path: Path) -> None:
        store = JsonFileCacheStore(cache_path)
        mapping = store.load()

        store.put_and_persist(mapping, "a", "1")
        store.put_and_persist(mapping, "b", {"code": "000001", "shareholders": []})

        on_disk = JsonFileCacheStore(cache_path).load()
        assert on_disk == {"a": "1", "b": {"code": "000001", "shareholders": []}}

    def test_non_ascii_names_are_stored_verbatim(self, cache_path: Path) -> None:
        store = JsonFileCacheStore(cache_path)
        store.put_and_persist({}, "平安银行股份有限公司", "91440300192185379H")
        assert "平安银行股份有限公司" in cache_path.read_text(encoding="utf-8")

    def test_no_temporary_file_left_behind(self, cache_path: Path) -> None:
        store = JsonFileCacheStore(cache_path)
        store.put_and_persist({}, "a", "1")
        assert sorted(p.name for p in cache_path.parent.iterdir()) == [cache_path.name]

    def test_write_failure_raises(self, tmp_path: Path) -> None:
        store = JsonFileCacheStore(tmp_path / "missing-dir" / "cache.json")
        with pytest.raises(CacheStoreError):
            store.put_and_persist({}, "a", "1")

    def test_failed_replace_removes_temporary_file(self, cache_path: Path) -> None:
        cache_path.mkdir()
        store = JsonFileCacheStore(cache_path)

        with pytest.raises(CacheStoreError):
            store.put_and_persist({}, "a", "1")

        assert not cache_path.with_name(cache_path.name + ".tmp").exists()
