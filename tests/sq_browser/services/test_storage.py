from __future__ import annotations

import pytest

from sq_browser.services.storage import InMemoryKeyValueStore, LocalFileKeyValueStore


def test_in_memory_store_basic_ops():
    store = InMemoryKeyValueStore({"a": "1", "ignored": 5})
    assert store.keys() == ["a"]
    assert store.get_item("a") == "1"
    assert store.get_item("missing") is None

    store.set_item("b", "2")
    store.remove_item("a")
    store.remove_item("never-there")
    assert store.snapshot() == {"b": "2"}


def test_local_file_store_round_trip(tmp_path):
    store = LocalFileKeyValueStore(tmp_path / "kv")
    assert store.get_item("savedStockQueries") is None

    store.set_item("savedStockQueries", "[]")
    assert store.get_item("savedStockQueries") == "[]"
    assert (tmp_path / "kv" / "savedStockQueries.json").is_file()
    assert store.keys() == ["savedStockQueries"]

    store.remove_item("savedStockQueries")
    assert store.keys() == []


def test_local_file_store_overwrite_leaves_no_temp_file(tmp_path):
    store = LocalFileKeyValueStore(tmp_path)
    store.set_item("k", "one")
    store.set_item("k", "two")
    assert store.get_item("k") == "two"
    assert sorted(p.name for p in tmp_path.iterdir()) == ["k.json"]


@pytest.mark.parametrize("key", ["../escape", "a/b", "", "with space"])
def test_local_file_store_rejects_unsafe_keys(tmp_path, key):
    store = LocalFileKeyValueStore(tmp_path)
    with pytest.raises(ValueError):
        store.set_item(key, "x")
