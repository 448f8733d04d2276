import pytest
from common_save.kvstore import MemoryKeyValueStore, SQLiteKeyValueStore

@pytest.fixture(params=["memory", "sqlite"])
def store(request, tmp_path):
    if request.param == "memory":
        return MemoryKeyValueStore()
    return SQLiteKeyValueStore(tmp_path / "storage" / "local.db")

def test_get_missing(store):
    assert store.get_item("RPG Common") is None

def test_set_get(store):
    store.set_item("RPG Common", "abc")
    assert store.get_item("RPG Common") == "abc"

def test_overwrite(store):
    store.set_item("RPG Common", "first")
    store.set_item("RPG Common", "second")
    assert store.get_item("RPG Common") == "second"

def test_remove(store):
    store.set_item("RPG Common", "abc")
    store.remove_item("RPG Common")
    store.remove_item("RPG Common")
    assert store.get_item("RPG Common") is None

def test_sqlite_persists_across_instances(tmp_path):
    path = tmp_path / "local.db"
    SQLiteKeyValueStore(path).set_item("RPG Common", "kept")

    assert SQLiteKeyValueStore(path).get_item("RPG Common") == "kept"
