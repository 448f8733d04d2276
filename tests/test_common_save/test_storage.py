import pytest
from common_save.errors import StorageError
from common_save.kvstore import MemoryKeyValueStore
from common_save.storage import (
    FileStorage,
    WebStorage,
    StorageMode,
    create_storage,
    COMMON_SAVE_FILENAME,
    COMMON_SAVE_KEY,
)

@pytest.fixture(params=["file", "web"])
def storage(request, save_dir, kv_store):
    if request.param == "file":
        return FileStorage(save_dir)
    return WebStorage(kv_store)

def test_fresh_storage_is_empty(storage):
    assert storage.exists() is False
    assert storage.load() is None

def test_save_then_load(storage):
    storage.save("blob-1")
    assert storage.exists() is True
    assert storage.load() == "blob-1"

def test_save_overwrites(storage):
    storage.save("blob-1")
    storage.save("blob-2")
    assert storage.load() == "blob-2"

def test_remove_is_idempotent(storage):
    storage.remove()
    storage.save("blob")
    storage.remove()
    storage.remove()
    assert storage.exists() is False
    assert storage.load() is None

def test_file_storage_creates_directory(save_dir):
    storage = FileStorage(save_dir)
    assert not save_dir.exists()

    storage.save("blob")

    assert (save_dir / COMMON_SAVE_FILENAME).read_text() == "blob"
    # No temp files left behind
    assert [p.name for p in save_dir.iterdir()] == [COMMON_SAVE_FILENAME]

def test_file_storage_write_failure(tmp_path):
    blocker = tmp_path / "save"
    blocker.write_text("not a directory")

    with pytest.raises(StorageError):
        FileStorage(blocker).save("blob")

def test_web_storage_uses_fixed_key(kv_store):
    WebStorage(kv_store).save("blob")
    assert kv_store.get_item(COMMON_SAVE_KEY) == "blob"

def test_web_storage_empty_value_does_not_exist(kv_store):
    kv_store.set_item(COMMON_SAVE_KEY, "")
    assert WebStorage(kv_store).exists() is False

def test_create_storage(save_dir, kv_store):
    file_storage = create_storage(StorageMode.FILE, save_dir)
    assert isinstance(file_storage, FileStorage)
    assert file_storage.path == save_dir / COMMON_SAVE_FILENAME

    web_storage = create_storage(StorageMode.WEB, kv_store=kv_store)
    assert isinstance(web_storage, WebStorage)
    assert web_storage.store is kv_store

def test_create_web_storage_without_store():
    storage = create_storage(StorageMode.WEB)
    assert isinstance(storage.store, MemoryKeyValueStore)
