"""Unit tests for the JSON-file key-value medium and backend."""

import json

import pytest

from repair_shop.domain.entities import CLIENT_SCHEMA
from repair_shop.domain.exceptions import StorageError
from repair_shop.infrastructure.keyvalue import JsonFileKeyValueStore, KeyValueStorageBackend


def test_values_are_namespaced_on_disk(tmp_path):
    path = tmp_path / "kv.json"
    store = JsonFileKeyValueStore(path, namespace="shop")
    store.set_many({"clients": {"next_id": 2, "rows": {}}})

    on_disk = json.loads(path.read_text("utf-8"))
    assert on_disk == {"shop:clients": {"next_id": 2, "rows": {}}}
    assert store.keys() == ["clients"]


def test_get_returns_a_private_copy(tmp_path):
    store = JsonFileKeyValueStore(tmp_path / "kv.json")
    store.set_many({"k": {"rows": {}}})

    value = store.get("k")
    value["rows"]["1"] = "mutated"
    assert store.get("k") == {"rows": {}}
    assert store.get("missing") is None


def test_namespaces_do_not_collide(tmp_path):
    path = tmp_path / "kv.json"
    first = JsonFileKeyValueStore(path, namespace="a")
    first.set_many({"k": 1})

    second = JsonFileKeyValueStore(path, namespace="b")
    second.load()
    assert second.get("k") is None
    assert second.keys() == []


def test_delete(tmp_path):
    store = JsonFileKeyValueStore(tmp_path / "kv.json")
    store.set_many({"k": 1, "j": 2})
    store.delete("k")

    reloaded = JsonFileKeyValueStore(tmp_path / "kv.json")
    reloaded.load()
    assert reloaded.keys() == ["j"]


def test_missing_file_loads_empty(tmp_path):
    store = JsonFileKeyValueStore(tmp_path / "absent.json")
    store.load()
    assert store.keys() == []


def test_corrupt_file_raises_storage_error(tmp_path):
    path = tmp_path / "kv.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(StorageError):
        JsonFileKeyValueStore(path).load()


def test_non_object_file_raises_storage_error(tmp_path):
    path = tmp_path / "kv.json"
    path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(StorageError):
        JsonFileKeyValueStore(path).load()


def test_in_memory_store_writes_nothing(tmp_path):
    store = JsonFileKeyValueStore()
    store.set_many({"k": 1})
    assert store.path is None
    assert store.get("k") == 1
    assert list(tmp_path.iterdir()) == []


@pytest.mark.asyncio
async def test_records_survive_a_restart(tmp_path):
    path = tmp_path / "shop.json"
    backend = KeyValueStorageBackend(path)
    await backend.initialize()
    async with backend.session() as session:
        created = await session.store(CLIENT_SCHEMA).insert({"name": "Escola Centro", "phone": "1"})

    restarted = KeyValueStorageBackend(path)
    await restarted.initialize()
    async with restarted.session() as session:
        record = await session.store(CLIENT_SCHEMA).get(created["id"])
        second = await session.store(CLIENT_SCHEMA).insert({"name": "IFBA", "phone": "2"})

    assert record == created
    assert second["id"] == created["id"] + 1


@pytest.mark.asyncio
async def test_rolled_back_unit_of_work_is_not_persisted(tmp_path):
    path = tmp_path / "shop.json"
    backend = KeyValueStorageBackend(path)
    await backend.initialize()

    with pytest.raises(RuntimeError):
        async with backend.session() as session:
            await session.store(CLIENT_SCHEMA).insert({"name": "Ghost", "phone": "1"})
            raise RuntimeError("abort")

    assert not path.exists()
