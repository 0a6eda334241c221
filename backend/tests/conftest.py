"""Shared fixtures — every storage test runs once per backend."""

import pytest
import pytest_asyncio

from repair_shop.application.interfaces import StorageBackend
from repair_shop.infrastructure.database import SQLAlchemyStorageBackend
from repair_shop.infrastructure.keyvalue import KeyValueStorageBackend


@pytest_asyncio.fixture(params=["sql", "keyvalue"])
async def backend(request, tmp_path) -> StorageBackend:
    """An initialized backend on a fresh, private medium."""
    if request.param == "sql":
        storage = SQLAlchemyStorageBackend(f"sqlite:///{tmp_path / 'test.db'}")
    else:
        storage = KeyValueStorageBackend(tmp_path / "store.json")
    await storage.initialize()
    yield storage
    await storage.dispose()


@pytest.fixture
def memory_backend() -> KeyValueStorageBackend:
    """In-memory key-value backend; nothing touches the filesystem."""
    return KeyValueStorageBackend()
