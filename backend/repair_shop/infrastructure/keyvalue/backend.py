"""Key-value fallback backend and its unit of work."""

import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any

from repair_shop.application.interfaces import RecordStore, StorageBackend, StorageSession
from repair_shop.domain.entity_schema import EntitySchema
from repair_shop.infrastructure.keyvalue.json_file_store import JsonFileKeyValueStore
from repair_shop.infrastructure.keyvalue.record_store import KeyValueRecordStore

logger = logging.getLogger(__name__)


class KeyValueStorageSession(StorageSession):
    """Unit of work over private copies of the table blobs it touches.

    Nothing reaches the medium until ``commit``; ``rollback`` just drops
    the copies.
    """

    def __init__(self, medium: JsonFileKeyValueStore):
        self._medium = medium
        self._tables: dict[str, dict[str, Any]] = {}
        self._dirty: set[str] = set()
        self._stores: dict[str, RecordStore] = {}

    def table(self, name: str) -> dict[str, Any]:
        if name not in self._tables:
            blob = self._medium.get(name)
            self._tables[name] = blob if blob is not None else {"next_id": 1, "rows": {}}
        return self._tables[name]

    def mark_dirty(self, name: str) -> None:
        self._dirty.add(name)

    def store(self, schema: EntitySchema) -> RecordStore:
        if schema.table not in self._stores:
            self._stores[schema.table] = KeyValueRecordStore(self, schema)
        return self._stores[schema.table]

    async def commit(self) -> None:
        self._medium.set_many({name: self._tables[name] for name in self._dirty})
        self._dirty.clear()

    async def rollback(self) -> None:
        self._tables.clear()
        self._dirty.clear()


class KeyValueStorageBackend(StorageBackend):
    """Local key-value fallback backend — a JSON file, or memory when no path is given."""

    name = "keyvalue"

    def __init__(self, path: str | Path | None = None, namespace: str = "repair_shop"):
        self.medium = JsonFileKeyValueStore(path, namespace=namespace)
        self._lock = asyncio.Lock()

    async def initialize(self) -> None:
        self.medium.load()
        logger.info("Key-value storage ready at %s", self.medium.path or "<memory>")

    async def dispose(self) -> None:
        return None

    async def _open_session(self) -> StorageSession:
        return KeyValueStorageSession(self.medium)

    @asynccontextmanager
    async def session(self) -> AsyncIterator[StorageSession]:
        """Units of work run one at a time (single-writer medium)."""
        async with self._lock:
            async with super().session() as session:
                yield session
