"""Local key-value medium — namespaced JSON values kept in one file.

Storage layout (one JSON object on disk):
    {"<namespace>:<key>": <json value>, ...}

With no path the map lives only in memory, which is what tests and
throwaway sessions use.
"""

import copy
import json
import logging
import os
from pathlib import Path
from typing import Any

from repair_shop.domain.exceptions import StorageError

logger = logging.getLogger(__name__)


class JsonFileKeyValueStore:
    """Infrastructure adapter for a local persistent key-value map."""

    def __init__(self, path: str | Path | None = None, namespace: str = "repair_shop"):
        self._path = Path(path) if path else None
        self._namespace = namespace
        self._data: dict[str, Any] = {}

    @property
    def path(self) -> Path | None:
        return self._path

    def _key(self, key: str) -> str:
        return f"{self._namespace}:{key}"

    def load(self) -> None:
        """Read the data file into memory; a missing file means an empty store."""
        if self._path is None or not self._path.exists():
            self._data = {}
            return
        try:
            raw = self._path.read_text("utf-8")
            self._data = json.loads(raw) if raw.strip() else {}
        except (OSError, ValueError) as exc:
            raise StorageError("load", "keyvalue", f"{self._path}: {exc}") from exc
        if not isinstance(self._data, dict):
            raise StorageError("load", "keyvalue", f"{self._path}: top-level value is not an object")
        logger.info("Loaded key-value store from %s (%d keys)", self._path, len(self._data))

    def get(self, key: str) -> Any | None:
        """Return a private copy of the value stored under ``key``."""
        value = self._data.get(self._key(key))
        return copy.deepcopy(value)

    def set_many(self, items: dict[str, Any]) -> None:
        """Store several values and persist them in a single file write."""
        if not items:
            return
        snapshot = dict(self._data)
        for key, value in items.items():
            self._data[self._key(key)] = copy.deepcopy(value)
        try:
            self._persist()
        except StorageError:
            self._data = snapshot
            raise

    def delete(self, key: str) -> None:
        if self._data.pop(self._key(key), None) is not None:
            self._persist()

    def keys(self) -> list[str]:
        prefix = f"{self._namespace}:"
        return [key[len(prefix):] for key in self._data if key.startswith(prefix)]

    def _persist(self) -> None:
        if self._path is None:
            return
        tmp_path = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(json.dumps(self._data, ensure_ascii=False, indent=2), encoding="utf-8")
            os.replace(tmp_path, self._path)
        except (OSError, TypeError, ValueError) as exc:
            raise StorageError("persist", "keyvalue", f"{self._path}: {exc}") from exc
