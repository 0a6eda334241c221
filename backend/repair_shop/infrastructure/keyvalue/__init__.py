from .backend import KeyValueStorageBackend, KeyValueStorageSession
from .json_file_store import JsonFileKeyValueStore
from .record_store import KeyValueRecordStore

__all__ = [
    "JsonFileKeyValueStore",
    "KeyValueRecordStore",
    "KeyValueStorageBackend",
    "KeyValueStorageSession",
]
