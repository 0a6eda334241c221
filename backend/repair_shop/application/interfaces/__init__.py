from .record_store import Record, RecordStore
from .storage_backend import StorageBackend, StorageSession

__all__ = [
    "Record",
    "RecordStore",
    "StorageBackend",
    "StorageSession",
]
