from .base import Base
from .session import SQLAlchemyStorageBackend, SQLAlchemyStorageSession

__all__ = [
    "Base",
    "SQLAlchemyStorageBackend",
    "SQLAlchemyStorageSession",
]
