"""Abstract storage backend (port) and its unit of work."""

import logging
from abc import ABC, abstractmethod
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from repair_shop.application.interfaces.record_store import RecordStore
from repair_shop.domain.entity_schema import EntitySchema

logger = logging.getLogger(__name__)


class StorageSession(ABC):
    """One unit of work: hands out record stores that share a transaction."""

    @abstractmethod
    def store(self, schema: EntitySchema) -> RecordStore:
        """Return the record store bound to ``schema`` for this unit of work."""
        ...

    @abstractmethod
    async def commit(self) -> None:
        ...

    @abstractmethod
    async def rollback(self) -> None:
        ...

    async def close(self) -> None:
        """Release any resources held by the unit of work."""
        return None


class StorageBackend(ABC):
    """A persistence medium selected once at startup.

    Callers never see which backend is active; they only open units of work
    through ``session()``.
    """

    name: str = "abstract"

    @abstractmethod
    async def initialize(self) -> None:
        """Prepare the medium (create tables, load the data file, ...)."""
        ...

    @abstractmethod
    async def dispose(self) -> None:
        ...

    @abstractmethod
    async def _open_session(self) -> StorageSession:
        ...

    @asynccontextmanager
    async def session(self) -> AsyncIterator[StorageSession]:
        """Yield a unit of work — committed on success, rolled back on error."""
        session = await self._open_session()
        try:
            yield session
            await session.commit()
        except Exception:
            logger.debug("Rolling back %s unit of work", self.name)
            await session.rollback()
            raise
        finally:
            await session.close()
