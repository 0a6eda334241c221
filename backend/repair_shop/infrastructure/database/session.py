"""SQLAlchemy engine, unit of work and storage backend."""

import logging
from pathlib import Path

from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from repair_shop.application.interfaces import RecordStore, StorageBackend, StorageSession
from repair_shop.domain.entity_schema import EntitySchema
from repair_shop.domain.exceptions import StorageError
from repair_shop.infrastructure.database.base import Base
from repair_shop.infrastructure.database.models import MODEL_REGISTRY
from repair_shop.infrastructure.database.repositories.record_store import SQLAlchemyRecordStore

logger = logging.getLogger(__name__)


def _get_async_url(url: str) -> str:
    """Convert a sync SQLAlchemy URL to an async one."""
    if url.startswith("sqlite:///"):
        return url.replace("sqlite:///", "sqlite+aiosqlite:///", 1)
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://", 1)
    return url


class SQLAlchemyStorageSession(StorageSession):
    """Unit of work wrapping one AsyncSession."""

    def __init__(self, session: AsyncSession):
        self._session = session
        self._stores: dict[str, RecordStore] = {}

    def store(self, schema: EntitySchema) -> RecordStore:
        if schema.table not in self._stores:
            self._stores[schema.table] = SQLAlchemyRecordStore(
                self._session, schema, MODEL_REGISTRY[schema.table]
            )
        return self._stores[schema.table]

    async def commit(self) -> None:
        try:
            await self._session.commit()
        except SQLAlchemyError as exc:
            raise StorageError("commit", "session", str(exc)) from exc

    async def rollback(self) -> None:
        await self._session.rollback()

    async def close(self) -> None:
        await self._session.close()


class SQLAlchemyStorageBackend(StorageBackend):
    """Embedded relational backend — SQLite through aiosqlite by default."""

    name = "sql"

    def __init__(self, database_url: str, *, echo: bool = False):
        self.url = _get_async_url(database_url)
        engine_kwargs: dict = {"echo": echo, "future": True}
        if self.url.startswith("sqlite") and make_url(self.url).database in (None, "", ":memory:"):
            # A single shared connection keeps the in-memory database alive.
            engine_kwargs["poolclass"] = StaticPool
            engine_kwargs["connect_args"] = {"check_same_thread": False}
        self.engine = create_async_engine(self.url, **engine_kwargs)
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    async def initialize(self) -> None:
        url = make_url(self.url)
        if url.get_backend_name() == "sqlite" and url.database not in (None, "", ":memory:"):
            Path(url.database).parent.mkdir(parents=True, exist_ok=True)
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("SQL storage ready at %s", url.render_as_string(hide_password=True))

    async def dispose(self) -> None:
        await self.engine.dispose()

    async def _open_session(self) -> StorageSession:
        return SQLAlchemyStorageSession(self.session_factory())
