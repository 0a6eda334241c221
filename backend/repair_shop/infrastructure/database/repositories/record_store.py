"""Concrete record store backed by SQLAlchemy async sessions."""

import logging
import re
from collections.abc import Mapping, Sequence
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from repair_shop.application.interfaces import Record, RecordStore
from repair_shop.domain.entity_schema import EntitySchema, FieldType, SortKey
from repair_shop.domain.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    EntityValidationError,
    StorageError,
)
from repair_shop.infrastructure.database.base import Base

logger = logging.getLogger(__name__)

# SQLite: "UNIQUE constraint failed: clients.tax_id"
# PostgreSQL: 'duplicate key value ... DETAIL:  Key (tax_id)=(123) already exists.'
_SQLITE_UNIQUE = re.compile(r"UNIQUE constraint failed: \w+\.(\w+)")
_POSTGRES_UNIQUE = re.compile(r"Key \((\w+)\)=\((.*?)\) already exists")
_NOT_NULL = re.compile(r"NOT NULL constraint failed: \w+\.(\w+)|null value in column \"(\w+)\"")


def _as_utc(value: datetime | None) -> datetime | None:
    """SQLite drops tzinfo on the way back; every stored timestamp is UTC."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class SQLAlchemyRecordStore(RecordStore):
    """Implements the RecordStore port for one mapped table."""

    def __init__(self, session: AsyncSession, schema: EntitySchema, model: type[Base]):
        super().__init__(schema)
        self._session = session
        self._model = model

    def _to_record(self, model: Base) -> Record:
        """Map ORM model → plain record."""
        record: Record = {}
        for name, field_type in self.schema.columns.items():
            value = getattr(model, name)
            if field_type is FieldType.DATETIME:
                value = _as_utc(value)
            record[name] = value
        return record

    def _where(self, stmt, filters: Mapping[str, Any] | None):
        for name, value in (filters or {}).items():
            column = getattr(self._model, name)
            stmt = stmt.where(column.is_(None) if value is None else column == value)
        return stmt

    def _order_clauses(self, order_by: Sequence[SortKey]):
        clauses = []
        for key in order_by:
            column = getattr(self._model, key.field)
            ordered = column.desc() if key.descending else column.asc()
            clauses.append(ordered.nulls_last())
        clauses.append(self._model.id.asc())
        return clauses

    async def _load(self, record_id: int, operation: str) -> Base:
        try:
            model = await self._session.get(self._model, record_id)
        except SQLAlchemyError as exc:
            raise StorageError(operation, self.schema.label, str(exc)) from exc
        if model is None:
            raise EntityNotFoundError(self.schema.label, record_id)
        return model

    async def _flush(self, operation: str, values: Record | None = None) -> None:
        try:
            await self._session.flush()
        except IntegrityError as exc:
            raise self._translate_integrity_error(exc, operation, values or {}) from exc
        except SQLAlchemyError as exc:
            raise StorageError(operation, self.schema.label, str(exc)) from exc

    def _translate_integrity_error(
        self, exc: IntegrityError, operation: str, values: Record
    ) -> Exception:
        """Map a driver constraint violation to the most specific domain error."""
        message = str(exc.orig)
        logger.debug("%s %s rejected by the database: %s", self.schema.label, operation, message)

        match = _SQLITE_UNIQUE.search(message) or _POSTGRES_UNIQUE.search(message)
        if match:
            field = match.group(1)
            return DuplicateEntityError(self.schema.label, field, values.get(field))
        if "unique" in message.lower() or "duplicate" in message.lower():
            field = next((name for name in self.schema.unique if values.get(name)), "id")
            return DuplicateEntityError(self.schema.label, field, values.get(field))

        match = _NOT_NULL.search(message)
        if match:
            return EntityValidationError(self.schema.label, [match.group(1) or match.group(2)])

        return StorageError(operation, self.schema.label, message)

    async def get(self, record_id: int) -> Record | None:
        try:
            model = await self._session.get(self._model, record_id)
        except SQLAlchemyError as exc:
            raise StorageError("get", self.schema.label, str(exc)) from exc
        return self._to_record(model) if model is not None else None

    async def list_records(
        self,
        *,
        filters: Mapping[str, Any] | None = None,
        order_by: Sequence[SortKey] = (),
    ) -> Sequence[Record]:
        stmt = self._where(select(self._model), filters)
        stmt = stmt.order_by(*self._order_clauses(order_by))
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as exc:
            raise StorageError("list", self.schema.label, str(exc)) from exc
        return [self._to_record(row) for row in result.scalars().all()]

    async def count(self, *, filters: Mapping[str, Any] | None = None) -> int:
        stmt = self._where(select(func.count()).select_from(self._model), filters)
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as exc:
            raise StorageError("count", self.schema.label, str(exc)) from exc
        return int(result.scalar_one())

    async def _insert(self, values: Record) -> Record:
        now = datetime.now(timezone.utc)
        # Every column is set so nothing is left to lazy-load after the flush.
        columns = {name: values.get(name) for name in self.schema.fields}
        model = self._model(**columns, is_active=True, created_at=now, updated_at=now)
        self._session.add(model)
        await self._flush("insert", values)
        logger.debug("Inserted %s id=%s", self.schema.label, model.id)
        return self._to_record(model)

    async def _update(self, record_id: int, values: Record) -> Record:
        model = await self._load(record_id, "update")
        for name, value in values.items():
            setattr(model, name, value)
        model.updated_at = datetime.now(timezone.utc)
        await self._flush("update", values)
        return self._to_record(model)

    async def hard_delete(self, record_id: int) -> None:
        model = await self._load(record_id, "hard_delete")
        await self._session.delete(model)
        await self._flush("hard_delete")
        logger.debug("Hard-deleted %s id=%s", self.schema.label, record_id)

    async def set_active(self, record_id: int, active: bool) -> None:
        model = await self._load(record_id, "set_active")
        model.is_active = active
        await self._flush("set_active")
