"""Shared plumbing for the per-entity repositories."""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import fields
from typing import Any, ClassVar

from pydantic import BaseModel

from repair_shop.application.interfaces import Record, StorageSession
from repair_shop.application.services import LifecycleManager
from repair_shop.domain.entities import ActionResult, DeleteOutcome
from repair_shop.domain.entity_schema import EntitySchema
from repair_shop.domain.exceptions import EntityNotFoundError


def build_dataclass(cls: type, record: Mapping[str, Any]) -> Any:
    """Instantiate dataclass ``cls`` from the matching keys of ``record``."""
    return cls(**{f.name: record[f.name] for f in fields(cls) if f.name in record})


class EntityRepository(ABC):
    """Binds one EntitySchema to its record store and the lifecycle manager.

    Subclasses only describe how rows map to entities and payloads.
    """

    schema: ClassVar[EntitySchema]

    def __init__(self, session: StorageSession, lifecycle: LifecycleManager | None = None):
        self._session = session
        self._store = session.store(self.schema)
        self._lifecycle = lifecycle or LifecycleManager(session)

    @abstractmethod
    def _to_entity(self, record: Record) -> Any:
        """Map stored row → domain entity."""
        ...

    def _to_payload(self, data: BaseModel) -> dict[str, Any]:
        """Map an incoming DTO → store payload."""
        return data.model_dump(exclude={"id"})

    async def get(self, record_id: int) -> Any:
        record = await self._store.get(record_id)
        if record is None:
            raise EntityNotFoundError(self.schema.label, record_id)
        return self._to_entity(record)

    async def list_active(self) -> list[Any]:
        """Active records only, in natural order — what pickers show."""
        records = await self._store.list_records(
            filters={"is_active": True},
            order_by=self.schema.natural_order,
        )
        return [self._to_entity(record) for record in records]

    async def list_all(self) -> list[Any]:
        """Every record, natural order first and active ahead of inactive."""
        records = await self._store.list_records(order_by=self.schema.list_all_order())
        return [self._to_entity(record) for record in records]

    async def add(self, data: BaseModel) -> Any:
        record = await self._store.insert(self._to_payload(data))
        return self._to_entity(record)

    async def update(self, record_id: int, data: BaseModel) -> Any:
        record = await self._store.update(record_id, self._to_payload(data))
        return self._to_entity(record)

    async def delete(self, record_id: int) -> DeleteOutcome | ActionResult:
        return await self._lifecycle.delete(self.schema.kind, record_id)

    async def reactivate(self, record_id: int) -> ActionResult:
        return await self._lifecycle.reactivate(self.schema.kind, record_id)
