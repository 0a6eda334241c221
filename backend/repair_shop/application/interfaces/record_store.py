"""Abstract record store (port) — row-level primitives over one entity table."""

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from typing import Any

from repair_shop.domain.entity_schema import EntitySchema, SortKey
from repair_shop.domain.exceptions import DuplicateEntityError, EntityNotFoundError
from repair_shop.domain.normalization import normalize_payload

Record = dict[str, Any]


class RecordStore(ABC):
    """Port for one entity's persisted rows — implemented once per backend.

    Records are plain dicts keyed by column name. ``insert`` and ``update``
    are template methods: payload normalization, required-field checks and
    uniqueness checks happen here, so every backend enforces them the same
    way; subclasses only write the already-clean values.
    """

    def __init__(self, schema: EntitySchema):
        self.schema = schema

    @abstractmethod
    async def get(self, record_id: int) -> Record | None:
        """Retrieve a single row by id, or None."""
        ...

    @abstractmethod
    async def list_records(
        self,
        *,
        filters: Mapping[str, Any] | None = None,
        order_by: Sequence[SortKey] = (),
    ) -> Sequence[Record]:
        """Retrieve rows matching all equality ``filters``, sorted by ``order_by`` then id."""
        ...

    @abstractmethod
    async def count(self, *, filters: Mapping[str, Any] | None = None) -> int:
        """Count rows matching all equality ``filters``."""
        ...

    @abstractmethod
    async def hard_delete(self, record_id: int) -> None:
        """Remove a row permanently. Raises EntityNotFoundError if absent."""
        ...

    @abstractmethod
    async def set_active(self, record_id: int, active: bool) -> None:
        """Flip ``is_active`` without touching any other column."""
        ...

    @abstractmethod
    async def _insert(self, values: Record) -> Record:
        """Persist a clean row; assign id, ``is_active`` and timestamps."""
        ...

    @abstractmethod
    async def _update(self, record_id: int, values: Record) -> Record:
        """Write clean values onto an existing row and refresh ``updated_at``."""
        ...

    async def insert(self, payload: Mapping[str, Any]) -> Record:
        values = normalize_payload(self.schema, payload)
        await self._ensure_unique(values)
        return await self._insert(values)

    async def update(self, record_id: int, payload: Mapping[str, Any]) -> Record:
        if await self.get(record_id) is None:
            raise EntityNotFoundError(self.schema.label, record_id)
        values = normalize_payload(self.schema, payload, partial=True)
        await self._ensure_unique(values, exclude_id=record_id)
        return await self._update(record_id, values)

    async def _ensure_unique(self, values: Record, exclude_id: int | None = None) -> None:
        for name in self.schema.unique:
            value = values.get(name)
            if value is None:
                continue
            for row in await self.list_records(filters={name: value}):
                if row["id"] != exclude_id:
                    raise DuplicateEntityError(self.schema.label, name, value)
