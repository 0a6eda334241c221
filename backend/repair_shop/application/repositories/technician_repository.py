"""Technician repository — plain binding plus the active-technician count."""

from repair_shop.application.interfaces import Record
from repair_shop.application.repositories.base import EntityRepository, build_dataclass
from repair_shop.domain.entities import TECHNICIAN_SCHEMA, ActionResult, Technician
from repair_shop.domain.normalization import none_to_blank


class TechnicianRepository(EntityRepository):
    schema = TECHNICIAN_SCHEMA

    def _to_entity(self, record: Record) -> Technician:
        return build_dataclass(Technician, none_to_blank(record, ("phone", "specialty")))

    async def delete(self, record_id: int) -> ActionResult:
        return await self._lifecycle.deactivate(self.schema.kind, record_id)

    async def count_active(self) -> int:
        """Lets callers keep at least one technician active."""
        return await self._store.count(filters={"is_active": True})
