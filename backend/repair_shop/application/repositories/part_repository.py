"""Part repository — plain binding; deleting a part always deactivates it."""

from repair_shop.application.interfaces import Record
from repair_shop.application.repositories.base import EntityRepository, build_dataclass
from repair_shop.domain.entities import PART_SCHEMA, ActionResult, Part
from repair_shop.domain.entities.part import DEFAULT_UNIT
from repair_shop.domain.normalization import none_to_blank


class PartRepository(EntityRepository):
    schema = PART_SCHEMA

    def _to_entity(self, record: Record) -> Part:
        values = none_to_blank(record, ("part_type",))
        values["unit"] = record.get("unit") or DEFAULT_UNIT
        return build_dataclass(Part, values)

    async def delete(self, record_id: int) -> ActionResult:
        return await self._lifecycle.deactivate(self.schema.kind, record_id)
