"""Equipment repository — also (de)serializes the accessory list."""

import json
import logging
from typing import Any

from pydantic import BaseModel

from repair_shop.application.interfaces import Record
from repair_shop.application.repositories.base import EntityRepository, build_dataclass
from repair_shop.domain.entities import EQUIPMENT_SCHEMA, Equipment
from repair_shop.domain.normalization import none_to_blank

logger = logging.getLogger(__name__)

_TEXT_FIELDS = ("serial_number", "brand", "model", "color", "reported_problem")


def serialize_accessories(accessories: list[str | int] | None) -> str | None:
    """Store the accessory list as a JSON array string (None when empty)."""
    if not accessories:
        return None
    return json.dumps(list(accessories), ensure_ascii=False)


def deserialize_accessories(raw: Any) -> list[str | int]:
    """Parse a stored accessory list.

    Anything that is not a JSON array of strings/integers comes back as an
    empty list; accessories are cosmetic, so a bad value must not break reads.
    """
    if not raw:
        return []
    try:
        decoded = json.loads(raw)
    except (TypeError, ValueError):
        logger.debug("Ignoring malformed accessories value: %r", raw)
        return []
    if not isinstance(decoded, list):
        logger.debug("Ignoring non-list accessories value: %r", raw)
        return []
    return [
        item
        for item in decoded
        if isinstance(item, (str, int)) and not isinstance(item, bool)
    ]


class EquipmentRepository(EntityRepository):
    schema = EQUIPMENT_SCHEMA

    def _to_entity(self, record: Record) -> Equipment:
        values = none_to_blank(record, _TEXT_FIELDS)
        values["accessories"] = deserialize_accessories(record.get("accessories"))
        return build_dataclass(Equipment, values)

    def _to_payload(self, data: BaseModel) -> dict[str, Any]:
        payload = super()._to_payload(data)
        payload["accessories"] = serialize_accessories(payload.get("accessories"))
        return payload
