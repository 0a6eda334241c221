"""Domain entity — a technician who works service orders."""

from dataclasses import dataclass
from datetime import datetime

from repair_shop.domain.entity_schema import (
    DeletePolicy,
    EntityKind,
    EntitySchema,
    FieldType,
    SortKey,
)

TECHNICIAN_SCHEMA = EntitySchema(
    kind=EntityKind.TECHNICIAN,
    label="Technician",
    table="technicians",
    fields={
        "name": FieldType.TEXT,
        "phone": FieldType.TEXT,
        "specialty": FieldType.TEXT,
    },
    required=("name",),
    optional_text=("phone", "specialty"),
    natural_order=(SortKey("name"),),
    delete_policy=DeletePolicy.ALWAYS_SOFT,
)


@dataclass
class Technician:
    name: str
    phone: str = ""
    specialty: str = ""
    id: int | None = None
    is_active: bool = True
    created_at: datetime | None = None
    updated_at: datetime | None = None
