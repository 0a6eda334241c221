"""Domain entity — a device brought in for repair."""

from dataclasses import dataclass, field
from datetime import datetime

from repair_shop.domain.entity_schema import (
    DeletePolicy,
    DependencyRule,
    EntityKind,
    EntitySchema,
    FieldType,
    SortKey,
)

EQUIPMENT_SCHEMA = EntitySchema(
    kind=EntityKind.EQUIPMENT,
    label="Equipment",
    table="equipment",
    fields={
        "serial_number": FieldType.TEXT,
        "device_type": FieldType.TEXT,
        "brand": FieldType.TEXT,
        "model": FieldType.TEXT,
        "color": FieldType.TEXT,
        "accessories": FieldType.TEXT,
        "reported_problem": FieldType.TEXT,
    },
    required=("device_type",),
    unique=("serial_number",),
    optional_text=(
        "serial_number",
        "brand",
        "model",
        "color",
        "accessories",
        "reported_problem",
    ),
    natural_order=(SortKey("device_type"), SortKey("brand"), SortKey("model")),
    delete_policy=DeletePolicy.CHECK_DEPENDENTS,
    dependents=(DependencyRule(EntityKind.SERVICE_ORDER, "equipment_id"),),
)


@dataclass
class Equipment:
    """A piece of customer equipment.

    ``accessories`` lists what came in with the device: part ids or free text.
    """

    device_type: str
    serial_number: str = ""
    brand: str = ""
    model: str = ""
    color: str = ""
    reported_problem: str = ""
    accessories: list[str | int] = field(default_factory=list)
    id: int | None = None
    is_active: bool = True
    created_at: datetime | None = None
    updated_at: datetime | None = None
