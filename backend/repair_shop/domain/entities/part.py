"""Domain entity — a spare part kept in stock."""

from dataclasses import dataclass
from datetime import datetime

from repair_shop.domain.entity_schema import (
    DeletePolicy,
    EntityKind,
    EntitySchema,
    FieldType,
    SortKey,
)

DEFAULT_UNIT = "un"

PART_SCHEMA = EntitySchema(
    kind=EntityKind.PART,
    label="Part",
    table="parts",
    fields={
        "part_type": FieldType.TEXT,
        "name": FieldType.TEXT,
        "quantity": FieldType.INTEGER,
        "unit": FieldType.TEXT,
        "unit_price": FieldType.FLOAT,
    },
    required=("name", "quantity", "unit_price"),
    optional_text=("part_type", "unit"),
    non_negative=("quantity", "unit_price"),
    natural_order=(SortKey("part_type"), SortKey("name")),
    delete_policy=DeletePolicy.ALWAYS_SOFT,
)


@dataclass
class Part:
    name: str
    part_type: str = ""
    quantity: int = 0
    unit: str = DEFAULT_UNIT
    unit_price: float = 0.0
    id: int | None = None
    is_active: bool = True
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def stock_value(self) -> float:
        return self.quantity * self.unit_price
