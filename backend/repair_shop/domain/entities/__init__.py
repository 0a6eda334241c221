from .client import CLIENT_SCHEMA, Client
from .equipment import EQUIPMENT_SCHEMA, Equipment
from .part import PART_SCHEMA, Part
from .technician import TECHNICIAN_SCHEMA, Technician
from .service_order import (
    SERVICE_ORDER_SCHEMA,
    PaymentMethod,
    ServiceOrder,
    ServiceOrderPriority,
    ServiceOrderStatus,
)
from .lifecycle import ActionResult, DeleteMode, DeleteOutcome
from repair_shop.domain.entity_schema import EntityKind, EntitySchema

SCHEMAS: dict[EntityKind, EntitySchema] = {
    EntityKind.CLIENT: CLIENT_SCHEMA,
    EntityKind.EQUIPMENT: EQUIPMENT_SCHEMA,
    EntityKind.PART: PART_SCHEMA,
    EntityKind.TECHNICIAN: TECHNICIAN_SCHEMA,
    EntityKind.SERVICE_ORDER: SERVICE_ORDER_SCHEMA,
}

__all__ = [
    "SCHEMAS",
    "CLIENT_SCHEMA",
    "Client",
    "EQUIPMENT_SCHEMA",
    "Equipment",
    "PART_SCHEMA",
    "Part",
    "TECHNICIAN_SCHEMA",
    "Technician",
    "SERVICE_ORDER_SCHEMA",
    "ServiceOrder",
    "ServiceOrderStatus",
    "ServiceOrderPriority",
    "PaymentMethod",
    "ActionResult",
    "DeleteMode",
    "DeleteOutcome",
]
