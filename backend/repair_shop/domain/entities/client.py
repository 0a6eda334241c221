"""Domain entity — a customer of the repair shop."""

from dataclasses import dataclass
from datetime import datetime

from repair_shop.domain.entity_schema import (
    DeletePolicy,
    DependencyRule,
    EntityKind,
    EntitySchema,
    FieldType,
    SortKey,
)

CLIENT_OPTIONAL_TEXT = ("email", "tax_id", "address", "city", "state", "zip_code", "notes")

CLIENT_SCHEMA = EntitySchema(
    kind=EntityKind.CLIENT,
    label="Client",
    table="clients",
    fields={
        "name": FieldType.TEXT,
        "phone": FieldType.TEXT,
        "email": FieldType.TEXT,
        "tax_id": FieldType.TEXT,
        "address": FieldType.TEXT,
        "city": FieldType.TEXT,
        "state": FieldType.TEXT,
        "zip_code": FieldType.TEXT,
        "notes": FieldType.TEXT,
    },
    required=("name", "phone"),
    unique=("tax_id",),
    optional_text=CLIENT_OPTIONAL_TEXT,
    natural_order=(SortKey("name"),),
    delete_policy=DeletePolicy.CHECK_DEPENDENTS,
    dependents=(DependencyRule(EntityKind.SERVICE_ORDER, "client_id"),),
)


@dataclass
class Client:
    """A client record as the UI sees it: optional text is never None."""

    name: str
    phone: str
    email: str = ""
    tax_id: str = ""
    address: str = ""
    city: str = ""
    state: str = ""
    zip_code: str = ""
    notes: str = ""
    id: int | None = None
    is_active: bool = True
    created_at: datetime | None = None
    updated_at: datetime | None = None
