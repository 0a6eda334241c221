"""Persistence descriptors shared by every entity kind.

An ``EntitySchema`` tells the record stores which columns an entity has,
which of them are required or unique, how it sorts by default and what
happens when it is deleted. Both storage backends read the same
descriptors, which is what keeps their behaviour identical.
"""

from dataclasses import dataclass
from enum import Enum


class EntityKind(str, Enum):
    """Every persisted entity kind known to the core."""

    CLIENT = "client"
    EQUIPMENT = "equipment"
    PART = "part"
    TECHNICIAN = "technician"
    SERVICE_ORDER = "service_order"


class FieldType(str, Enum):
    TEXT = "text"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    DATE = "date"
    DATETIME = "datetime"


class DeletePolicy(str, Enum):
    """How the lifecycle manager treats a delete request for a kind."""

    CHECK_DEPENDENTS = "check_dependents"  # hard without dependents, soft otherwise
    ALWAYS_SOFT = "always_soft"
    ALWAYS_HARD = "always_hard"


@dataclass(frozen=True)
class SortKey:
    field: str
    descending: bool = False


@dataclass(frozen=True)
class DependencyRule:
    """A child kind whose rows point at the parent through ``foreign_key``."""

    child_kind: EntityKind
    foreign_key: str


# Columns owned by the store itself; payloads can never set them directly.
SERVER_MANAGED_FIELDS: dict[str, FieldType] = {
    "id": FieldType.INTEGER,
    "is_active": FieldType.BOOLEAN,
    "created_at": FieldType.DATETIME,
    "updated_at": FieldType.DATETIME,
}

ACTIVE_FIRST = SortKey("is_active", descending=True)


@dataclass(frozen=True, eq=False)
class EntitySchema:
    """Column layout and lifecycle rules of one entity table."""

    kind: EntityKind
    label: str
    table: str
    fields: dict[str, FieldType]
    required: tuple[str, ...]
    natural_order: tuple[SortKey, ...]
    delete_policy: DeletePolicy
    unique: tuple[str, ...] = ()
    optional_text: tuple[str, ...] = ()
    non_negative: tuple[str, ...] = ()
    dependents: tuple[DependencyRule, ...] = ()

    @property
    def columns(self) -> dict[str, FieldType]:
        """Writable fields plus the server-managed ones."""
        return {**SERVER_MANAGED_FIELDS, **self.fields}

    def list_all_order(self) -> tuple[SortKey, ...]:
        """Natural order with active records ahead of inactive ones."""
        return (*self.natural_order, ACTIVE_FIRST)
