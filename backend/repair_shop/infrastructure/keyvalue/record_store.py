"""Record store backed by the local key-value medium.

Each entity table is one JSON blob ``{"next_id": int, "rows": {"<id>": row}}``
under the table name. Rows hold JSON-safe values; timestamps are ISO-8601
strings on disk and timezone-aware datetimes in records.
"""

from collections.abc import Mapping, Sequence
from datetime import date, datetime, timezone
from typing import TYPE_CHECKING, Any

from repair_shop.application.interfaces import Record, RecordStore
from repair_shop.domain.entity_schema import EntitySchema, FieldType, SortKey
from repair_shop.domain.exceptions import EntityNotFoundError

if TYPE_CHECKING:
    from repair_shop.infrastructure.keyvalue.backend import KeyValueStorageSession


def _encode(value: Any, field_type: FieldType) -> Any:
    if value is None:
        return None
    if field_type is FieldType.DATETIME:
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc).isoformat()
    if field_type is FieldType.DATE:
        return value.isoformat()
    if field_type is FieldType.INTEGER:
        return int(value)
    if field_type is FieldType.FLOAT:
        return float(value)
    if field_type is FieldType.BOOLEAN:
        return bool(value)
    return str(value)


def _decode(value: Any, field_type: FieldType) -> Any:
    if value is None:
        return None
    if field_type is FieldType.DATETIME:
        parsed = datetime.fromisoformat(value)
        return parsed if parsed.tzinfo else parsed.replace(tzinfo=timezone.utc)
    if field_type is FieldType.DATE:
        return date.fromisoformat(value)
    return value


def _sorted(rows: list[Record], order_by: Sequence[SortKey]) -> list[Record]:
    """Sort like the SQL backend: keys in order, None last, id as tie-breaker."""
    rows = sorted(rows, key=lambda row: row["id"])
    for key in reversed(order_by):
        present = [row for row in rows if row.get(key.field) is not None]
        missing = [row for row in rows if row.get(key.field) is None]
        present.sort(key=lambda row: row[key.field], reverse=key.descending)
        rows = present + missing
    return rows


class KeyValueRecordStore(RecordStore):
    """Implements the RecordStore port on top of a key-value unit of work."""

    def __init__(self, unit: "KeyValueStorageSession", schema: EntitySchema):
        super().__init__(schema)
        self._unit = unit

    @property
    def _rows(self) -> dict[str, dict[str, Any]]:
        return self._unit.table(self.schema.table)["rows"]

    def _to_record(self, row: Mapping[str, Any]) -> Record:
        return {
            name: _decode(row.get(name), field_type)
            for name, field_type in self.schema.columns.items()
        }

    def _encode_values(self, values: Mapping[str, Any]) -> dict[str, Any]:
        columns = self.schema.columns
        return {name: _encode(value, columns[name]) for name, value in values.items()}

    def _require(self, record_id: int) -> dict[str, Any]:
        row = self._rows.get(str(record_id))
        if row is None:
            raise EntityNotFoundError(self.schema.label, record_id)
        return row

    def _matching(self, filters: Mapping[str, Any] | None) -> list[Record]:
        records = [self._to_record(row) for row in self._rows.values()]
        for name, value in (filters or {}).items():
            records = [record for record in records if record.get(name) == value]
        return records

    async def get(self, record_id: int) -> Record | None:
        row = self._rows.get(str(record_id))
        return self._to_record(row) if row is not None else None

    async def list_records(
        self,
        *,
        filters: Mapping[str, Any] | None = None,
        order_by: Sequence[SortKey] = (),
    ) -> Sequence[Record]:
        return _sorted(self._matching(filters), order_by)

    async def count(self, *, filters: Mapping[str, Any] | None = None) -> int:
        return len(self._matching(filters))

    async def _insert(self, values: Record) -> Record:
        table = self._unit.table(self.schema.table)
        record_id = table["next_id"]
        table["next_id"] = record_id + 1

        now = datetime.now(timezone.utc)
        row = {name: None for name in self.schema.columns}
        row.update(self._encode_values(values))
        row.update(
            self._encode_values(
                {"id": record_id, "is_active": True, "created_at": now, "updated_at": now}
            )
        )
        table["rows"][str(record_id)] = row
        self._unit.mark_dirty(self.schema.table)
        return self._to_record(row)

    async def _update(self, record_id: int, values: Record) -> Record:
        row = self._require(record_id)
        row.update(self._encode_values(values))
        row.update(self._encode_values({"updated_at": datetime.now(timezone.utc)}))
        self._unit.mark_dirty(self.schema.table)
        return self._to_record(row)

    async def hard_delete(self, record_id: int) -> None:
        self._require(record_id)
        del self._rows[str(record_id)]
        self._unit.mark_dirty(self.schema.table)

    async def set_active(self, record_id: int, active: bool) -> None:
        row = self._require(record_id)
        row["is_active"] = bool(active)
        self._unit.mark_dirty(self.schema.table)
