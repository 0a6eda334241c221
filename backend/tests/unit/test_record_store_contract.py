"""Record store contract — the same assertions run against both backends."""

from datetime import timezone

import pytest

from repair_shop.domain.entities import CLIENT_SCHEMA, EQUIPMENT_SCHEMA, PART_SCHEMA
from repair_shop.domain.entity_schema import SortKey
from repair_shop.domain.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    EntityValidationError,
)


def _client(name: str, **extra) -> dict:
    return {"name": name, "phone": "7199999-0000", **extra}


@pytest.mark.asyncio
async def test_insert_assigns_server_managed_fields(backend):
    async with backend.session() as session:
        record = await session.store(CLIENT_SCHEMA).insert(_client("Escola Centro"))

    assert isinstance(record["id"], int)
    assert record["is_active"] is True
    assert record["created_at"].tzinfo is not None
    assert record["created_at"].utcoffset() == timezone.utc.utcoffset(None)
    assert record["updated_at"] == record["created_at"]


@pytest.mark.asyncio
async def test_insert_ignores_server_managed_fields_in_payload(backend):
    async with backend.session() as session:
        record = await session.store(CLIENT_SCHEMA).insert(
            _client("A", id=500, is_active=False)
        )
    assert record["id"] != 500
    assert record["is_active"] is True


@pytest.mark.asyncio
async def test_blank_optional_text_is_stored_as_none(backend):
    async with backend.session() as session:
        store = session.store(CLIENT_SCHEMA)
        created = await store.insert(_client("A", tax_id="", email=" "))
        record = await store.get(created["id"])
    assert record["tax_id"] is None
    assert record["email"] is None


@pytest.mark.asyncio
async def test_get_missing_returns_none(backend):
    async with backend.session() as session:
        assert await session.store(CLIENT_SCHEMA).get(9999) is None


@pytest.mark.asyncio
async def test_commit_is_visible_to_next_unit_of_work(backend):
    async with backend.session() as session:
        created = await session.store(CLIENT_SCHEMA).insert(_client("A"))
    async with backend.session() as session:
        record = await session.store(CLIENT_SCHEMA).get(created["id"])
    assert record["name"] == "A"


@pytest.mark.asyncio
async def test_failed_unit_of_work_is_rolled_back(backend):
    with pytest.raises(RuntimeError):
        async with backend.session() as session:
            await session.store(CLIENT_SCHEMA).insert(_client("Ghost"))
            raise RuntimeError("boom")

    async with backend.session() as session:
        assert await session.store(CLIENT_SCHEMA).count() == 0


@pytest.mark.asyncio
async def test_duplicate_tax_id_raises_duplicate_error(backend):
    async with backend.session() as session:
        await session.store(CLIENT_SCHEMA).insert(_client("A", tax_id="123"))

    with pytest.raises(DuplicateEntityError) as exc_info:
        async with backend.session() as session:
            await session.store(CLIENT_SCHEMA).insert(_client("B", tax_id="123"))
    assert exc_info.value.field == "tax_id"


@pytest.mark.asyncio
async def test_null_tax_ids_never_conflict(backend):
    async with backend.session() as session:
        store = session.store(CLIENT_SCHEMA)
        await store.insert(_client("A"))
        await store.insert(_client("B", tax_id=""))
        await store.insert(_client("C", tax_id=None))
        assert await store.count() == 3


@pytest.mark.asyncio
async def test_update_may_keep_its_own_unique_value(backend):
    async with backend.session() as session:
        store = session.store(EQUIPMENT_SCHEMA)
        created = await store.insert({"device_type": "Projetor", "serial_number": "EP20230001"})
        updated = await store.update(
            created["id"], {"device_type": "Projetor", "serial_number": "EP20230001", "brand": "Epson"}
        )
    assert updated["brand"] == "Epson"


@pytest.mark.asyncio
async def test_update_to_taken_unique_value_raises(backend):
    with pytest.raises(DuplicateEntityError):
        async with backend.session() as session:
            store = session.store(EQUIPMENT_SCHEMA)
            await store.insert({"device_type": "Projetor", "serial_number": "EP20230001"})
            other = await store.insert({"device_type": "TV", "serial_number": "SM20230045"})
            await store.update(other["id"], {"serial_number": "EP20230001"})


@pytest.mark.asyncio
async def test_update_missing_record_raises_not_found(backend):
    with pytest.raises(EntityNotFoundError):
        async with backend.session() as session:
            await session.store(CLIENT_SCHEMA).update(42, _client("A"))


@pytest.mark.asyncio
async def test_update_with_blank_required_field_raises(backend):
    with pytest.raises(EntityValidationError):
        async with backend.session() as session:
            store = session.store(CLIENT_SCHEMA)
            created = await store.insert(_client("A"))
            await store.update(created["id"], {"name": ""})


@pytest.mark.asyncio
async def test_update_refreshes_updated_at_only(backend):
    async with backend.session() as session:
        store = session.store(CLIENT_SCHEMA)
        created = await store.insert(_client("A"))
        updated = await store.update(created["id"], {"city": "Salvador"})

    assert updated["created_at"] == created["created_at"]
    assert updated["updated_at"] >= created["updated_at"]
    assert updated["city"] == "Salvador"
    assert updated["name"] == "A"


@pytest.mark.asyncio
async def test_set_active_changes_only_the_flag(backend):
    async with backend.session() as session:
        store = session.store(CLIENT_SCHEMA)
        created = await store.insert(_client("A", tax_id="999"))
        await store.set_active(created["id"], False)
        record = await store.get(created["id"])

    assert record["is_active"] is False
    assert {k: v for k, v in record.items() if k != "is_active"} == {
        k: v for k, v in created.items() if k != "is_active"
    }


@pytest.mark.asyncio
async def test_set_active_missing_record_raises_not_found(backend):
    with pytest.raises(EntityNotFoundError):
        async with backend.session() as session:
            await session.store(CLIENT_SCHEMA).set_active(7, False)


@pytest.mark.asyncio
async def test_hard_delete_removes_the_row(backend):
    async with backend.session() as session:
        store = session.store(CLIENT_SCHEMA)
        created = await store.insert(_client("A"))
        await store.hard_delete(created["id"])
        assert await store.get(created["id"]) is None


@pytest.mark.asyncio
async def test_purged_id_is_never_reassigned(backend):
    async with backend.session() as session:
        store = session.store(CLIENT_SCHEMA)
        await store.insert(_client("A"))
        newest = await store.insert(_client("B"))
    async with backend.session() as session:
        await session.store(CLIENT_SCHEMA).hard_delete(newest["id"])
    async with backend.session() as session:
        following = await session.store(CLIENT_SCHEMA).insert(_client("C"))

    assert following["id"] != newest["id"]
    assert following["id"] == 3


@pytest.mark.asyncio
async def test_hard_delete_missing_record_raises_not_found(backend):
    with pytest.raises(EntityNotFoundError):
        async with backend.session() as session:
            await session.store(CLIENT_SCHEMA).hard_delete(3)


@pytest.mark.asyncio
async def test_list_filters_and_orders_with_nulls_last(backend):
    async with backend.session() as session:
        store = session.store(PART_SCHEMA)
        await store.insert({"name": "Fuse", "quantity": 1, "unit_price": 1.0})
        await store.insert({"name": "Lamp", "part_type": "Lâmpada", "quantity": 2, "unit_price": 450.0})
        await store.insert({"name": "Cable", "part_type": "Cabo", "quantity": 3, "unit_price": 35.0})
        inactive = await store.insert({"name": "Board", "part_type": "Cabo", "quantity": 0, "unit_price": 9.0})
        await store.set_active(inactive["id"], False)

        ordered = await store.list_records(order_by=PART_SCHEMA.natural_order)
        active = await store.list_records(
            filters={"is_active": True}, order_by=PART_SCHEMA.natural_order
        )
        by_price = await store.list_records(order_by=(SortKey("unit_price", descending=True),))

    assert [r["name"] for r in ordered] == ["Board", "Cable", "Lamp", "Fuse"]
    assert [r["name"] for r in active] == ["Cable", "Lamp", "Fuse"]
    assert [r["name"] for r in by_price] == ["Lamp", "Cable", "Board", "Fuse"]


@pytest.mark.asyncio
async def test_list_breaks_ties_by_id(backend):
    async with backend.session() as session:
        store = session.store(CLIENT_SCHEMA)
        first = await store.insert(_client("Same"))
        second = await store.insert(_client("Same"))
        rows = await store.list_records(order_by=CLIENT_SCHEMA.natural_order)
    assert [r["id"] for r in rows] == [first["id"], second["id"]]


@pytest.mark.asyncio
async def test_count_with_filters(backend):
    async with backend.session() as session:
        store = session.store(CLIENT_SCHEMA)
        await store.insert(_client("A", city="Salvador"))
        await store.insert(_client("B", city="Salvador"))
        await store.insert(_client("C"))
        assert await store.count() == 3
        assert await store.count(filters={"city": "Salvador"}) == 2
        assert await store.count(filters={"city": None}) == 1


@pytest.mark.asyncio
async def test_numeric_types_survive_storage(backend):
    async with backend.session() as session:
        created = await session.store(PART_SCHEMA).insert(
            {"name": "Lamp", "quantity": 15, "unit_price": 450}
        )
    async with backend.session() as session:
        record = await session.store(PART_SCHEMA).get(created["id"])
    assert record["quantity"] == 15
    assert isinstance(record["unit_price"], float)
