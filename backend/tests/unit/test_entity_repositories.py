"""Unit tests for the Client, Equipment, Part and Technician repositories."""

import pytest

from repair_shop.application.repositories.equipment_repository import (
    deserialize_accessories,
    serialize_accessories,
)
from repair_shop.application.schemas import (
    ClientCreate,
    ClientUpdate,
    EquipmentCreate,
    EquipmentUpdate,
    PartCreate,
    PartUpdate,
    ServiceOrderCreate,
    TechnicianCreate,
)
from repair_shop.application.services import LifecycleManager
from repair_shop.domain.entities import PART_SCHEMA, ActionResult, DeleteMode, DeleteOutcome
from repair_shop.domain.entity_schema import EntityKind
from repair_shop.domain.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    EntityValidationError,
)
from repair_shop.infrastructure.dependencies import build_repositories


# ── Client ──────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_client_optional_text_reads_back_as_empty_string(backend):
    async with backend.session() as session:
        client = await build_repositories(session).clients.add(
            ClientCreate(name="Escola Centro", phone="7199999-0001")
        )

    assert client.id is not None
    assert client.tax_id == ""
    assert client.email == ""
    assert client.is_active is True


@pytest.mark.asyncio
async def test_client_get_missing_raises(backend):
    with pytest.raises(EntityNotFoundError):
        async with backend.session() as session:
            await build_repositories(session).clients.get(123)


@pytest.mark.asyncio
async def test_client_update_round_trip(backend):
    async with backend.session() as session:
        created = await build_repositories(session).clients.add(
            ClientCreate(name="Escola Centro", phone="1")
        )

    payload = ClientUpdate(
        id=created.id,
        name="Escola Municipal Centro",
        phone="7199999-0001",
        email="escola@edu.ba.gov.br",
        tax_id="12.345.678/0001-90",
        address="Av. Central, 500",
        city="Salvador",
        state="BA",
        zip_code="40000-000",
        notes="Projetor da sala 12",
    )
    async with backend.session() as session:
        await build_repositories(session).clients.update(payload.id, payload)
    async with backend.session() as session:
        client = await build_repositories(session).clients.get(created.id)

    for name, value in payload.model_dump().items():
        assert getattr(client, name) == value
    assert client.created_at == created.created_at


@pytest.mark.asyncio
async def test_list_active_is_a_subset_of_list_all(backend):
    async with backend.session() as session:
        repos = build_repositories(session)
        old_ana = await repos.clients.add(ClientCreate(name="Ana", phone="1"))
        for name in ("Carla", "Bruno", "Ana"):
            await repos.clients.add(ClientCreate(name=name, phone="1"))
        await LifecycleManager(session).deactivate(EntityKind.CLIENT, old_ana.id)

        active = await repos.clients.list_active()
        everything = await repos.clients.list_all()

    assert [c.name for c in active] == ["Ana", "Bruno", "Carla"]
    assert all(c.is_active for c in active)
    assert [(c.name, c.is_active) for c in everything] == [
        ("Ana", True),
        ("Ana", False),
        ("Bruno", True),
        ("Carla", True),
    ]
    assert len({c.id for c in everything}) == len(everything)
    assert {c.id for c in active} <= {c.id for c in everything}


@pytest.mark.asyncio
async def test_escola_centro_stays_soft_deleted_after_its_order_is_removed(backend):
    async with backend.session() as session:
        repos = build_repositories(session)
        client = await repos.clients.add(ClientCreate(name="Escola Centro", phone="1"))
        equipment = await repos.equipment.add(EquipmentCreate(device_type="Projetor"))
        order = await repos.service_orders.add(
            ServiceOrderCreate(client_id=client.id, equipment_id=equipment.id)
        )

    async with backend.session() as session:
        outcome = await build_repositories(session).clients.delete(client.id)
    assert isinstance(outcome, DeleteOutcome)
    assert outcome.mode is DeleteMode.SOFT

    async with backend.session() as session:
        repos = build_repositories(session)
        assert (await repos.clients.get(client.id)).is_active is False
        order_outcome = await repos.service_orders.delete(order.id)
    assert order_outcome.mode is DeleteMode.HARD

    async with backend.session() as session:
        repos = build_repositories(session)
        assert (await repos.clients.get(client.id)).is_active is False
        assert client.id not in {c.id for c in await repos.clients.list_active()}


@pytest.mark.asyncio
async def test_client_without_orders_is_purged(backend):
    async with backend.session() as session:
        repos = build_repositories(session)
        client = await repos.clients.add(ClientCreate(name="Solo", phone="1"))
        outcome = await repos.clients.delete(client.id)

    assert outcome.mode is DeleteMode.HARD
    with pytest.raises(EntityNotFoundError):
        async with backend.session() as session:
            await build_repositories(session).clients.get(client.id)


@pytest.mark.asyncio
async def test_client_reactivate(backend):
    async with backend.session() as session:
        repos = build_repositories(session)
        client = await repos.clients.add(ClientCreate(name="Escola Centro", phone="1"))
        equipment = await repos.equipment.add(EquipmentCreate(device_type="TV"))
        await repos.service_orders.add(
            ServiceOrderCreate(client_id=client.id, equipment_id=equipment.id)
        )
        await repos.clients.delete(client.id)
        result = await repos.clients.reactivate(client.id)
        reloaded = await repos.clients.get(client.id)

    assert result == ActionResult(success=True, message="Client reactivated.")
    assert reloaded.is_active is True


# ── Equipment ───────────────────────────────────────────────────────


def test_accessories_serialization():
    assert serialize_accessories([]) is None
    assert serialize_accessories(None) is None
    assert serialize_accessories(["Controle remoto", 3]) == '["Controle remoto", 3]'


def test_malformed_accessories_read_as_empty_list():
    assert deserialize_accessories(None) == []
    assert deserialize_accessories("not json") == []
    assert deserialize_accessories('{"a": 1}') == []
    assert deserialize_accessories('["Cabo", 2, true, null, 1.5]') == ["Cabo", 2]


@pytest.mark.asyncio
async def test_equipment_accessories_round_trip(backend):
    async with backend.session() as session:
        created = await build_repositories(session).equipment.add(
            EquipmentCreate(
                device_type="Projetor",
                brand="Epson",
                serial_number="EP20230001",
                accessories=["Controle remoto", 4],
            )
        )
    async with backend.session() as session:
        equipment = await build_repositories(session).equipment.get(created.id)

    assert equipment.accessories == ["Controle remoto", 4]
    assert equipment.color == ""


@pytest.mark.asyncio
async def test_duplicate_serial_number_is_rejected(backend):
    async with backend.session() as session:
        await build_repositories(session).equipment.add(
            EquipmentCreate(device_type="Projetor", serial_number="EP20230001")
        )

    with pytest.raises(DuplicateEntityError) as exc_info:
        async with backend.session() as session:
            await build_repositories(session).equipment.add(
                EquipmentCreate(device_type="Projetor", serial_number="EP20230001")
            )
    assert exc_info.value.field == "serial_number"


@pytest.mark.asyncio
async def test_equipment_without_serial_numbers_never_conflict(backend):
    async with backend.session() as session:
        repos = build_repositories(session)
        await repos.equipment.add(EquipmentCreate(device_type="TV"))
        await repos.equipment.add(EquipmentCreate(device_type="TV", serial_number=""))
        assert len(await repos.equipment.list_all()) == 2


@pytest.mark.asyncio
async def test_equipment_update_clears_accessories(backend):
    async with backend.session() as session:
        repos = build_repositories(session)
        created = await repos.equipment.add(
            EquipmentCreate(device_type="TV", accessories=["Base"])
        )
        updated = await repos.equipment.update(
            created.id, EquipmentUpdate(id=created.id, device_type="TV LED")
        )

    assert updated.accessories == []
    assert updated.device_type == "TV LED"


@pytest.mark.asyncio
async def test_equipment_natural_order(backend):
    async with backend.session() as session:
        repos = build_repositories(session)
        await repos.equipment.add(EquipmentCreate(device_type="TV LED", brand="Samsung"))
        await repos.equipment.add(EquipmentCreate(device_type="Projetor", brand="Epson"))
        await repos.equipment.add(EquipmentCreate(device_type="Projetor", brand="BenQ"))
        listed = await repos.equipment.list_active()

    assert [(e.device_type, e.brand) for e in listed] == [
        ("Projetor", "BenQ"),
        ("Projetor", "Epson"),
        ("TV LED", "Samsung"),
    ]


# ── Part ────────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_part_delete_always_deactivates(backend):
    async with backend.session() as session:
        repos = build_repositories(session)
        part = await repos.parts.add(
            PartCreate(name="Lâmpada de Projetor Epson", quantity=15, unit_price=450.0)
        )
        result = await repos.parts.delete(part.id)
        reloaded = await repos.parts.get(part.id)

    assert result == ActionResult(success=True, message="Part deactivated.")
    assert reloaded.is_active is False
    assert reloaded.stock_value == 15 * 450.0


@pytest.mark.asyncio
async def test_part_negative_price_is_rejected(backend):
    with pytest.raises(EntityValidationError):
        async with backend.session() as session:
            await build_repositories(session).parts.add(
                PartCreate(name="Fuse", quantity=1, unit_price=-1.0)
            )


@pytest.mark.asyncio
async def test_part_update_and_reactivate(backend):
    async with backend.session() as session:
        repos = build_repositories(session)
        part = await repos.parts.add(PartCreate(name="Fuse", quantity=1, unit_price=2.0))
        await repos.parts.delete(part.id)
        updated = await repos.parts.update(
            part.id, PartUpdate(id=part.id, name="Fuse 2A", quantity=4, unit_price=2.5)
        )
        assert updated.is_active is False

        await repos.parts.reactivate(part.id)
        reloaded = await repos.parts.get(part.id)

    assert reloaded.name == "Fuse 2A"
    assert reloaded.quantity == 4
    assert reloaded.is_active is True


@pytest.mark.asyncio
async def test_part_without_unit_reads_back_with_default_unit(backend):
    async with backend.session() as session:
        created = await session.store(PART_SCHEMA).insert(
            {"name": "Fuse", "quantity": 1, "unit": "", "unit_price": 2.0}
        )
        part = await build_repositories(session).parts.get(created["id"])

    assert created["unit"] is None
    assert part.unit == "un"
    assert part.part_type == ""


# ── Technician ──────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_technician_ana_delete_is_unconditional_soft(backend):
    async with backend.session() as session:
        repos = build_repositories(session)
        ana = await repos.technicians.add(TechnicianCreate(name="Ana"))
        client = await repos.clients.add(ClientCreate(name="Escola Centro", phone="1"))
        equipment = await repos.equipment.add(EquipmentCreate(device_type="Projetor"))
        await repos.service_orders.add(
            ServiceOrderCreate(
                client_id=client.id, equipment_id=equipment.id, technician_id=ana.id
            )
        )
        result = await repos.technicians.delete(ana.id)
        reloaded = await repos.technicians.get(ana.id)

    assert isinstance(result, ActionResult)
    assert result.success is True
    assert reloaded.is_active is False
    assert reloaded.phone == ""


@pytest.mark.asyncio
async def test_count_active_technicians(backend):
    async with backend.session() as session:
        repos = build_repositories(session)
        roberto = await repos.technicians.add(TechnicianCreate(name="Roberto Silva"))
        await repos.technicians.add(TechnicianCreate(name="Ana Costa"))
        assert await repos.technicians.count_active() == 2

        await repos.technicians.delete(roberto.id)
        assert await repos.technicians.count_active() == 1
        assert [t.name for t in await repos.technicians.list_active()] == ["Ana Costa"]
