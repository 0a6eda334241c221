"""Channel table — binds every externally callable name to a repository call."""

from typing import Any

from pydantic import BaseModel

from repair_shop.application.schemas import (
    ActionResultResponse,
    ClientCreate,
    ClientResponse,
    ClientUpdate,
    DeleteOutcomeResponse,
    EquipmentCreate,
    EquipmentResponse,
    EquipmentUpdate,
    PartCreate,
    PartResponse,
    PartUpdate,
    ServiceOrderComplete,
    ServiceOrderCreate,
    ServiceOrderResponse,
    ServiceOrderUpdate,
    TechnicianCreate,
    TechnicianResponse,
    TechnicianUpdate,
)
from repair_shop.domain.entities import DeleteOutcome
from repair_shop.domain.exceptions import EntityValidationError
from repair_shop.infrastructure.dependencies import Repositories
from repair_shop.presentation.ipc.dispatcher import IpcDispatcher


def record_id(payload: Any) -> int:
    """Accept ``5``, ``"5"`` or ``{"id": 5}`` as a record id."""
    if isinstance(payload, dict):
        payload = payload.get("id")
    if isinstance(payload, bool) or (isinstance(payload, float) and not payload.is_integer()):
        raise EntityValidationError("Request", ["id"], reason="must be an integer")
    try:
        return int(payload)
    except (TypeError, ValueError):
        raise EntityValidationError("Request", ["id"], reason="must be an integer") from None


def _dump(response: type[BaseModel], entity: Any) -> dict[str, Any]:
    return response.model_validate(entity, from_attributes=True).model_dump(mode="json")


def _dump_outcome(result: Any) -> dict[str, Any]:
    if isinstance(result, DeleteOutcome):
        return _dump(DeleteOutcomeResponse, result)
    return _dump(ActionResultResponse, result)


def _register_entity(
    dispatcher: IpcDispatcher,
    repository: str,
    *,
    response: type[BaseModel],
    create: type[BaseModel],
    update: type[BaseModel],
    channels: dict[str, str],
) -> None:
    """Register the standard operations of one repository under ``channels``."""

    def repo(repos: Repositories):
        return getattr(repos, repository)

    async def list_active(repos: Repositories, payload: Any) -> list[dict]:
        return [_dump(response, item) for item in await repo(repos).list_active()]

    async def list_all(repos: Repositories, payload: Any) -> list[dict]:
        return [_dump(response, item) for item in await repo(repos).list_all()]

    async def get(repos: Repositories, payload: Any) -> dict:
        return _dump(response, await repo(repos).get(record_id(payload)))

    async def add(repos: Repositories, payload: Any) -> dict:
        return _dump(response, await repo(repos).add(create.model_validate(payload or {})))

    async def update_(repos: Repositories, payload: Any) -> dict:
        data = update.model_validate(payload or {})
        return _dump(response, await repo(repos).update(data.id, data))

    async def delete(repos: Repositories, payload: Any) -> dict:
        return _dump_outcome(await repo(repos).delete(record_id(payload)))

    async def reactivate(repos: Repositories, payload: Any) -> dict:
        return _dump_outcome(await repo(repos).reactivate(record_id(payload)))

    handlers = {
        "list": list_active,
        "list_all": list_all,
        "get": get,
        "add": add,
        "update": update_,
        "delete": delete,
        "reactivate": reactivate,
    }
    for operation, channel in channels.items():
        dispatcher.register(channel, handlers[operation])


async def _count_active_technicians(repos: Repositories, payload: Any) -> int:
    return await repos.technicians.count_active()


async def _list_service_orders(repos: Repositories, payload: Any) -> list[dict]:
    """All orders, or only one client's/equipment's when the payload says so."""
    filters = payload if isinstance(payload, dict) else {}
    if filters.get("client_id") is not None:
        orders = await repos.service_orders.list_for_client(record_id(filters["client_id"]))
    elif filters.get("equipment_id") is not None:
        orders = await repos.service_orders.list_for_equipment(record_id(filters["equipment_id"]))
    else:
        orders = await repos.service_orders.list_all()
    return [_dump(ServiceOrderResponse, order) for order in orders]


async def _complete_service_order(repos: Repositories, payload: Any) -> dict:
    data = ServiceOrderComplete.model_validate(payload or {})
    return _dump(ServiceOrderResponse, await repos.service_orders.complete(data))


def register_channels(dispatcher: IpcDispatcher) -> IpcDispatcher:
    """Register every channel the UI may call."""
    _register_entity(
        dispatcher,
        "clients",
        response=ClientResponse,
        create=ClientCreate,
        update=ClientUpdate,
        channels={
            "list": "list-clients",
            "list_all": "list-all-clients",
            "get": "get-client",
            "add": "add-client",
            "update": "update-client",
            "delete": "delete-client",
            "reactivate": "reactivate-client",
        },
    )
    _register_entity(
        dispatcher,
        "equipment",
        response=EquipmentResponse,
        create=EquipmentCreate,
        update=EquipmentUpdate,
        channels={
            "list": "list-active-equipments",
            "list_all": "list-all-equipments",
            "get": "get-equipment",
            "add": "add-equipment",
            "update": "update-equipment",
            "delete": "delete-equipment",
            "reactivate": "reactivate-equipment",
        },
    )
    _register_entity(
        dispatcher,
        "parts",
        response=PartResponse,
        create=PartCreate,
        update=PartUpdate,
        channels={
            "list": "list-parts",
            "list_all": "list-all-parts",
            "get": "get-part",
            "add": "create-part",
            "update": "update-part",
            "delete": "delete-part",
            "reactivate": "reactivate-part",
        },
    )
    _register_entity(
        dispatcher,
        "technicians",
        response=TechnicianResponse,
        create=TechnicianCreate,
        update=TechnicianUpdate,
        channels={
            "list": "list-technicians",
            "list_all": "list-all-technicians",
            "get": "get-technician",
            "add": "create-technician",
            "update": "update-technician",
            "delete": "delete-technician",
            "reactivate": "reactivate-technician",
        },
    )
    dispatcher.register("count-active-technicians", _count_active_technicians)

    _register_entity(
        dispatcher,
        "service_orders",
        response=ServiceOrderResponse,
        create=ServiceOrderCreate,
        update=ServiceOrderUpdate,
        channels={
            "get": "get-service-order",
            "add": "create-service-order",
            "update": "update-service-order",
            "delete": "delete-service-order",
        },
    )
    dispatcher.register("list-service-orders", _list_service_orders)
    dispatcher.register("complete-service-order", _complete_service_order)
    return dispatcher
