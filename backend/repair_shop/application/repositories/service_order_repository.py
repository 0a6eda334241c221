"""ServiceOrder repository — the dependent side of client/equipment history."""

import logging
from enum import Enum
from typing import Any

from pydantic import BaseModel

from repair_shop.application.interfaces import Record
from repair_shop.application.repositories.base import EntityRepository
from repair_shop.application.schemas.service_order import (
    ServiceOrderComplete,
    ServiceOrderCreate,
    ServiceOrderUpdate,
)
from repair_shop.domain.entities import (
    CLIENT_SCHEMA,
    EQUIPMENT_SCHEMA,
    SERVICE_ORDER_SCHEMA,
    TECHNICIAN_SCHEMA,
    PaymentMethod,
    ServiceOrder,
    ServiceOrderPriority,
    ServiceOrderStatus,
)
from repair_shop.domain.entities.service_order import FIRST_ORDER_NUMBER
from repair_shop.domain.entity_schema import EntitySchema, SortKey
from repair_shop.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)


class ServiceOrderRepository(EntityRepository):
    schema = SERVICE_ORDER_SCHEMA

    def _to_entity(self, record: Record) -> ServiceOrder:
        payment_method = record.get("payment_method")
        return ServiceOrder(
            id=record["id"],
            order_number=record["order_number"],
            client_id=record["client_id"],
            equipment_id=record["equipment_id"],
            technician_id=record.get("technician_id"),
            status=ServiceOrderStatus(record["status"]),
            priority=ServiceOrderPriority(record["priority"]),
            problem=record.get("problem") or "",
            estimate=record.get("estimate"),
            amount=record.get("amount"),
            payment_method=PaymentMethod(payment_method) if payment_method else None,
            payment_amount=record.get("payment_amount"),
            completion_date=record.get("completion_date"),
            warranty_months=record.get("warranty_months"),
            warranty_start=record.get("warranty_start"),
            warranty_end=record.get("warranty_end"),
            is_active=record["is_active"],
            created_at=record.get("created_at"),
            updated_at=record.get("updated_at"),
        )

    def _to_payload(self, data: BaseModel, exclude_unset: bool = False) -> dict[str, Any]:
        payload = data.model_dump(exclude={"id"}, exclude_unset=exclude_unset)
        return {
            key: value.value if isinstance(value, Enum) else value
            for key, value in payload.items()
        }

    async def _require(self, schema: EntitySchema, record_id: int | None) -> None:
        if record_id is None:
            return
        if await self._session.store(schema).get(record_id) is None:
            raise EntityNotFoundError(schema.label, record_id)

    async def _assign_order_number(self, record: Record) -> Record:
        """Number a freshly inserted order from its id, which is never reused.

        An explicitly numbered order may already hold that number; the new
        order then goes past the highest number in use.
        """
        number = FIRST_ORDER_NUMBER - 1 + record["id"]
        if await self._store.count(filters={"order_number": number}):
            latest = await self._store.list_records(
                order_by=(SortKey("order_number", descending=True),)
            )
            number = latest[0]["order_number"] + 1
        return await self._store.update(record["id"], {"order_number": number})

    async def add(self, data: ServiceOrderCreate) -> ServiceOrder:
        """Open an order for an existing client and piece of equipment."""
        await self._require(CLIENT_SCHEMA, data.client_id)
        await self._require(EQUIPMENT_SCHEMA, data.equipment_id)
        await self._require(TECHNICIAN_SCHEMA, data.technician_id)

        record = await self._store.insert(self._to_payload(data))
        if record["order_number"] is None:
            record = await self._assign_order_number(record)
        logger.info(
            "Opened service order %s for client %s", record["order_number"], record["client_id"]
        )
        return self._to_entity(record)

    async def update(self, record_id: int, data: ServiceOrderUpdate) -> ServiceOrder:
        """Apply only the fields the caller actually sent."""
        await self._require(TECHNICIAN_SCHEMA, data.technician_id)
        payload = self._to_payload(data, exclude_unset=True)
        record = await self._store.update(record_id, payload)
        return self._to_entity(record)

    async def complete(self, data: ServiceOrderComplete) -> ServiceOrder:
        """Close the order, record the payment and start the warranty."""
        order = await self.get(data.id)
        order.complete(
            payment_method=data.payment_method,
            payment_amount=data.payment_amount,
            warranty_months=data.warranty_months,
        )
        record = await self._store.update(
            data.id,
            {
                "status": order.status.value,
                "payment_method": order.payment_method.value,
                "payment_amount": order.payment_amount,
                "completion_date": order.completion_date,
                "warranty_months": order.warranty_months,
                "warranty_start": order.warranty_start,
                "warranty_end": order.warranty_end,
            },
        )
        return self._to_entity(record)

    async def list_for_client(self, client_id: int) -> list[ServiceOrder]:
        records = await self._store.list_records(
            filters={"client_id": client_id}, order_by=self.schema.natural_order
        )
        return [self._to_entity(record) for record in records]

    async def list_for_equipment(self, equipment_id: int) -> list[ServiceOrder]:
        records = await self._store.list_records(
            filters={"equipment_id": equipment_id}, order_by=self.schema.natural_order
        )
        return [self._to_entity(record) for record in records]
