"""Pydantic DTOs for the ServiceOrder feature."""

from datetime import datetime

from pydantic import BaseModel, Field

from repair_shop.domain.entities import PaymentMethod, ServiceOrderPriority, ServiceOrderStatus


class ServiceOrderCreate(BaseModel):
    """Schema for opening a service order. The number is assigned when omitted."""

    client_id: int
    equipment_id: int
    technician_id: int | None = None
    order_number: int | None = None
    status: ServiceOrderStatus = ServiceOrderStatus.PENDING
    priority: ServiceOrderPriority = ServiceOrderPriority.NORMAL
    problem: str | None = None
    estimate: float | None = None
    amount: float | None = None


class ServiceOrderUpdate(BaseModel):
    """Fields the workshop can change while the order is open. Omitted fields keep their value."""

    id: int
    technician_id: int | None = None
    status: ServiceOrderStatus | None = None
    priority: ServiceOrderPriority | None = None
    problem: str | None = None
    estimate: float | None = None
    amount: float | None = None


class ServiceOrderComplete(BaseModel):
    """Payload for closing an order and starting its warranty."""

    id: int
    payment_method: PaymentMethod
    payment_amount: float
    warranty_months: int = Field(3, ge=0, le=60)


class ServiceOrderResponse(BaseModel):
    id: int
    order_number: int
    client_id: int
    equipment_id: int
    technician_id: int | None
    status: ServiceOrderStatus
    priority: ServiceOrderPriority
    problem: str
    estimate: float | None
    amount: float | None
    payment_method: PaymentMethod | None
    payment_amount: float | None
    completion_date: datetime | None
    warranty_months: int | None
    warranty_start: datetime | None
    warranty_end: datetime | None
    is_active: bool
    created_at: datetime | None
    updated_at: datetime | None

    model_config = {"from_attributes": True}
