"""Domain entity — a service order (OS) tying a client's equipment to a repair job.

Service orders are the dependents that keep clients and equipment from
being hard-deleted.
"""

import calendar
import math
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum

from repair_shop.domain.entity_schema import (
    DeletePolicy,
    EntityKind,
    EntitySchema,
    FieldType,
    SortKey,
)

DEFAULT_WARRANTY_MONTHS = 3
FIRST_ORDER_NUMBER = 1001


class ServiceOrderStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    WAITING_PART = "waiting_part"
    READY = "ready"
    COMPLETED = "completed"
    DELIVERED = "delivered"


class ServiceOrderPriority(str, Enum):
    LOW = "low"
    NORMAL = "normal"
    URGENT = "urgent"


class PaymentMethod(str, Enum):
    CASH = "cash"
    CARD = "card"
    PIX = "pix"
    TRANSFER = "transfer"


SERVICE_ORDER_SCHEMA = EntitySchema(
    kind=EntityKind.SERVICE_ORDER,
    label="Service order",
    table="service_orders",
    fields={
        "order_number": FieldType.INTEGER,
        "client_id": FieldType.INTEGER,
        "equipment_id": FieldType.INTEGER,
        "technician_id": FieldType.INTEGER,
        "status": FieldType.TEXT,
        "priority": FieldType.TEXT,
        "problem": FieldType.TEXT,
        "estimate": FieldType.FLOAT,
        "amount": FieldType.FLOAT,
        "payment_method": FieldType.TEXT,
        "payment_amount": FieldType.FLOAT,
        "completion_date": FieldType.DATETIME,
        "warranty_months": FieldType.INTEGER,
        "warranty_start": FieldType.DATETIME,
        "warranty_end": FieldType.DATETIME,
    },
    required=("client_id", "equipment_id", "status", "priority"),
    unique=("order_number",),
    optional_text=("problem", "payment_method"),
    non_negative=("estimate", "amount", "payment_amount", "warranty_months"),
    natural_order=(SortKey("order_number", descending=True),),
    delete_policy=DeletePolicy.ALWAYS_HARD,
)


def add_months(moment: datetime, months: int) -> datetime:
    """Add calendar months, clamping the day to the end of the target month."""
    month_index = moment.month - 1 + months
    year = moment.year + month_index // 12
    month = month_index % 12 + 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


@dataclass
class ServiceOrder:
    order_number: int
    client_id: int
    equipment_id: int
    technician_id: int | None = None
    status: ServiceOrderStatus = ServiceOrderStatus.PENDING
    priority: ServiceOrderPriority = ServiceOrderPriority.NORMAL
    problem: str = ""
    estimate: float | None = None
    amount: float | None = None
    payment_method: PaymentMethod | None = None
    payment_amount: float | None = None
    completion_date: datetime | None = None
    warranty_months: int | None = None
    warranty_start: datetime | None = None
    warranty_end: datetime | None = None
    id: int | None = None
    is_active: bool = True
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def complete(
        self,
        payment_method: PaymentMethod,
        payment_amount: float,
        warranty_months: int = DEFAULT_WARRANTY_MONTHS,
        completed_at: datetime | None = None,
    ) -> None:
        """Close the order and start its warranty period at the completion date."""
        completed_at = completed_at or datetime.now(timezone.utc)
        self.status = ServiceOrderStatus.COMPLETED
        self.payment_method = payment_method
        self.payment_amount = payment_amount
        self.completion_date = completed_at
        self.warranty_months = warranty_months
        self.warranty_start = completed_at
        self.warranty_end = add_months(completed_at, warranty_months)

    def is_warranty_valid(self, now: datetime | None = None) -> bool:
        if self.warranty_end is None:
            return False
        return (now or datetime.now(timezone.utc)) < self.warranty_end

    def warranty_days_remaining(self, now: datetime | None = None) -> int:
        if self.warranty_end is None:
            return 0
        remaining = self.warranty_end - (now or datetime.now(timezone.utc))
        days = math.ceil(remaining / timedelta(days=1))
        return days if days > 0 else 0
