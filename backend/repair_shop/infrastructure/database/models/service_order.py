"""SQLAlchemy ORM model for the ServiceOrder entity."""

from datetime import datetime

from sqlalchemy import DateTime, Float, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from repair_shop.infrastructure.database.base import Base, LifecycleColumnsMixin


class ServiceOrderModel(LifecycleColumnsMixin, Base):
    """ORM model — maps to the 'service_orders' table."""

    __tablename__ = "service_orders"

    order_number: Mapped[int | None] = mapped_column(Integer, nullable=True, unique=True)
    client_id: Mapped[int] = mapped_column(ForeignKey("clients.id"), nullable=False)
    equipment_id: Mapped[int] = mapped_column(ForeignKey("equipment.id"), nullable=False)
    technician_id: Mapped[int | None] = mapped_column(
        ForeignKey("technicians.id"), nullable=True
    )
    status: Mapped[str] = mapped_column(String(30), nullable=False)
    priority: Mapped[str] = mapped_column(String(20), nullable=False)
    problem: Mapped[str | None] = mapped_column(Text, nullable=True)
    estimate: Mapped[float | None] = mapped_column(Float, nullable=True)
    amount: Mapped[float | None] = mapped_column(Float, nullable=True)
    payment_method: Mapped[str | None] = mapped_column(String(20), nullable=True)
    payment_amount: Mapped[float | None] = mapped_column(Float, nullable=True)
    completion_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    warranty_months: Mapped[int | None] = mapped_column(Integer, nullable=True)
    warranty_start: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    warranty_end: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    __table_args__ = (
        Index("ix_service_orders_client", "client_id"),
        Index("ix_service_orders_equipment", "equipment_id"),
        {"sqlite_autoincrement": True},
    )

    def __repr__(self) -> str:
        return (
            f"<ServiceOrderModel(id={self.id}, number={self.order_number}, "
            f"status='{self.status}')>"
        )
