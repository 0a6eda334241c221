"""SQLAlchemy ORM model for the Equipment entity."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from repair_shop.infrastructure.database.base import Base, LifecycleColumnsMixin


class EquipmentModel(LifecycleColumnsMixin, Base):
    """ORM model — maps to the 'equipment' table.

    ``accessories`` holds a JSON array serialized by the equipment repository.
    """

    __tablename__ = "equipment"
    __table_args__ = {"sqlite_autoincrement": True}

    serial_number: Mapped[str | None] = mapped_column(String(100), nullable=True, unique=True)
    device_type: Mapped[str] = mapped_column(String(100), nullable=False)
    brand: Mapped[str | None] = mapped_column(String(100), nullable=True)
    model: Mapped[str | None] = mapped_column(String(100), nullable=True)
    color: Mapped[str | None] = mapped_column(String(50), nullable=True)
    accessories: Mapped[str | None] = mapped_column(Text, nullable=True)
    reported_problem: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return (
            f"<EquipmentModel(id={self.id}, serial='{self.serial_number}', "
            f"type='{self.device_type}')>"
        )
