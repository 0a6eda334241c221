"""SQLAlchemy ORM model for the Technician entity."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from repair_shop.infrastructure.database.base import Base, LifecycleColumnsMixin


class TechnicianModel(LifecycleColumnsMixin, Base):
    """ORM model — maps to the 'technicians' table."""

    __tablename__ = "technicians"
    __table_args__ = {"sqlite_autoincrement": True}

    name: Mapped[str] = mapped_column(String(200), nullable=False)
    phone: Mapped[str | None] = mapped_column(String(40), nullable=True)
    specialty: Mapped[str | None] = mapped_column(String(200), nullable=True)
