"""SQLAlchemy ORM model for the Part entity."""

from sqlalchemy import Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from repair_shop.infrastructure.database.base import Base, LifecycleColumnsMixin


class PartModel(LifecycleColumnsMixin, Base):
    """ORM model — maps to the 'parts' table."""

    __tablename__ = "parts"
    __table_args__ = {"sqlite_autoincrement": True}

    part_type: Mapped[str | None] = mapped_column(String(100), nullable=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    unit: Mapped[str | None] = mapped_column(String(20), nullable=True)
    unit_price: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
