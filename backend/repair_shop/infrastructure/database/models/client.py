"""SQLAlchemy ORM model for the Client entity."""

from sqlalchemy import Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from repair_shop.infrastructure.database.base import Base, LifecycleColumnsMixin


class ClientModel(LifecycleColumnsMixin, Base):
    """ORM model — maps to the 'clients' table."""

    __tablename__ = "clients"

    name: Mapped[str] = mapped_column(String(200), nullable=False)
    phone: Mapped[str] = mapped_column(String(40), nullable=False)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    tax_id: Mapped[str | None] = mapped_column(String(32), nullable=True, unique=True)
    address: Mapped[str | None] = mapped_column(String(255), nullable=True)
    city: Mapped[str | None] = mapped_column(String(100), nullable=True)
    state: Mapped[str | None] = mapped_column(String(50), nullable=True)
    zip_code: Mapped[str | None] = mapped_column(String(20), nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    __table_args__ = (
        Index("ix_clients_name", "name"),
        {"sqlite_autoincrement": True},
    )

    def __repr__(self) -> str:
        return f"<ClientModel(id={self.id}, name='{self.name}', active={self.is_active})>"
