"""Composition helpers — wires a storage backend to the application layer."""

from dataclasses import dataclass

from repair_shop.application.interfaces import StorageBackend, StorageSession
from repair_shop.application.repositories import (
    ClientRepository,
    EquipmentRepository,
    PartRepository,
    ServiceOrderRepository,
    TechnicianRepository,
)
from repair_shop.application.services import LifecycleManager, ReferentialIntegrityChecker
from repair_shop.config import Settings, get_settings
from repair_shop.infrastructure.database import SQLAlchemyStorageBackend
from repair_shop.infrastructure.keyvalue import KeyValueStorageBackend


def create_storage_backend(settings: Settings | None = None) -> StorageBackend:
    """Build the backend named by ``storage_backend``. Called once per process."""
    settings = settings or get_settings()
    if settings.storage_backend == "keyvalue":
        return KeyValueStorageBackend(
            settings.keyvalue_path or None,
            namespace=settings.keyvalue_namespace,
        )
    return SQLAlchemyStorageBackend(
        settings.database_url,
        echo=(settings.app_env == "development" and settings.log_level_sql == "DEBUG"),
    )


@dataclass
class Repositories:
    """All entity repositories bound to one unit of work."""

    clients: ClientRepository
    equipment: EquipmentRepository
    parts: PartRepository
    technicians: TechnicianRepository
    service_orders: ServiceOrderRepository


def build_repositories(session: StorageSession) -> Repositories:
    """Provides every repository sharing one lifecycle manager and unit of work."""
    lifecycle = LifecycleManager(session, ReferentialIntegrityChecker(session))
    return Repositories(
        clients=ClientRepository(session, lifecycle),
        equipment=EquipmentRepository(session, lifecycle),
        parts=PartRepository(session, lifecycle),
        technicians=TechnicianRepository(session, lifecycle),
        service_orders=ServiceOrderRepository(session, lifecycle),
    )
