from .base import EntityRepository
from .client_repository import ClientRepository
from .equipment_repository import EquipmentRepository
from .part_repository import PartRepository
from .technician_repository import TechnicianRepository
from .service_order_repository import ServiceOrderRepository

__all__ = [
    "EntityRepository",
    "ClientRepository",
    "EquipmentRepository",
    "PartRepository",
    "TechnicianRepository",
    "ServiceOrderRepository",
]
