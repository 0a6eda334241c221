from repair_shop.infrastructure.database.base import Base

from .client import ClientModel
from .equipment import EquipmentModel
from .part import PartModel
from .technician import TechnicianModel
from .service_order import ServiceOrderModel

# Table name → ORM model, used to bind an EntitySchema to its mapped class.
MODEL_REGISTRY: dict[str, type[Base]] = {
    model.__tablename__: model
    for model in (ClientModel, EquipmentModel, PartModel, TechnicianModel, ServiceOrderModel)
}

__all__ = [
    "MODEL_REGISTRY",
    "ClientModel",
    "EquipmentModel",
    "PartModel",
    "TechnicianModel",
    "ServiceOrderModel",
]
