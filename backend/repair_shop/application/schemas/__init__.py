from .client import ClientCreate, ClientUpdate, ClientResponse
from .equipment import EquipmentCreate, EquipmentUpdate, EquipmentResponse
from .part import PartCreate, PartUpdate, PartResponse
from .technician import TechnicianCreate, TechnicianUpdate, TechnicianResponse
from .service_order import (
    ServiceOrderComplete,
    ServiceOrderCreate,
    ServiceOrderResponse,
    ServiceOrderUpdate,
)
from .lifecycle import ActionResultResponse, DeleteOutcomeResponse

__all__ = [
    "ClientCreate",
    "ClientUpdate",
    "ClientResponse",
    "EquipmentCreate",
    "EquipmentUpdate",
    "EquipmentResponse",
    "PartCreate",
    "PartUpdate",
    "PartResponse",
    "TechnicianCreate",
    "TechnicianUpdate",
    "TechnicianResponse",
    "ServiceOrderComplete",
    "ServiceOrderCreate",
    "ServiceOrderResponse",
    "ServiceOrderUpdate",
    "ActionResultResponse",
    "DeleteOutcomeResponse",
]
