from .dispatcher import IpcDispatcher, IpcResponse
from .channels import register_channels
from .messages import MessageCatalog

__all__ = [
    "IpcDispatcher",
    "IpcResponse",
    "MessageCatalog",
    "register_channels",
]
