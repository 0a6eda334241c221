from .integrity_checker import ReferentialIntegrityChecker
from .lifecycle_manager import LifecycleManager

__all__ = [
    "ReferentialIntegrityChecker",
    "LifecycleManager",
]
