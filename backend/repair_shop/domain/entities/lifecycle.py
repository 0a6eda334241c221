"""Outcome value objects returned by lifecycle operations."""

from dataclasses import dataclass
from enum import Enum


class DeleteMode(str, Enum):
    HARD = "hard"
    SOFT = "soft"


@dataclass(frozen=True)
class DeleteOutcome:
    """What a delete request actually did to the record."""

    mode: DeleteMode
    message: str
    dependents: int = 0


@dataclass(frozen=True)
class ActionResult:
    """Plain success/message pair for reactivation and unconditional deactivation."""

    success: bool
    message: str
