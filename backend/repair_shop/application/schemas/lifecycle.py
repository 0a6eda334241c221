"""Pydantic DTOs for lifecycle outcomes."""

from pydantic import BaseModel

from repair_shop.domain.entities import DeleteMode


class DeleteOutcomeResponse(BaseModel):
    mode: DeleteMode
    message: str

    model_config = {"from_attributes": True}


class ActionResultResponse(BaseModel):
    success: bool
    message: str

    model_config = {"from_attributes": True}
