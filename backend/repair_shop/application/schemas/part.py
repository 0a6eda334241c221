"""Pydantic DTOs for the Part feature."""

from datetime import datetime

from pydantic import BaseModel, Field


class PartCreate(BaseModel):
    name: str = Field(..., max_length=200, examples=["Lâmpada de Projetor Epson"])
    part_type: str | None = Field(None, max_length=100, examples=["Lâmpada"])
    quantity: int = 0
    unit: str | None = Field("un", max_length=20)
    unit_price: float = 0.0


class PartUpdate(PartCreate):
    id: int


class PartResponse(BaseModel):
    id: int
    name: str
    part_type: str
    quantity: int
    unit: str
    unit_price: float
    is_active: bool
    created_at: datetime | None
    updated_at: datetime | None

    model_config = {"from_attributes": True}
