"""Pydantic DTOs for the Equipment feature."""

from datetime import datetime

from pydantic import BaseModel, Field


class EquipmentCreate(BaseModel):
    """Schema for registering a device."""

    device_type: str = Field(..., max_length=100, examples=["Projetor"])
    serial_number: str | None = Field(None, max_length=100, examples=["EP20230001"])
    brand: str | None = Field(None, max_length=100)
    model: str | None = Field(None, max_length=100)
    color: str | None = Field(None, max_length=50)
    reported_problem: str | None = None
    accessories: list[str | int] = Field(
        default_factory=list,
        description="Part ids or free-text items that came with the device",
        examples=[["Controle remoto", 3]],
    )


class EquipmentUpdate(EquipmentCreate):
    id: int


class EquipmentResponse(BaseModel):
    id: int
    device_type: str
    serial_number: str
    brand: str
    model: str
    color: str
    reported_problem: str
    accessories: list[str | int]
    is_active: bool
    created_at: datetime | None
    updated_at: datetime | None

    model_config = {"from_attributes": True}
