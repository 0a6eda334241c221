"""Pydantic DTOs for the Technician feature."""

from datetime import datetime

from pydantic import BaseModel, Field


class TechnicianCreate(BaseModel):
    name: str = Field(..., max_length=200, examples=["Ana Costa"])
    phone: str | None = Field(None, max_length=40)
    specialty: str | None = Field(None, max_length=200)


class TechnicianUpdate(TechnicianCreate):
    id: int


class TechnicianResponse(BaseModel):
    id: int
    name: str
    phone: str
    specialty: str
    is_active: bool
    created_at: datetime | None
    updated_at: datetime | None

    model_config = {"from_attributes": True}
