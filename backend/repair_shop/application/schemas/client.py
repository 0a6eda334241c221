"""Pydantic DTOs (Data Transfer Objects) for the Client feature."""

from datetime import datetime

from pydantic import BaseModel, Field


class ClientCreate(BaseModel):
    """Schema for registering a new client. Blank optional fields are fine."""

    name: str = Field(..., max_length=200, examples=["Escola Municipal Centro"])
    phone: str = Field(..., max_length=40, examples=["7199999-0001"])
    email: str | None = Field(None, max_length=255)
    tax_id: str | None = Field(None, max_length=32, description="CPF/CNPJ, unique when given")
    address: str | None = Field(None, max_length=255)
    city: str | None = Field(None, max_length=100)
    state: str | None = Field(None, max_length=50)
    zip_code: str | None = Field(None, max_length=20)
    notes: str | None = None


class ClientUpdate(ClientCreate):
    """Full client record as edited by the UI."""

    id: int


class ClientResponse(BaseModel):
    """Schema returned to the client."""

    id: int
    name: str
    phone: str
    email: str
    tax_id: str
    address: str
    city: str
    state: str
    zip_code: str
    notes: str
    is_active: bool
    created_at: datetime | None
    updated_at: datetime | None

    model_config = {"from_attributes": True}
