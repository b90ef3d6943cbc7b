"""Client Pydantic schemas."""

from datetime import date

from pydantic import BaseModel, EmailStr, Field


class ClientBase(BaseModel):
    """Base client schema."""

    name: str = Field(min_length=1, max_length=100)
    email: EmailStr | None = None
    registration_date: date | None = None


class ClientCreate(ClientBase):
    """Schema for creating a new client."""

    client_id: int | None = None


class ClientUpdate(BaseModel):
    """Schema for updating a client."""

    name: str | None = Field(default=None, min_length=1, max_length=100)
    email: EmailStr | None = None
    registration_date: date | None = None


class ClientResponse(ClientBase):
    """Schema for client response."""

    client_id: int

    model_config = {"from_attributes": True}
