"""Schemas for property/agent links, property/client transactions and join rows."""

from datetime import date

from pydantic import BaseModel


class PropertyAgentCreate(BaseModel):
    """Schema for assigning an agent to a property."""

    property_id: int
    agent_id: int


class PropertyAgentResponse(PropertyAgentCreate):
    """Schema for a property/agent link."""

    model_config = {"from_attributes": True}


class PropertyClientCreate(BaseModel):
    """Schema for recording a client transaction on a property."""

    property_id: int
    client_id: int
    transaction_date: date


class PropertyClientResponse(PropertyClientCreate):
    """Schema for a property/client transaction."""

    model_config = {"from_attributes": True}


class AssignmentRow(BaseModel):
    """One row of properties joined with agents and (optionally) clients."""

    title: str
    agent_name: str
    client_name: str | None = None
    transaction_date: date | None = None

    model_config = {"from_attributes": True}
