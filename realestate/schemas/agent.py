"""Agent Pydantic schemas."""

from datetime import date

from pydantic import BaseModel, Field


class AgentBase(BaseModel):
    """Base agent schema."""

    name: str = Field(min_length=1, max_length=100)
    birth_date: date | None = None


class AgentCreate(AgentBase):
    """Schema for creating a new agent."""

    agent_id: int | None = None


class AgentUpdate(BaseModel):
    """Schema for updating an agent."""

    name: str | None = Field(default=None, min_length=1, max_length=100)
    birth_date: date | None = None


class AgentResponse(AgentBase):
    """Schema for agent response."""

    agent_id: int

    model_config = {"from_attributes": True}
