"""Agent data-access functions."""

import logging

from sqlalchemy import insert
from sqlalchemy.orm import Session

from realestate.core.database import transaction
from realestate.core.errors import NotFoundError
from realestate.models.agent import Agent
from realestate.schemas.agent import AgentCreate, AgentUpdate

logger = logging.getLogger(__name__)


def create_agent(db: Session, agent_data: AgentCreate, commit: bool = True) -> Agent:
    """Insert a new agent."""
    values = agent_data.model_dump()
    if values["agent_id"] is None:
        del values["agent_id"]

    with transaction(db, commit=commit):
        agent = db.scalars(insert(Agent).values(**values).returning(Agent)).one()

    logger.info("Created agent %s (%s)", agent.agent_id, agent.name)
    return agent


def get_agent(db: Session, agent_id: int) -> Agent:
    """Get an agent by ID."""
    agent = db.query(Agent).filter(Agent.agent_id == agent_id).first()
    if not agent:
        raise NotFoundError("Agent", agent_id)
    return agent


def get_agents(db: Session, skip: int = 0, limit: int = 100) -> list[Agent]:
    """Get all agents with pagination."""
    return db.query(Agent).order_by(Agent.agent_id).offset(skip).limit(limit).all()


def update_agent(
    db: Session,
    agent_id: int,
    agent_data: AgentUpdate,
    commit: bool = True,
) -> Agent:
    """Update an agent."""
    agent = get_agent(db, agent_id)

    update_data = agent_data.model_dump(exclude_unset=True)
    with transaction(db, commit=commit):
        for field, value in update_data.items():
            setattr(agent, field, value)

    db.refresh(agent)
    return agent


def delete_agent(db: Session, agent_id: int, commit: bool = True) -> None:
    """Delete an agent that no longer manages any property."""
    agent = get_agent(db, agent_id)
    with transaction(db, commit=commit):
        db.delete(agent)
    logger.info("Deleted agent %s", agent_id)
