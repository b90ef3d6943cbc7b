"""Property/agent link data-access functions."""

import logging

from sqlalchemy import delete, insert
from sqlalchemy.orm import Session

from realestate.core.database import transaction
from realestate.core.errors import NotFoundError
from realestate.models.agent import Agent
from realestate.models.associations import PropertyAgent
from realestate.models.property import Property
from realestate.schemas.associations import PropertyAgentCreate

logger = logging.getLogger(__name__)


def assign_agent(
    db: Session,
    link_data: PropertyAgentCreate,
    commit: bool = True,
) -> PropertyAgent:
    """Link an agent to a property.

    Raises:
        ReferentialIntegrityViolation: the property or the agent does not exist
        UniqueViolation: the agent is already linked to the property

    """
    with transaction(db, commit=commit):
        link = db.scalars(
            insert(PropertyAgent).values(**link_data.model_dump()).returning(PropertyAgent)
        ).one()

    logger.info("Assigned agent %s to property %s", link_data.agent_id, link_data.property_id)
    return link


def get_agents_for_property(db: Session, property_id: int) -> list[Agent]:
    """Get all agents managing a property."""
    return (
        db.query(Agent)
        .join(PropertyAgent, PropertyAgent.agent_id == Agent.agent_id)
        .filter(PropertyAgent.property_id == property_id)
        .order_by(Agent.agent_id)
        .all()
    )


def get_properties_for_agent(db: Session, agent_id: int) -> list[Property]:
    """Get all properties managed by an agent."""
    return (
        db.query(Property)
        .join(PropertyAgent, PropertyAgent.property_id == Property.property_id)
        .filter(PropertyAgent.agent_id == agent_id)
        .order_by(Property.property_id)
        .all()
    )


def unassign_agent(db: Session, property_id: int, agent_id: int, commit: bool = True) -> None:
    """Remove an agent's link to a property, leaving both rows in place."""
    stmt = delete(PropertyAgent).where(
        PropertyAgent.property_id == property_id,
        PropertyAgent.agent_id == agent_id,
    )
    with transaction(db, commit=commit):
        result = db.execute(stmt)
        if result.rowcount == 0:
            raise NotFoundError("PropertyAgent", (property_id, agent_id))

    logger.info("Unassigned agent %s from property %s", agent_id, property_id)
