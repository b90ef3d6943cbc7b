"""Read-only queries across properties, agents and clients."""

from sqlalchemy import select
from sqlalchemy.orm import Session

from realestate.models.agent import Agent
from realestate.models.associations import PropertyAgent, PropertyClient
from realestate.models.client import Client
from realestate.models.property import Property
from realestate.schemas.associations import AssignmentRow


def get_property_assignments(db: Session) -> list[AssignmentRow]:
    """List every property with its agents and any client transactions.

    Properties without an agent are left out; properties without a
    transaction appear with empty client columns.
    """
    stmt = (
        select(
            Property.title,
            Agent.name.label("agent_name"),
            Client.name.label("client_name"),
            PropertyClient.transaction_date,
        )
        .select_from(Property)
        .join(PropertyAgent, PropertyAgent.property_id == Property.property_id)
        .join(Agent, Agent.agent_id == PropertyAgent.agent_id)
        .outerjoin(PropertyClient, PropertyClient.property_id == Property.property_id)
        .outerjoin(Client, Client.client_id == PropertyClient.client_id)
        .order_by(Property.property_id, Agent.agent_id, PropertyClient.transaction_date)
    )
    return [AssignmentRow(**row._asdict()) for row in db.execute(stmt)]


def get_available_properties(db: Session) -> list[Property]:
    """List properties that have never been rented or bought."""
    transacted = select(PropertyClient.property_id)
    return (
        db.query(Property)
        .filter(Property.property_id.not_in(transacted))
        .order_by(Property.property_id)
        .all()
    )
