"""Sample data: three properties, agents and clients with their links."""

import logging
from datetime import date

from sqlalchemy.orm import Session

from realestate.core.database import transaction
from realestate.models.property import Property
from realestate.schemas.agent import AgentCreate
from realestate.schemas.associations import PropertyAgentCreate, PropertyClientCreate
from realestate.schemas.client import ClientCreate
from realestate.schemas.property import PropertyCreate, PropertyUpdate
from realestate.services import agent as agent_service
from realestate.services import client as client_service
from realestate.services import property as property_service
from realestate.services import property_agent as property_agent_service
from realestate.services import property_client as property_client_service

logger = logging.getLogger(__name__)

PROPERTIES = [
    PropertyCreate(
        property_id=1,
        title="Luxury Apartment",
        listing_number="LN12345678901",
        listing_date=date(2024, 1, 15),
    ),
    PropertyCreate(
        property_id=2,
        title="Beachfront Villa",
        listing_number="LN12345678902",
        listing_date=date(2024, 2, 22),
    ),
    PropertyCreate(
        property_id=3,
        title="Downtown Office",
        listing_number="LN12345678903",
        listing_date=date(2024, 3, 10),
    ),
]

AGENTS = [
    AgentCreate(agent_id=1, name="John Doe", birth_date=date(1985, 8, 24)),
    AgentCreate(agent_id=2, name="Jane Smith", birth_date=date(1990, 12, 5)),
    AgentCreate(agent_id=3, name="Emily Johnson", birth_date=date(1993, 3, 18)),
]

CLIENTS = [
    ClientCreate(
        client_id=1,
        name="Alice Brown",
        email="alice.brown@email.com",
        registration_date=date(2023, 6, 1),
    ),
    ClientCreate(
        client_id=2,
        name="Bob White",
        email="bob.white@email.com",
        registration_date=date(2023, 7, 15),
    ),
    ClientCreate(
        client_id=3,
        name="Charlie Green",
        email="charlie.green@email.com",
        registration_date=date(2023, 8, 30),
    ),
]

# (property_id, agent_id); properties 1 and 2 are co-managed
PROPERTY_AGENTS = [
    PropertyAgentCreate(property_id=1, agent_id=1),
    PropertyAgentCreate(property_id=2, agent_id=2),
    PropertyAgentCreate(property_id=3, agent_id=3),
    PropertyAgentCreate(property_id=1, agent_id=2),
    PropertyAgentCreate(property_id=2, agent_id=1),
]

PROPERTY_CLIENTS = [
    # Alice Brown rented Luxury Apartment
    PropertyClientCreate(property_id=1, client_id=1, transaction_date=date(2024, 4, 1)),
    # Bob White bought Beachfront Villa
    PropertyClientCreate(property_id=2, client_id=2, transaction_date=date(2024, 5, 15)),
    # Charlie Green rented Downtown Office
    PropertyClientCreate(property_id=3, client_id=3, transaction_date=date(2024, 6, 20)),
]

RENOVATED_TITLE = "Downtown Apartment (Renovated)"

# Built without validation: the listing number is 14 characters, one more
# than the column allows. Engines that enforce VARCHAR length reject it.
MOUNTAIN_CABIN = PropertyCreate.model_construct(
    property_id=4,
    title="Mountain Cabin",
    listing_number="LIST1122334455",
    listing_date=date(2023, 5, 5),
)


def seed_database(db: Session) -> bool:
    """Load the sample data in a single transaction.

    Returns:
        False if the database already had properties and nothing was loaded

    """
    if db.query(Property).first():
        logger.info("Database already has data. Skipping seed.")
        return False

    with transaction(db):
        for property_data in PROPERTIES:
            property_service.create_property(db, property_data, commit=False)
        for agent_data in AGENTS:
            agent_service.create_agent(db, agent_data, commit=False)
        for client_data in CLIENTS:
            client_service.create_client(db, client_data, commit=False)
        for link in PROPERTY_AGENTS:
            property_agent_service.assign_agent(db, link, commit=False)
        for record in PROPERTY_CLIENTS:
            property_client_service.record_transaction(db, record, commit=False)

    logger.info(
        "Seeded %d properties, %d agents, %d clients",
        len(PROPERTIES),
        len(AGENTS),
        len(CLIENTS),
    )
    return True


def apply_example_changes(db: Session) -> None:
    """Rename property 1 and end Alice Brown's transaction on it."""
    property_service.update_property(db, 1, PropertyUpdate(title=RENOVATED_TITLE))
    property_client_service.delete_transactions(db, property_id=1, client_id=1)


def add_mountain_cabin(db: Session) -> Property:
    """Insert property 4 in its own transaction."""
    return property_service.create_property(db, MOUNTAIN_CABIN)
