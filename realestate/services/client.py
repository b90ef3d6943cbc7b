"""Client data-access functions."""

import logging

from sqlalchemy import insert
from sqlalchemy.orm import Session

from realestate.core.database import transaction
from realestate.core.errors import NotFoundError
from realestate.models.client import Client
from realestate.schemas.client import ClientCreate, ClientUpdate

logger = logging.getLogger(__name__)


def create_client(db: Session, client_data: ClientCreate, commit: bool = True) -> Client:
    """Insert a new client. Fails with UniqueViolation on a duplicate email."""
    values = client_data.model_dump()
    if values["client_id"] is None:
        del values["client_id"]

    with transaction(db, commit=commit):
        client = db.scalars(insert(Client).values(**values).returning(Client)).one()

    logger.info("Created client %s", client.client_id)
    return client


def get_client(db: Session, client_id: int) -> Client:
    """Get a client by ID."""
    client = db.query(Client).filter(Client.client_id == client_id).first()
    if not client:
        raise NotFoundError("Client", client_id)
    return client


def get_client_by_email(db: Session, email: str) -> Client | None:
    """Get a client by email address."""
    return db.query(Client).filter(Client.email == email).first()


def get_clients(db: Session, skip: int = 0, limit: int = 100) -> list[Client]:
    """Get all clients with pagination."""
    return db.query(Client).order_by(Client.client_id).offset(skip).limit(limit).all()


def update_client(
    db: Session,
    client_id: int,
    client_data: ClientUpdate,
    commit: bool = True,
) -> Client:
    """Update a client."""
    client = get_client(db, client_id)

    update_data = client_data.model_dump(exclude_unset=True)
    with transaction(db, commit=commit):
        for field, value in update_data.items():
            setattr(client, field, value)

    db.refresh(client)
    return client


def delete_client(db: Session, client_id: int, commit: bool = True) -> None:
    """Delete a client with no recorded transactions."""
    client = get_client(db, client_id)
    with transaction(db, commit=commit):
        db.delete(client)
    logger.info("Deleted client %s", client_id)
