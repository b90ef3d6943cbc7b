"""Property/client transaction data-access functions."""

import logging
from datetime import date

from sqlalchemy import delete, insert
from sqlalchemy.orm import Session

from realestate.core.database import transaction
from realestate.models.associations import PropertyClient
from realestate.schemas.associations import PropertyClientCreate

logger = logging.getLogger(__name__)


def record_transaction(
    db: Session,
    transaction_data: PropertyClientCreate,
    commit: bool = True,
) -> PropertyClient:
    """Record that a client rented or bought a property on a given date.

    Raises:
        ReferentialIntegrityViolation: the property or the client does not exist
        UniqueViolation: the same transaction was already recorded

    """
    with transaction(db, commit=commit):
        record = db.scalars(
            insert(PropertyClient)
            .values(**transaction_data.model_dump())
            .returning(PropertyClient)
        ).one()

    logger.info(
        "Recorded transaction: property %s, client %s on %s",
        transaction_data.property_id,
        transaction_data.client_id,
        transaction_data.transaction_date.isoformat(),
    )
    return record


def get_transactions_for_property(db: Session, property_id: int) -> list[PropertyClient]:
    """Get all client transactions on a property, oldest first."""
    return (
        db.query(PropertyClient)
        .filter(PropertyClient.property_id == property_id)
        .order_by(PropertyClient.transaction_date, PropertyClient.client_id)
        .all()
    )


def get_transactions_for_client(db: Session, client_id: int) -> list[PropertyClient]:
    """Get all transactions made by a client, oldest first."""
    return (
        db.query(PropertyClient)
        .filter(PropertyClient.client_id == client_id)
        .order_by(PropertyClient.transaction_date, PropertyClient.property_id)
        .all()
    )


def delete_transactions(
    db: Session,
    property_id: int,
    client_id: int,
    transaction_date: date | None = None,
    commit: bool = True,
) -> int:
    """Delete transactions between a property and a client.

    Without ``transaction_date`` every transaction of the pair is removed;
    with it, only that one. Returns the number of rows deleted.
    """
    stmt = delete(PropertyClient).where(
        PropertyClient.property_id == property_id,
        PropertyClient.client_id == client_id,
    )
    if transaction_date is not None:
        stmt = stmt.where(PropertyClient.transaction_date == transaction_date)

    with transaction(db, commit=commit):
        deleted = db.execute(stmt).rowcount

    logger.info(
        "Deleted %d transaction(s): property %s, client %s", deleted, property_id, client_id
    )
    return deleted
