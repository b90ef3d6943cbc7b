"""Property data-access functions."""

import logging

from sqlalchemy import insert
from sqlalchemy.orm import Session

from realestate.core.database import transaction
from realestate.core.errors import NotFoundError
from realestate.models.property import Property
from realestate.schemas.property import PropertyCreate, PropertyUpdate

logger = logging.getLogger(__name__)


def create_property(
    db: Session,
    property_data: PropertyCreate,
    commit: bool = True,
) -> Property:
    """Insert a new property.

    Args:
        db: Database session
        property_data: Property creation data; ``property_id`` may be omitted
        commit: Commit on success, or only flush into the caller's transaction

    Returns:
        The inserted property

    Raises:
        UniqueViolation: property_id or listing_number already exists
        NotNullViolation: title is missing

    """
    values = property_data.model_dump()
    if values["property_id"] is None:
        del values["property_id"]

    with transaction(db, commit=commit):
        db_property = db.scalars(insert(Property).values(**values).returning(Property)).one()

    logger.info("Created property %s (%s)", db_property.property_id, db_property.title)
    return db_property


def get_property(db: Session, property_id: int) -> Property:
    """Get a property by ID."""
    db_property = db.query(Property).filter(Property.property_id == property_id).first()
    if not db_property:
        raise NotFoundError("Property", property_id)
    return db_property


def get_property_by_listing_number(db: Session, listing_number: str) -> Property | None:
    """Get a property by its listing number."""
    return db.query(Property).filter(Property.listing_number == listing_number).first()


def get_properties(db: Session, skip: int = 0, limit: int = 100) -> list[Property]:
    """Get all properties with pagination."""
    return db.query(Property).order_by(Property.property_id).offset(skip).limit(limit).all()


def update_property(
    db: Session,
    property_id: int,
    property_data: PropertyUpdate,
    commit: bool = True,
) -> Property:
    """Update the fields of a property that were explicitly set."""
    db_property = get_property(db, property_id)

    update_data = property_data.model_dump(exclude_unset=True)
    with transaction(db, commit=commit):
        for field, value in update_data.items():
            setattr(db_property, field, value)

    db.refresh(db_property)
    logger.info("Updated property %s: %s", property_id, sorted(update_data))
    return db_property


def delete_property(db: Session, property_id: int, commit: bool = True) -> None:
    """Delete a property.

    Fails with ReferentialIntegrityViolation while any agent link or
    client transaction still references the property.
    """
    db_property = get_property(db, property_id)
    with transaction(db, commit=commit):
        db.delete(db_property)
    logger.info("Deleted property %s", property_id)
