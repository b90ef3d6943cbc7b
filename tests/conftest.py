"""Shared pytest fixtures."""

from collections.abc import Iterator

import pytest
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from realestate.core.database import Base, make_engine
from realestate.seed import seed_database

# Import models so Base.metadata knows every table
from realestate import models  # noqa: F401


@pytest.fixture
def test_engine() -> Iterator[Engine]:
    """Create an in-memory database with the full schema."""
    engine = make_engine("sqlite:///:memory:", poolclass=StaticPool)
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def test_db(test_engine: Engine) -> Iterator[Session]:
    """Create a session bound to the in-memory database."""
    testing_session_local = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)
    db = testing_session_local()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def seeded_db(test_db: Session) -> Session:
    """Session over a database loaded with the sample data."""
    seed_database(test_db)
    return test_db
