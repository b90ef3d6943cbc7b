"""Database configuration and session management."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from realestate.core.config import settings
from realestate.core.errors import translate_integrity_error

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection: Any, connection_record: Any) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def make_engine(url: str, **kwargs: Any) -> Engine:
    """Create an engine with foreign key enforcement turned on.

    SQLite ignores FOREIGN KEY clauses unless the pragma is set on each
    connection, so a connect listener is installed for SQLite URLs.
    """
    is_sqlite = url.startswith("sqlite")
    if is_sqlite:
        connect_args = kwargs.pop("connect_args", {})
        connect_args.setdefault("check_same_thread", False)
        kwargs["connect_args"] = connect_args

    kwargs.setdefault("echo", settings.SQL_ECHO)
    engine = create_engine(url, **kwargs)

    if is_sqlite:
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


# Create SQLAlchemy engine
engine = make_engine(settings.DATABASE_URL)

# Create SessionLocal class
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


# Base class for models
class Base(DeclarativeBase):
    """Base class for all database models."""

    pass


def init_db(bind: Engine | None = None) -> None:
    """Create all tables that do not exist yet."""
    # Register every model on Base.metadata
    import realestate.models  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)


@contextmanager
def transaction(db: Session, commit: bool = True) -> Iterator[Session]:
    """Run a unit of work that is applied completely or not at all.

    On normal exit the session is committed. With ``commit`` False the
    block is part of an enclosing unit of work: it is only flushed, and
    on error nothing is rolled back here, so the enclosing scope decides
    the outcome for all of its writes. Integrity errors reported by the
    engine are re-raised as ``IntegrityViolation`` subclasses.
    """
    try:
        yield db
        if commit:
            db.commit()
        else:
            db.flush()
    except IntegrityError as exc:
        error = translate_integrity_error(exc)
        if commit:
            db.rollback()
            logger.warning("Transaction rolled back: %s", error)
        raise error from exc
    except Exception:
        if commit:
            db.rollback()
            logger.warning("Transaction rolled back after error", exc_info=True)
        raise
