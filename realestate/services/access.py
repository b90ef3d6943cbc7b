"""Read-only access grants, delegated to the engine's privilege system."""

import logging

from sqlalchemy import text
from sqlalchemy.engine import Dialect
from sqlalchemy.orm import Session

from realestate import models  # noqa: F401
from realestate.core.config import settings
from realestate.core.database import Base, transaction
from realestate.core.errors import NotFoundError, UnsupportedOperationError

logger = logging.getLogger(__name__)

# Dialects whose engines implement GRANT
GRANT_DIALECTS = frozenset({"postgresql", "mysql", "mariadb", "oracle", "mssql"})


def build_grant_select(dialect: Dialect, table_name: str, principal: str) -> str:
    """Render ``GRANT SELECT ON <table> TO <principal>`` for a dialect."""
    if dialect.name not in GRANT_DIALECTS:
        raise UnsupportedOperationError(
            f"The {dialect.name} engine has no privilege system; cannot grant access"
        )

    table = Base.metadata.tables.get(table_name)
    if table is None:
        raise NotFoundError("Table", table_name)

    preparer = dialect.identifier_preparer
    return f"GRANT SELECT ON {preparer.format_table(table)} TO {preparer.quote(principal)}"


def grant_select(
    db: Session,
    table_name: str = "property",
    principal: str | None = None,
) -> None:
    """Give a principal select-only access to a table."""
    principal = principal or settings.READONLY_PRINCIPAL
    statement = build_grant_select(db.get_bind().dialect, table_name, principal)

    with transaction(db):
        db.execute(text(statement))
    logger.info("Granted SELECT on %s to %s", table_name, principal)
