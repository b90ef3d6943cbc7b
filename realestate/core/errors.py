"""Error types and integrity error translation."""

from sqlalchemy.exc import IntegrityError


class RealEstateError(Exception):
    """Base exception for the real estate database layer."""

    pass


class NotFoundError(RealEstateError):
    """No row exists for the requested identity."""

    def __init__(self, entity: str, key: object) -> None:
        self.entity = entity
        self.key = key
        super().__init__(f"{entity} not found: {key!r}")


class UnsupportedOperationError(RealEstateError):
    """The database engine has no primitive for the requested operation."""

    pass


class IntegrityViolation(RealEstateError):
    """A constraint enforced by the database engine was violated."""

    def __init__(self, constraint_message: str) -> None:
        self.constraint_message = constraint_message
        super().__init__(constraint_message)


class UniqueViolation(IntegrityViolation):
    """Duplicate primary key or unique value."""

    pass


class NotNullViolation(IntegrityViolation):
    """NULL written to a required column."""

    pass


class ReferentialIntegrityViolation(IntegrityViolation):
    """Foreign key references a missing row, or a referenced row was deleted."""

    pass


# SQLSTATE class 23 codes (PostgreSQL and other drivers exposing SQLSTATE)
_SQLSTATE_MAP: dict[str, type[IntegrityViolation]] = {
    "23505": UniqueViolation,
    "23502": NotNullViolation,
    "23503": ReferentialIntegrityViolation,
}

# Message fragments for drivers without SQLSTATE (SQLite, MySQL, Oracle)
_MESSAGE_MAP: list[tuple[str, type[IntegrityViolation]]] = [
    ("unique constraint", UniqueViolation),
    ("duplicate entry", UniqueViolation),
    ("ora-00001", UniqueViolation),
    ("not null constraint", NotNullViolation),
    ("cannot be null", NotNullViolation),
    ("ora-01400", NotNullViolation),
    ("foreign key constraint", ReferentialIntegrityViolation),
    ("ora-02291", ReferentialIntegrityViolation),
    ("ora-02292", ReferentialIntegrityViolation),
]


def _sqlstate(exc: IntegrityError) -> str | None:
    orig = exc.orig
    # psycopg2 uses pgcode, psycopg 3 uses sqlstate
    return getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)


def translate_integrity_error(exc: IntegrityError) -> IntegrityViolation:
    """Map a driver-level IntegrityError onto the domain error hierarchy."""
    message = str(exc.orig)

    code = _sqlstate(exc)
    if code in _SQLSTATE_MAP:
        return _SQLSTATE_MAP[code](message)

    lowered = message.lower()
    for fragment, error_cls in _MESSAGE_MAP:
        if fragment in lowered:
            return error_cls(message)

    return IntegrityViolation(message)
