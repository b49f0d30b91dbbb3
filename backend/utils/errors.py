# backend/utils/errors.py
"""Constraint-violation errors raised by the data-access layer.

Every rejected write ends up as one of three kinds: a value outside its
domain (range check, closed enumeration, required column left empty), a
duplicate in a unique column, or a reference to a parent row that does not
exist. The database raises these through SQLAlchemy; ``translate_integrity_error``
maps the driver-specific error onto the matching class.
"""
from typing import Optional

from sqlalchemy.exc import IntegrityError, StatementError


class IntegrityViolation(Exception):
    """Base class for writes rejected by a schema constraint."""

    kind = "integrity"

    def __init__(self, message: str, constraint: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.constraint = constraint

    def __str__(self):
        if self.constraint:
            return f"{self.message} ({self.constraint})"
        return self.message


class DomainConstraintError(IntegrityViolation):
    kind = "domain"


class UniquenessError(IntegrityViolation):
    kind = "uniqueness"


class ReferentialError(IntegrityViolation):
    kind = "referential"


# PostgreSQL SQLSTATE codes for integrity constraint violations
_PG_CODES = {
    "23502": DomainConstraintError,  # not_null_violation
    "23503": ReferentialError,       # foreign_key_violation
    "23505": UniquenessError,        # unique_violation
    "23514": DomainConstraintError,  # check_violation
}

# SQLite reports the failed constraint in the message text
_SQLITE_MARKERS = (
    ("UNIQUE constraint failed", UniquenessError),
    ("CHECK constraint failed", DomainConstraintError),
    ("NOT NULL constraint failed", DomainConstraintError),
    ("FOREIGN KEY constraint failed", ReferentialError),
)


def _sqlstate(orig) -> Optional[str]:
    # psycopg2 exposes pgcode, psycopg 3 exposes sqlstate
    return getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)


def _constraint_name(orig) -> Optional[str]:
    diag = getattr(orig, "diag", None)
    if diag is not None and getattr(diag, "constraint_name", None):
        return diag.constraint_name

    text = str(orig)
    if ":" in text:
        return text.split(":", 1)[1].strip() or None
    return None


def translate_integrity_error(exc: StatementError) -> IntegrityViolation:
    """Return the taxonomy error for a failed statement.

    Handles ``IntegrityError`` from SQLite and PostgreSQL drivers, and the
    ``StatementError`` SQLAlchemy raises when an enum column receives a
    value outside its closed set before the statement reaches the database.
    """
    orig = getattr(exc, "orig", None)

    if isinstance(orig, LookupError):
        return DomainConstraintError(str(orig).splitlines()[0], constraint="enum")

    if not isinstance(exc, IntegrityError):
        return IntegrityViolation(str(orig or exc))

    code = _sqlstate(orig)
    if code in _PG_CODES:
        return _PG_CODES[code](str(orig).splitlines()[0], constraint=_constraint_name(orig))

    text = str(orig)
    for marker, error_cls in _SQLITE_MARKERS:
        if marker in text:
            return error_cls(marker, constraint=_constraint_name(orig))

    return IntegrityViolation(text)
