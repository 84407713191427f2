"""Store error taxonomy and translation of driver-level failures.

Messages carried by these errors are written by the application and are safe
to return to clients; the underlying driver error stays on ``__cause__``.
"""
from __future__ import annotations

import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)

__all__ = [
    "StoreError",
    "ValidationError",
    "UniqueConstraintViolation",
    "ForeignKeyViolation",
    "commit",
    "translate_integrity_error",
]


class StoreError(Exception):
    """Any failure raised by the entity store."""

    default_message = "The database could not complete the request"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(StoreError):
    """A required field is missing or a value is malformed."""

    default_message = "Validation failed"


class UniqueConstraintViolation(StoreError):
    """A value that must be unique already exists."""

    default_message = "A record with that value already exists"


class ForeignKeyViolation(StoreError):
    """A reference points at a row that does not exist."""

    default_message = "Referenced record does not exist"


def translate_integrity_error(err: IntegrityError) -> StoreError:
    """Map an ``IntegrityError`` onto the store taxonomy.

    SQLite and PostgreSQL word their constraint failures differently; both are
    matched case-insensitively on the constraint kind.
    """
    text = str(err.orig).lower()
    if "unique" in text or "duplicate" in text:
        return UniqueConstraintViolation()
    if "foreign key" in text:
        return ForeignKeyViolation()
    if "not null" in text or "not-null" in text or "null value" in text:
        return ValidationError("A required field is missing")
    return StoreError()


def commit(db: Session) -> None:
    """Commit ``db``, rolling back and raising a ``StoreError`` on failure."""
    try:
        db.commit()
    except IntegrityError as err:
        db.rollback()
        translated = translate_integrity_error(err)
        logger.debug("Integrity failure translated to %s: %s", type(translated).__name__, err.orig)
        raise translated from err
    except SQLAlchemyError as err:
        db.rollback()
        logger.error("Commit failed: %s", err)
        raise StoreError() from err
