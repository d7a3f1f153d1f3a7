"""Transaction helpers shared by the entity repositories."""

import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.errors import ConflictError, UnexpectedError

logger = logging.getLogger(__name__)


def commit_or_conflict(db: Session, conflict_message: str) -> None:
    """
    Commit the current transaction.

    A unique-constraint violation reported by the database (e.g. a concurrent
    request won the race after our own existence check passed) is rolled back
    and raised as ConflictError. Any other database failure is rolled back and
    raised as UnexpectedError.
    """
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.warning("Commit rejected by unique constraint: %s", conflict_message)
        raise ConflictError(conflict_message, cause=e) from e
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Commit failed: %s", e)
        raise UnexpectedError("Database error", cause=e) from e
