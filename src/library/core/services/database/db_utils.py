"""Transaction demarcation and SQLAlchemy error translation helpers."""

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import TypeVar

from loguru import logger
from sqlalchemy.exc import (
    DataError,
    DisconnectionError,
    IntegrityError,
    InterfaceError,
    MultipleResultsFound,
    NoResultFound,
    OperationalError,
)
from sqlmodel import Session

from src.library.core.exceptions import (
    AmbiguousResultError,
    ConstraintViolationError,
    NotFoundError,
    StoreUnavailableError,
)

T = TypeVar("T")


@contextmanager
def translate_errors(entity: str) -> Iterator[None]:
    """Re-raise SQLAlchemy failures as data-access errors, chaining the original."""
    try:
        yield
    except NoResultFound as e:
        raise NotFoundError(entity, cause=e) from e
    except MultipleResultsFound as e:
        raise AmbiguousResultError(
            f"Singleton query for {entity} matched more than one row", e
        ) from e
    except (IntegrityError, DataError) as e:
        raise ConstraintViolationError(
            f"Store rejected {entity} write: {e.orig}", e
        ) from e
    except (OperationalError, InterfaceError, DisconnectionError) as e:
        raise StoreUnavailableError(f"Store unavailable: {e}", e) from e


def run_in_transaction(session: Session, work: Callable[[Session], T]) -> T:
    """Run ``work`` inside a transaction on ``session``.

    Commits when ``work`` returns and rolls back before re-raising when it,
    or the commit itself, fails. The session is left without an active
    transaction in both cases.
    """
    session.begin()
    try:
        result = work(session)
        session.commit()
    except Exception as e:
        session.rollback()
        logger.error(
            "Database transaction rolled back",
            extra={
                "error_type": type(e).__name__,
                "error_message": str(e),
            },
        )
        raise
    return result
