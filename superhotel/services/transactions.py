import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from ..exceptions import ServiceFailure

logger = logging.getLogger(__name__)


@contextmanager
def session_scope(sessions: sessionmaker, action: str) -> Iterator[Session]:
    """
    Session for one manager operation.
    Commits on success, rolls back on any exception and always closes.
    Driver errors are re-raised as ServiceFailure; domain errors pass
    through untouched.
    """
    db = sessions()
    try:
        yield db
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Database error while %s: %s", action, e)
        raise ServiceFailure(f"Database error while {action}") from e
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
