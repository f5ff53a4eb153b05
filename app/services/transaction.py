import logging
from contextlib import contextmanager

from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


@contextmanager
def rollback_on_error(db: Session):
    """Roll the session back if the wrapped write fails, then re-raise."""
    try:
        yield
    except SQLAlchemyError:
        logger.exception("Database error, rolling back")
        db.rollback()
        raise
