# /student-records/app/services/database_helpers/base_repository_sql.py

from contextlib import contextmanager

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.services.errors import ConflictError, StoreError
from app.utils.logger import get_logger

logger = get_logger(__name__)


class BaseRepositorySQL:
    """
    Shared plumbing for the SQL repositories: holds the injected session and
    turns store failures into the service error taxonomy.
    """

    def __init__(self, db_session: Session):
        self.db = db_session

    @contextmanager
    def _store_guard(self, action: str):
        """
        Wraps a read or refresh. Any database failure rolls the session back,
        is logged, and leaves the repository as a StoreError.
        """
        try:
            yield
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Database failure while trying to {action}: {e}")
            raise StoreError(str(e)) from e

    def _commit(self, conflict_message: str = "Record already exists") -> None:
        """
        Commits the current unit of work.

        A unique-constraint violation raised by the store surfaces exactly like
        the service-level pre-check would have: as a ConflictError carrying
        the same message. Any other database failure becomes a StoreError.
        """
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.warning(f"Integrity violation on commit: {e.orig}")
            raise ConflictError(conflict_message) from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Database commit failed: {e}")
            raise StoreError(str(e)) from e
