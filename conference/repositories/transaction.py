from conference.extensions import db
from conference.exceptions import StorageError
from sqlalchemy.exc import SQLAlchemyError
import logging

logger = logging.getLogger(__name__)


class SessionTransactionManager:
    """Transaction boundary over the request-scoped SQLAlchemy session.

    ``begin`` hands back the session the writes should go through. Whoever
    begins is responsible for calling exactly one of ``commit`` or
    ``rollback`` before returning.
    """

    @staticmethod
    def begin():
        session = db.session()
        if not session.in_transaction():
            session.begin()
        return session

    @staticmethod
    def commit(txn):
        try:
            txn.commit()
        except SQLAlchemyError as e:
            logger.error(f"Commit failed: {str(e)}")
            raise StorageError("Failed to commit transaction") from e

    @staticmethod
    def rollback(txn):
        txn.rollback()
