from conference.exceptions import DuplicateCheckInError, NotFoundError
from conference.repositories import (
    CheckInRepository,
    EventRepository,
    SessionTransactionManager,
    UserRepository,
)
import logging

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


class CheckInService:
    """Checks users into events.

    Repositories and the transaction manager are passed in so the service
    can run against the SQLAlchemy-backed defaults or against in-memory
    stand-ins.
    """

    def __init__(
        self,
        users=UserRepository,
        events=EventRepository,
        check_ins=CheckInRepository,
        transactions=SessionTransactionManager,
    ):
        self.users = users
        self.events = events
        self.check_ins = check_ins
        self.transactions = transactions

    def check_in(self, event_id: int, user_id: int) -> dict:
        """Record that ``user_id`` attended ``event_id``.

        Returns ``{"success": True, ...}`` when a check-in was created and
        ``{"success": False, ...}`` when the user had already checked in.
        The transaction is always committed or rolled back before returning.
        """
        txn = self.transactions.begin()
        try:
            user = self.users.find_by_id(user_id)
            event = self.events.get_event(event_id)
            existing_check_in = self.check_ins.find_by_event_and_user(event_id, user_id)

            if not user:
                raise NotFoundError("Unable to check-in because user does not exist")

            if not event:
                raise NotFoundError("Unable to check-in because event does not exist")

            email, event_name = user.email, event.name

            if existing_check_in:
                self.transactions.rollback(txn)
                logger.info(f"User {user_id} already checked into event {event_id}")
                return self._already_checked_in(email, event_name)

            self.check_ins.create(event_id, user_id, txn)
            self.transactions.commit(txn)
        except DuplicateCheckInError:
            # Lost a race with a concurrent check-in for the same pair
            self.transactions.rollback(txn)
            logger.warning(f"Duplicate check-in rejected for user {user_id}, event {event_id}")
            return self._already_checked_in(email, event_name)
        except Exception:
            self.transactions.rollback(txn)
            raise

        logger.info(f"Checked user {user_id} into event {event_id}")
        return {
            "success": True,
            "message": f"{email} checked into {event_name}!",
        }

    @staticmethod
    def _already_checked_in(email, event_name):
        return {
            "success": False,
            "message": f"{email} has already checked into {event_name}",
        }
