from typing import List, Optional
from conference.exceptions import DuplicateCheckInError, StorageError
from conference.extensions import db
from conference.models import CheckIn, User
from sqlalchemy.exc import IntegrityError, SQLAlchemyError


class CheckInRepository:
    @staticmethod
    def find_by_event_and_user(event_id: int, user_id: int) -> Optional[CheckIn]:
        return CheckIn.query.filter_by(event_id=event_id, user_id=user_id).first()

    @staticmethod
    def create(event_id: int, user_id: int, session) -> CheckIn:
        """Adds a check-in to the given transaction and flushes it so the
        unique (event_id, user_id) constraint is checked right away."""
        check_in = CheckIn(event_id=event_id, user_id=user_id)
        session.add(check_in)
        try:
            session.flush()
        except IntegrityError as e:
            raise DuplicateCheckInError(event_id, user_id) from e
        except SQLAlchemyError as e:
            raise StorageError(
                f"Failed to check in user {user_id} to event {event_id}"
            ) from e
        return check_in

    @staticmethod
    def find_users_by_event(event_id: int) -> List[User]:
        return (
            db.session.query(User)
            .join(CheckIn, User.id == CheckIn.user_id)
            .filter(CheckIn.event_id == event_id)
            .order_by(CheckIn.created_at.asc(), CheckIn.id.asc())
            .all()
        )
