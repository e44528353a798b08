from datetime import datetime, timezone
from conference.exceptions import MissingFieldsError, NotFoundError, StorageError
from conference.extensions import db
from conference.repositories import CheckInRepository, EventRepository
from sqlalchemy.exc import SQLAlchemyError
import logging

logger = logging.getLogger(__name__)


class EventService:
    @staticmethod
    def get_events():
        return EventRepository.get_events()

    @staticmethod
    def get_event(event_id: int):
        event = EventRepository.get_event(event_id)
        if not event:
            raise NotFoundError(f"Event with ID {event_id} not found")
        return event

    @staticmethod
    def create_event(data):
        required_fields = ["name"]
        missing = [f for f in required_fields if not data.get(f)]
        if missing:
            raise MissingFieldsError(missing)

        starts_at = None
        if data.get("starts_at"):
            starts_at = datetime.fromisoformat(
                data["starts_at"].replace("Z", "+00:00")
            ).astimezone(timezone.utc)

        try:
            event = EventRepository.create_event(
                {
                    "name": data["name"],
                    "description": data.get("description"),
                    "location": data.get("location"),
                    "starts_at": starts_at,
                }
            )
        except SQLAlchemyError as e:
            db.session.rollback()
            raise StorageError("Failed to create event") from e

        logger.info(f"Created event {event.id} ({event.name})")
        return event

    @staticmethod
    def get_checked_in_users(event_id: int):
        EventService.get_event(event_id)
        return CheckInRepository.find_users_by_event(event_id)
