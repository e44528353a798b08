from typing import List, Optional
from conference.extensions import db
from conference.models import Event


class EventRepository:
    @staticmethod
    def get_events() -> List[Event]:
        return Event.query.order_by(Event.id).all()

    @staticmethod
    def get_event(event_id: int) -> Optional[Event]:
        return Event.query.filter_by(id=event_id).first()

    @staticmethod
    def create_event(attrs):
        event = Event(**attrs)
        db.session.add(event)
        db.session.commit()
        return event
