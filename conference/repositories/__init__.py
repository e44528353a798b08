from conference.repositories.user_repository import UserRepository
from conference.repositories.event_repository import EventRepository
from conference.repositories.check_in_repository import CheckInRepository
from conference.repositories.transaction import SessionTransactionManager
