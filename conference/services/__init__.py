from conference.services.user_service import UserService
from conference.services.check_in_service import CheckInService
from conference.services.event_service import EventService
