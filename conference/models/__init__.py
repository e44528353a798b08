from conference.models.event import Event
from conference.models.check_in import CheckIn
from conference.models.user import User
from conference.models.token import Token
from conference.models.application import Application, Skill
from conference.models.talk import Talk
from conference.models.team import Team
from conference.models.enums import UserRole
