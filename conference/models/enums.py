from enum import Enum


class UserRole(Enum):
    USER = 1
    ORGANIZER = 2
    ADMIN = 3
