class UnauthorizedError(Exception):
    pass


class MissingFieldsError(Exception):
    def __init__(self, fields):
        super().__init__("Missing required fields")
        self.fields = fields


class BadRequestError(Exception):
    pass


class NotFoundError(Exception):
    pass


class StorageError(Exception):
    """Raised when the database rejects a flush or commit."""


class DuplicateCheckInError(StorageError):
    def __init__(self, event_id, user_id):
        super().__init__(
            f"Check-in for user {user_id} at event {event_id} already exists"
        )
        self.event_id = event_id
        self.user_id = user_id
