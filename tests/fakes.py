"""In-memory stand-ins for the repositories and the transaction manager."""
from types import SimpleNamespace

from conference.exceptions import DuplicateCheckInError


class FakeTransactions:
    def __init__(self):
        self.begun = 0
        self.committed = 0
        self.rolled_back = 0

    @property
    def open(self):
        return self.begun - self.committed - self.rolled_back

    def begin(self):
        self.begun += 1
        return SimpleNamespace(pending=[])

    def commit(self, txn):
        self.committed += 1
        for apply in txn.pending:
            apply()

    def rollback(self, txn):
        self.rolled_back += 1
        txn.pending.clear()


class FakeUsers:
    def __init__(self, *users):
        self.rows = {user.id: user for user in users}

    def find_by_id(self, user_id):
        return self.rows.get(user_id)

    def delete(self, user, txn):
        txn.pending.append(lambda: self.rows.pop(user.id, None))


class FakeEvents:
    def __init__(self, *events):
        self.rows = {event.id: event for event in events}

    def get_event(self, event_id):
        return self.rows.get(event_id)


class FakeCheckIns:
    def __init__(self):
        self.rows = set()

    def find_by_event_and_user(self, event_id, user_id):
        if (event_id, user_id) in self.rows:
            return SimpleNamespace(event_id=event_id, user_id=user_id)
        return None

    def create(self, event_id, user_id, txn):
        if (event_id, user_id) in self.rows:
            raise DuplicateCheckInError(event_id, user_id)
        txn.pending.append(lambda: self.rows.add((event_id, user_id)))
        return SimpleNamespace(event_id=event_id, user_id=user_id)


def make_user(user_id, email):
    return SimpleNamespace(id=user_id, email=email)


def make_event(event_id, name):
    return SimpleNamespace(id=event_id, name=name)
