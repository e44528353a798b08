import pytest
from sqlalchemy import func, select

from conference.exceptions import NotFoundError, StorageError
from conference.extensions import db
from conference.models import (
    Application,
    CheckIn,
    Skill,
    Talk,
    Team,
    Token,
    User,
)
from conference.models.team import teams_users
from conference.services import UserService
from conference.services.user_service import page_offset
from tests.fakes import FakeTransactions, FakeUsers, make_user


def add_users(count):
    for i in range(count):
        db.session.add(User(email=f"user{i}@example.com"))
    db.session.commit()


@pytest.fixture
def applicant(app, event):
    user = User(email="applicant@example.com", first_name="Grace", last_name="Hopper")
    user.tokens.append(Token(value="abc123"))
    user.application = Application(
        github="ghopper", skills=[Skill(name="python"), Skill(name="sql")]
    )
    user.talks.append(Talk(name="Compilers", description="A talk about compilers"))
    team = Team(name="Team Cobol")
    team.members.append(user)
    db.session.add_all([user, team])
    db.session.commit()
    db.session.add(CheckIn(event_id=event.id, user_id=user.id))
    db.session.commit()
    return user


def test_page_offset():
    assert page_offset(1, 10) == 0
    assert page_offset(3, 10) == 20
    assert page_offset(0, 10) == 0
    assert page_offset(-4, 25) == 0


def test_get_user_page(app):
    add_users(25)

    page = UserService().get_user_page(3, 10)

    assert page["page"] == 3
    assert page["pageSize"] == 10
    assert page["totalUsers"] == 25
    assert page["totalPages"] == 3
    assert [user.email for user in page["users"]] == [
        f"user{i}@example.com" for i in range(20, 25)
    ]


def test_get_user_page_past_the_end_is_empty(app):
    add_users(3)

    page = UserService().get_user_page(5, 10)

    assert page["users"] == []
    assert page["totalPages"] == 1


def test_get_user_data_page_only_lists_applicants(app, applicant):
    add_users(2)

    page = UserService().get_user_data_page()

    assert page["totalUsers"] == 1
    user = page["users"][0]
    assert user.email == "applicant@example.com"
    assert sorted(skill.name for skill in user.application.skills) == ["python", "sql"]
    assert [team.name for team in user.teams] == ["Team Cobol"]


def test_lookups(app, attendee):
    service = UserService()

    assert service.get_user_by_email("a@b.com") == attendee
    assert service.get_user_by_id(attendee.id) == attendee
    assert service.get_user_by_id_and_email(attendee.id, "a@b.com") == attendee
    assert service.get_user_by_id_and_email(attendee.id, "nobody@b.com") is None
    assert service.get_user_count() == 1


def test_delete_removes_user_and_dependents(app, applicant):
    user_id = applicant.id

    result = UserService().delete_by_id(user_id)

    assert result == {"success": True, "message": None}
    assert not db.session().in_transaction()
    assert db.session.get(User, user_id) is None
    assert Token.query.count() == 0
    assert Application.query.count() == 0
    assert Talk.query.count() == 0
    assert CheckIn.query.count() == 0
    assert db.session.scalar(select(func.count()).select_from(teams_users)) == 0
    # Shared rows stay
    assert Team.query.count() == 1
    assert Skill.query.count() == 2


def test_delete_unknown_user_mutates_nothing(app, attendee):
    with pytest.raises(NotFoundError, match="User does not exist"):
        UserService().delete_by_id(attendee.id + 100)

    assert User.query.count() == 1


def test_delete_failure_rolls_back(mocker):
    users = FakeUsers(make_user(1, "a@b.com"))
    transactions = FakeTransactions()
    mocker.patch.object(transactions, "commit", side_effect=StorageError("boom"))

    with pytest.raises(StorageError):
        UserService(users, transactions).delete_by_id(1)

    assert transactions.rolled_back == 1
    assert transactions.open == 0
    assert users.find_by_id(1) is not None


def test_delete_signals_success_only_after_commit():
    users = FakeUsers(make_user(1, "a@b.com"))
    transactions = FakeTransactions()

    result = UserService(users, transactions).delete_by_id(1)

    assert result["success"] is True
    assert transactions.committed == 1
    assert users.find_by_id(1) is None
