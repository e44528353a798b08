import pytest
from flask_jwt_extended import create_access_token
from conference import create_app
from conference.extensions import db
from conference.models import Event, User, UserRole


@pytest.fixture
def app():
    app = create_app(
        {
            "TESTING": True,
            "SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:",
            "JWT_SECRET_KEY": "test-secret",
            "RATELIMIT_ENABLED": False,
        }
    )

    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin(app):
    user = User(
        email="admin@example.com",
        first_name="Admin",
        last_name="User",
        role_id=UserRole.ADMIN.value,
    )
    db.session.add(user)
    db.session.commit()
    return user


@pytest.fixture
def attendee(app):
    user = User(
        email="a@b.com",
        first_name="Ada",
        last_name="Lovelace",
        school="UCF",
        grad_year=2027,
    )
    db.session.add(user)
    db.session.commit()
    return user


@pytest.fixture
def event(app):
    event = Event(name="Hackathon", location="Main Hall")
    db.session.add(event)
    db.session.commit()
    return event


def auth_headers(user):
    token = create_access_token(identity=str(user.id))
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_headers(admin):
    return auth_headers(admin)


@pytest.fixture
def attendee_headers(attendee):
    return auth_headers(attendee)
