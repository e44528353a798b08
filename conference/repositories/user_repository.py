from typing import List, Optional, Tuple
from conference.exceptions import StorageError
from conference.models import Application, User
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import selectinload


class UserRepository:
    @staticmethod
    def count() -> int:
        return User.query.count()

    @staticmethod
    def get_page(limit: int, offset: int) -> List[User]:
        return User.query.order_by(User.id).limit(limit).offset(offset).all()

    @staticmethod
    def get_data_page(limit: int, offset: int) -> Tuple[List[User], int]:
        """Users that have applied, with application, talks and teams loaded."""
        query = User.query.join(Application, Application.user_id == User.id)
        count = query.count()
        users = (
            query.options(
                selectinload(User.application).selectinload(Application.skills),
                selectinload(User.talks),
                selectinload(User.teams),
            )
            .order_by(User.id)
            .limit(limit)
            .offset(offset)
            .all()
        )
        return users, count

    @staticmethod
    def find_by_email(email: str) -> Optional[User]:
        return User.query.options(selectinload(User.tokens)).filter_by(email=email).first()

    @staticmethod
    def find_by_id_and_email(user_id: int, email: str) -> Optional[User]:
        return (
            User.query.options(selectinload(User.tokens))
            .filter_by(id=user_id, email=email)
            .first()
        )

    @staticmethod
    def find_by_id(user_id: int) -> Optional[User]:
        return (
            User.query.options(
                selectinload(User.tokens),
                selectinload(User.application).selectinload(Application.skills),
                selectinload(User.events),
                selectinload(User.talks),
            )
            .filter_by(id=user_id)
            .first()
        )

    @staticmethod
    def delete(user: User, session):
        """Force delete a user; tokens, application, talks, check-ins and
        team memberships go with it."""
        session.delete(user)
        try:
            session.flush()
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to delete user {user.id}") from e
