from conference.exceptions import NotFoundError
from conference.repositories import SessionTransactionManager, UserRepository
import logging
import math

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def page_offset(page_number: int, limit: int) -> int:
    # page numbers start at 1
    return 0 if page_number < 1 else (page_number - 1) * limit


class UserService:
    def __init__(self, users=UserRepository, transactions=SessionTransactionManager):
        self.users = users
        self.transactions = transactions

    def get_user_count(self) -> int:
        return self.users.count()

    def get_user_page(self, page_number: int = 1, limit: int = 10) -> dict:
        """Gets a page of users along with page size and totals."""
        users = self.users.get_page(limit, page_offset(page_number, limit))
        count = self.users.count()

        return {
            "page": page_number,
            "pageSize": limit,
            "totalPages": math.ceil(count / limit),
            "totalUsers": count,
            "users": users or [],
        }

    def get_user_data_page(self, page_number: int = 1, limit: int = 10) -> dict:
        """Like get_user_page, but only users with an application, with their
        application, talks and teams attached."""
        users, count = self.users.get_data_page(limit, page_offset(page_number, limit))

        return {
            "page": page_number,
            "pageSize": limit,
            "totalPages": math.ceil(count / limit),
            "totalUsers": count,
            "users": users or [],
        }

    def get_user_by_id_and_email(self, user_id: int, email: str):
        return self.users.find_by_id_and_email(user_id, email)

    def get_user_by_email(self, email: str):
        return self.users.find_by_email(email)

    def get_user_by_id(self, user_id: int):
        return self.users.find_by_id(user_id)

    def delete_by_id(self, user_id: int) -> dict:
        user = self.users.find_by_id(user_id)
        if not user:
            raise NotFoundError("User does not exist")

        txn = self.transactions.begin()
        try:
            self.users.delete(user, txn)
            self.transactions.commit(txn)
        except Exception as e:
            self.transactions.rollback(txn)
            logger.error(f"Failed to delete user {user_id}: {str(e)}")
            raise

        logger.info(f"Deleted user {user_id}")
        return {"success": True, "message": None}
