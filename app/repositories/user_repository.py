import logging

from sqlalchemy import select, text
from sqlalchemy.orm import Session

from app.db.models import UserRecord
from app.models import User
from app.ports import UserRepository

logger = logging.getLogger(__name__)


class SqlUserRepository(UserRepository):
    """
    UserRepository backed by the relational users table.

    Read-only: the table supports writes but none are exposed here.
    """

    FIND_ALL_SQL = "SELECT u.* FROM users AS u"

    def __init__(self, session: Session) -> None:
        self._session = session

    def find_all(self) -> list[User]:
        # Native query mapped onto the ORM entity so column types are decoded
        stmt = select(UserRecord).from_statement(text(self.FIND_ALL_SQL))
        records = self._session.scalars(stmt).all()
        logger.debug(f"Loaded {len(records)} user(s)")
        return [User.model_validate(record) for record in records]
