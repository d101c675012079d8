"""
SQLAlchemy Implementation of User Repository.
"""

from datetime import datetime
from typing import Any, Optional

from sqlalchemy import case, update

from messagely.domain.models.user import User
from messagely.domain.repositories.user_repository import UserRepository
from messagely.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyUserRepository(SQLAlchemyRepository[User], UserRepository):
    """User repository implementation using SQLAlchemy."""

    def exists(self, username: str) -> bool:
        return (
            self.db.query(User.username)
            .filter(User.username == username)
            .first()
        ) is not None

    def get_password_hash(self, username: str) -> Optional[str]:
        row = self.db.query(User.password).filter(User.username == username).first()
        return row[0] if row else None

    def update_last_login(self, username: str, at: datetime) -> Optional[Any]:
        stmt = (
            update(User)
            .where(User.username == username)
            .values(
                last_login_at=case(
                    (User.last_login_at > at, User.last_login_at),
                    else_=at,
                )
            )
            .returning(User.username, User.last_login_at)
            .execution_options(synchronize_session=False)
        )
        row = self.db.execute(stmt).first()
        self.db.commit()
        return row
