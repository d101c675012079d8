"""
SQLAlchemy Implementation of Message Repository.
"""

from typing import List, Tuple

from sqlalchemy.orm import Session

from messagely.domain.models.message import Message
from messagely.domain.models.user import User
from messagely.domain.repositories.message_repository import MessageRepository


class SQLAlchemyMessageRepository(MessageRepository):
    """Message listings as joins against the users table."""

    def __init__(self, db: Session):
        self.db = db

    def list_sent_by(self, username: str) -> List[Tuple[Message, User]]:
        return (
            self.db.query(Message, User)
            .join(User, Message.to_username == User.username)
            .filter(Message.from_username == username)
            .order_by(Message.sent_at.asc(), Message.id.asc())
            .all()
        )

    def list_received_by(self, username: str) -> List[Tuple[Message, User]]:
        return (
            self.db.query(Message, User)
            .join(User, Message.from_username == User.username)
            .filter(Message.to_username == username)
            .order_by(Message.sent_at.asc(), Message.id.asc())
            .all()
        )
