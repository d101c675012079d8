"""Message — a directed note between two users. Read-only in this service."""

from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey

from messagely.infrastructure.database import Base


class Message(Base):
    __tablename__ = "messages"

    id = Column(Integer, primary_key=True, autoincrement=True)
    from_username = Column(String(50), ForeignKey("users.username"), nullable=False, index=True)
    to_username = Column(String(50), ForeignKey("users.username"), nullable=False, index=True)
    body = Column(Text, nullable=False)
    sent_at = Column(DateTime(timezone=True), nullable=False)
    read_at = Column(DateTime(timezone=True), nullable=True)  # NULL = unread

    def __repr__(self):
        return f"<Message {self.id} {self.from_username} -> {self.to_username}>"
