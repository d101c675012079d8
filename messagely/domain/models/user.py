"""User domain model — maps to the 'users' table."""

from sqlalchemy import Column, String, Text, DateTime

from messagely.infrastructure.database import Base


class User(Base):
    __tablename__ = "users"

    username = Column(String(50), primary_key=True)
    password = Column(Text, nullable=False)  # bcrypt hash, never the plaintext
    first_name = Column(Text, nullable=False)
    last_name = Column(Text, nullable=False)
    phone = Column(Text, nullable=False)
    join_at = Column(DateTime(timezone=True), nullable=False)
    last_login_at = Column(DateTime(timezone=True), nullable=False)

    def __repr__(self):
        return f"<User {self.username}>"
