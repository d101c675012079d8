"""Pydantic schemas for User reads."""

from datetime import datetime

from pydantic import BaseModel


class UserSummary(BaseModel):
    username: str
    first_name: str
    last_name: str

    model_config = {"from_attributes": True}


class UserRead(UserSummary):
    phone: str
    join_at: datetime
    last_login_at: datetime


class UserRegistered(UserSummary):
    """Row returned by registration: profile plus the stored hash."""
    password: str
    phone: str


class LoginTimestamp(BaseModel):
    username: str
    last_login_at: datetime

    model_config = {"from_attributes": True}
