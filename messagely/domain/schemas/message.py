"""Pydantic schemas for message listings."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class MessageParty(BaseModel):
    username: str
    first_name: str
    last_name: str
    phone: str

    model_config = {"from_attributes": True}


class MessageBase(BaseModel):
    id: int
    body: str
    sent_at: datetime
    read_at: Optional[datetime] = None


class SentMessage(MessageBase):
    to_user: MessageParty


class ReceivedMessage(MessageBase):
    from_user: MessageParty
