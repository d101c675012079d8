"""Sent and received message listings for a user."""

from typing import List

from messagely.domain.repositories.message_repository import MessageRepository
from messagely.domain.schemas.message import MessageParty, ReceivedMessage, SentMessage


def messages_from(repo: MessageRepository, username: str) -> List[SentMessage]:
    """Messages sent by ``username``, oldest first. Empty for unknown users."""
    return [
        SentMessage(
            id=m.id,
            body=m.body,
            sent_at=m.sent_at,
            read_at=m.read_at,
            to_user=MessageParty.model_validate(recipient),
        )
        for m, recipient in repo.list_sent_by(username)
    ]


def messages_to(repo: MessageRepository, username: str) -> List[ReceivedMessage]:
    """Messages received by ``username``, oldest first. Empty for unknown users."""
    return [
        ReceivedMessage(
            id=m.id,
            body=m.body,
            sent_at=m.sent_at,
            read_at=m.read_at,
            from_user=MessageParty.model_validate(sender),
        )
        for m, sender in repo.list_received_by(username)
    ]
