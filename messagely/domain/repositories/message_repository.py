"""
Message Repository Interface.
"""

from typing import List, Protocol, Tuple

from messagely.domain.models.message import Message
from messagely.domain.models.user import User


class MessageRepository(Protocol):
    """Read-only access to messages joined with the other party."""

    def list_sent_by(self, username: str) -> List[Tuple[Message, User]]:
        """Messages from ``username``, each paired with its recipient."""
        ...

    def list_received_by(self, username: str) -> List[Tuple[Message, User]]:
        """Messages to ``username``, each paired with its sender."""
        ...
