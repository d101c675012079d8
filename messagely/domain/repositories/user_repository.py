"""
User Repository Interface.
"""

from datetime import datetime
from typing import Any, Optional

from messagely.domain.repositories.base import BaseRepository
from messagely.domain.models.user import User


class UserRepository(BaseRepository[User]):
    """Interface for User-specific operations."""

    def exists(self, username: str) -> bool:
        """Whether a user with this exact username is stored."""
        ...

    def get_password_hash(self, username: str) -> Optional[str]:
        """Stored password hash, or None for an unknown username."""
        ...

    def update_last_login(self, username: str, at: datetime) -> Optional[Any]:
        """Advance last_login_at to ``at`` (never backwards).

        Returns a row with ``username`` and ``last_login_at``, or None when no
        user matched.
        """
        ...
