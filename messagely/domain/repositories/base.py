"""
Base Repository Interface.
Defines the standard contract for keyed data access.
"""

from typing import TypeVar, List, Optional, Any, Protocol

T = TypeVar("T")


class BaseRepository(Protocol[T]):
    """Interface for keyed read/insert operations."""

    def get(self, key: Any) -> Optional[T]:
        """Get a single entity by primary key."""
        ...

    def list(self) -> List[T]:
        """List every entity, ordered by primary key."""
        ...

    def create(self, obj_in: Any) -> T:
        """Insert a new entity and commit."""
        ...
