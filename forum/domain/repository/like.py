"""Like repository interface."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from forum.domain.model.like import Like
from forum.domain.value import LikeableType, UserId


class LikeRepository(ABC):
    """Repository for Like entity.

    Implementations must enforce at most one like per
    (user, likeable_type, likeable_id) with a unique constraint.
    """

    @abstractmethod
    async def find_by_user_and_likeable(
        self,
        user_id: UserId,
        likeable_type: LikeableType,
        likeable_id: UUID,
    ) -> Optional[Like]:
        """Find a user's like on a specific item.

        Args:
            user_id: The user's ID
            likeable_type: Type of item (thread or reply)
            likeable_id: ID of the item

        Returns:
            The like if found, None otherwise
        """
        pass

    @abstractmethod
    async def toggle(self, like: Like) -> bool:
        """Atomically remove the like if present, otherwise insert it.

        Must not be implemented as a read followed by a write: concurrent
        toggles for the same pair serialize through the unique constraint.
        An insert that loses a race to a concurrent insert counts as
        "already liked" and removes the existing row instead.

        Args:
            like: Like to insert when the pair has no like yet

        Returns:
            True if the pair is liked after the call, False otherwise
        """
        pass

    @abstractmethod
    async def count_by_likeable(
        self,
        likeable_type: LikeableType,
        likeable_id: UUID,
    ) -> int:
        """Count likes on a specific item.

        Args:
            likeable_type: Type of item (thread or reply)
            likeable_id: ID of the item

        Returns:
            Number of like rows for the item
        """
        pass
