"""In-memory like repository for testing."""

from typing import Optional
from uuid import UUID

from forum.domain.model import Like
from forum.domain.repository import LikeRepository
from forum.domain.value import LikeableType, UserId


class InMemoryLikeRepository(LikeRepository):
    """In-memory implementation of LikeRepository for testing.

    Single-threaded event loop access makes each toggle atomic.
    """

    def __init__(self) -> None:
        self._likes: list[Like] = []

    async def find_by_user_and_likeable(
        self,
        user_id: UserId,
        likeable_type: LikeableType,
        likeable_id: UUID,
    ) -> Optional[Like]:
        """Find a user's like on a specific item."""
        for like in self._likes:
            if (
                like.user_id == user_id
                and like.likeable_type == likeable_type
                and like.likeable_id == likeable_id
            ):
                return like
        return None

    async def toggle(self, like: Like) -> bool:
        """Delete the pair's like if present, otherwise insert it."""
        existing = await self.find_by_user_and_likeable(
            like.user_id, like.likeable_type, like.likeable_id
        )
        if existing:
            self._likes.remove(existing)
            return False

        self._likes.append(like)
        return True

    async def count_by_likeable(
        self,
        likeable_type: LikeableType,
        likeable_id: UUID,
    ) -> int:
        """Count likes on a specific item."""
        return sum(
            1
            for like in self._likes
            if like.likeable_type == likeable_type and like.likeable_id == likeable_id
        )
