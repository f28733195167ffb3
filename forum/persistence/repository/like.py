"""PostgreSQL implementation of Like repository."""

from typing import Optional
from uuid import UUID

import logfire
from sqlalchemy import and_, delete, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import Like
from forum.domain.repository import LikeRepository
from forum.domain.value import LikeableType, UserId
from forum.persistence.mappers import like_to_dict, row_to_like
from forum.persistence.tables import likes_table


class PostgresLikeRepository(LikeRepository):
    """PostgreSQL implementation of LikeRepository.

    Toggling relies on the ``unique_like`` constraint instead of locks.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _pair(self, user_id: UserId, likeable_type: LikeableType, likeable_id: UUID):
        return and_(
            likes_table.c.user_id == user_id,
            likes_table.c.likeable_type == likeable_type.value,
            likes_table.c.likeable_id == likeable_id,
        )

    async def find_by_user_and_likeable(
        self,
        user_id: UserId,
        likeable_type: LikeableType,
        likeable_id: UUID,
    ) -> Optional[Like]:
        """Find a user's like on a specific item."""
        stmt = select(likes_table).where(self._pair(user_id, likeable_type, likeable_id))
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_like(row._asdict()) if row else None

    async def _delete_pair(self, like: Like) -> bool:
        stmt = (
            delete(likes_table)
            .where(self._pair(like.user_id, like.likeable_type, like.likeable_id))
            .returning(likes_table.c.id)
        )
        result = await self.session.execute(stmt)
        return result.fetchone() is not None

    async def toggle(self, like: Like) -> bool:
        """Delete the pair's like if present, otherwise insert it."""
        if await self._delete_pair(like):
            await self.session.flush()
            return False

        stmt = (
            insert(likes_table)
            .values(**like_to_dict(like))
            .on_conflict_do_nothing(constraint="unique_like")
            .returning(likes_table.c.id)
        )
        result = await self.session.execute(stmt)
        inserted = result.fetchone() is not None

        if not inserted:
            # A concurrent toggle inserted first: we were already liked
            logfire.info(
                "Like insert conflicted, treating as unlike",
                user_id=str(like.user_id),
                likeable_id=str(like.likeable_id),
            )
            await self._delete_pair(like)

        await self.session.flush()
        return inserted

    async def count_by_likeable(
        self,
        likeable_type: LikeableType,
        likeable_id: UUID,
    ) -> int:
        """Count likes on a specific item."""
        stmt = (
            select(func.count())
            .select_from(likes_table)
            .where(
                likes_table.c.likeable_type == likeable_type.value,
                likes_table.c.likeable_id == likeable_id,
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0
