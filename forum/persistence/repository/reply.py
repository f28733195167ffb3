"""PostgreSQL implementation of Reply repository."""

from typing import List, Optional

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import Reply
from forum.domain.repository import ReplyRepository
from forum.domain.value import ReplyableType, ReplyId, ThreadId
from forum.persistence.mappers import reply_to_dict, row_to_reply
from forum.persistence.tables import replies_table


class PostgresReplyRepository(ReplyRepository):
    """PostgreSQL implementation of ReplyRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, reply_id: ReplyId) -> Optional[Reply]:
        """Find a reply by ID."""
        stmt = select(replies_table).where(replies_table.c.id == reply_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_reply(row._asdict()) if row else None

    async def find_by_thread(self, thread_id: ThreadId) -> List[Reply]:
        """Find all replies of a thread, oldest first."""
        stmt = (
            select(replies_table)
            .where(
                replies_table.c.replyable_type == ReplyableType.THREAD.value,
                replies_table.c.replyable_id == thread_id,
            )
            .order_by(replies_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_reply(row._asdict()) for row in result.fetchall()]

    async def save(self, reply: Reply) -> Reply:
        """Save a reply (create or update)."""
        reply_dict = reply_to_dict(reply)

        existing = await self.find_by_id(reply.id)
        if existing:
            stmt = (
                update(replies_table)
                .where(replies_table.c.id == reply.id)
                .values(**reply_dict)
            )
        else:
            stmt = insert(replies_table).values(**reply_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return reply
