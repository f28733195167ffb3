"""PostgreSQL implementation of Thread repository."""

from collections import defaultdict
from datetime import datetime
from typing import List, Optional
from uuid import UUID

import logfire
from sqlalchemy import and_, delete, func, insert, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import Thread
from forum.domain.repository import ThreadRepository
from forum.domain.value import LikeableType, Slug, ThreadId, UserId
from forum.persistence.mappers import row_to_thread, thread_to_dict
from forum.persistence.tables import (
    likes_table,
    replies_table,
    thread_tags_table,
    threads_table,
)


class PostgresThreadRepository(ThreadRepository):
    """PostgreSQL implementation of ThreadRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _fetch_tags_for_threads(
        self, thread_ids: list[UUID]
    ) -> dict[UUID, list[UUID]]:
        """Fetch tag ids for multiple threads in a single query."""
        if not thread_ids:
            return {}

        stmt = select(thread_tags_table.c.thread_id, thread_tags_table.c.tag_id).where(
            thread_tags_table.c.thread_id.in_(thread_ids)
        )
        result = await self.session.execute(stmt)

        thread_tag_map: dict[UUID, list[UUID]] = defaultdict(list)
        for row in result.fetchall():
            thread_tag_map[row.thread_id].append(row.tag_id)
        return thread_tag_map

    async def _rows_to_threads(self, rows) -> List[Thread]:
        tag_map = await self._fetch_tags_for_threads([row.id for row in rows])
        return [
            row_to_thread(row._asdict(), tag_ids=tag_map.get(row.id, []))
            for row in rows
        ]

    async def find_by_id(self, thread_id: ThreadId) -> Optional[Thread]:
        """Find a thread by ID."""
        stmt = select(threads_table).where(threads_table.c.id == thread_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if not row:
            return None
        return (await self._rows_to_threads([row]))[0]

    async def find_by_slug(self, slug: Slug) -> Optional[Thread]:
        """Find a thread by slug."""
        stmt = select(threads_table).where(threads_table.c.slug == slug.root)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if not row:
            return None
        return (await self._rows_to_threads([row]))[0]

    async def slug_exists(self, slug: Slug) -> bool:
        """Check whether a slug is already taken."""
        stmt = (
            select(func.count())
            .select_from(threads_table)
            .where(threads_table.c.slug == slug.root)
        )
        result = await self.session.execute(stmt)
        return (result.scalar() or 0) > 0

    async def lock_author(self, author_id: UserId) -> None:
        """Take a transaction-scoped advisory lock keyed on the author."""
        await self.session.execute(
            select(
                func.pg_advisory_xact_lock(func.hashtextextended(str(author_id), 0))
            )
        )

    async def count_by_author_since(
        self, author_id: UserId, since: datetime, until: datetime
    ) -> int:
        """Count an author's threads created in ``[since, until]``."""
        stmt = (
            select(func.count())
            .select_from(threads_table)
            .where(
                threads_table.c.author_id == author_id,
                threads_table.c.created_at >= since,
                threads_table.c.created_at <= until,
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, thread: Thread) -> Thread:
        """Save a thread (create or update) and replace its tag links."""
        with logfire.span("thread_repository.save", thread_id=str(thread.id)):
            thread_dict = thread_to_dict(thread)

            exists = await self.session.execute(
                select(threads_table.c.id).where(threads_table.c.id == thread.id)
            )
            if exists.fetchone():
                await self.session.execute(
                    update(threads_table)
                    .where(threads_table.c.id == thread.id)
                    .values(**thread_dict)
                )
                await self.session.execute(
                    delete(thread_tags_table).where(
                        thread_tags_table.c.thread_id == thread.id
                    )
                )
            else:
                await self.session.execute(insert(threads_table).values(**thread_dict))

            if thread.tag_ids:
                await self.session.execute(
                    insert(thread_tags_table),
                    [
                        {"thread_id": thread.id, "tag_id": tag_id}
                        for tag_id in thread.tag_ids
                    ],
                )

            await self.session.flush()
            return thread

    async def touch_activity(self, thread_id: ThreadId, at: datetime) -> None:
        """Set a thread's last activity timestamp."""
        stmt = (
            update(threads_table)
            .where(threads_table.c.id == thread_id)
            .values(last_activity_at=at)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def delete(self, thread_id: ThreadId) -> None:
        """Remove a thread with its likes; replies and tag links cascade."""
        # Likes are polymorphic and carry no foreign key
        reply_ids = select(replies_table.c.id).where(
            replies_table.c.replyable_id == thread_id
        )
        await self.session.execute(
            delete(likes_table).where(
                or_(
                    and_(
                        likes_table.c.likeable_type == LikeableType.THREAD.value,
                        likes_table.c.likeable_id == thread_id,
                    ),
                    and_(
                        likes_table.c.likeable_type == LikeableType.REPLY.value,
                        likes_table.c.likeable_id.in_(reply_ids),
                    ),
                )
            )
        )
        await self.session.execute(
            delete(threads_table).where(threads_table.c.id == thread_id)
        )
        await self.session.flush()
