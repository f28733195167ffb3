"""In-memory thread repository for testing."""

from datetime import datetime
from typing import Optional

from forum.domain.model import Thread
from forum.domain.repository import ThreadRepository
from forum.domain.value import Slug, ThreadId, UserId


class InMemoryThreadRepository(ThreadRepository):
    """In-memory implementation of ThreadRepository for testing."""

    def __init__(self) -> None:
        self._threads: dict[ThreadId, Thread] = {}
        self.locked_authors: list[UserId] = []

    async def find_by_id(self, thread_id: ThreadId) -> Optional[Thread]:
        """Find a thread by ID."""
        return self._threads.get(thread_id)

    async def find_by_slug(self, slug: Slug) -> Optional[Thread]:
        """Find a thread by slug."""
        for thread in self._threads.values():
            if thread.slug == slug:
                return thread
        return None

    async def slug_exists(self, slug: Slug) -> bool:
        """Check whether a slug is already taken."""
        return await self.find_by_slug(slug) is not None

    async def lock_author(self, author_id: UserId) -> None:
        """Record the lock; a single event loop needs no real locking."""
        self.locked_authors.append(author_id)

    async def count_by_author_since(
        self, author_id: UserId, since: datetime, until: datetime
    ) -> int:
        """Count an author's threads created in ``[since, until]``."""
        return sum(
            1
            for t in self._threads.values()
            if t.author_id == author_id and since <= t.created_at <= until
        )

    async def save(self, thread: Thread) -> Thread:
        """Save a thread."""
        self._threads[thread.id] = thread
        return thread

    async def touch_activity(self, thread_id: ThreadId, at: datetime) -> None:
        """Set a thread's last activity timestamp."""
        thread = self._threads.get(thread_id)
        if thread:
            self._threads[thread_id] = thread.model_copy(
                update={"last_activity_at": at}
            )

    async def delete(self, thread_id: ThreadId) -> None:
        """Delete a thread by ID."""
        self._threads.pop(thread_id, None)
