"""Thread creation rate limiting."""

from datetime import datetime, timedelta

import logfire

from forum.config import ForumSettings
from forum.domain.error import RateLimitExceededError
from forum.domain.model.user import User
from forum.domain.repository import ThreadRepository

from .base import Service


class RateLimitService(Service):
    """Caps thread creation per author over a rolling window.

    The window is derived at evaluation time by counting the author's
    threads created in ``[now - window, now]``; nothing else is stored.
    """

    def __init__(
        self, thread_repository: ThreadRepository, forum_settings: ForumSettings
    ) -> None:
        """Initialize rate limit service.

        Args:
            thread_repository: Thread repository
            forum_settings: Forum business rules configuration
        """
        self.thread_repository = thread_repository
        self.limit = forum_settings.max_threads_per_window
        self.window = timedelta(hours=forum_settings.rate_limit_window_hours)

    async def lock_author(self, author: User) -> None:
        """Hold off other creates by the same author until our transaction ends."""
        await self.thread_repository.lock_author(author.id)

    async def count_recent_threads(self, author: User, now: datetime) -> int:
        """Count the author's threads inside the window ending at ``now``."""
        return await self.thread_repository.count_by_author_since(
            author.id, now - self.window, now
        )

    async def can_create_thread(self, author: User, now: datetime) -> bool:
        """Whether the author may create another thread at ``now``."""
        with logfire.span(
            "rate_limit_service.can_create_thread", author_id=str(author.id)
        ):
            count = await self.count_recent_threads(author, now)
            allowed = count < self.limit
            if not allowed:
                logfire.warn(
                    "Thread rate limit reached",
                    author_id=str(author.id),
                    count=count,
                    limit=self.limit,
                )
            return allowed

    async def ensure_can_create_thread(self, author: User, now: datetime) -> None:
        """Raise RateLimitExceededError if the author is at the limit."""
        if not await self.can_create_thread(author, now):
            raise RateLimitExceededError(self.limit)

    async def is_over_limit(self, author: User, now: datetime) -> bool:
        """Whether the author holds more threads than allowed.

        Checked after an insert: a concurrent request may have slipped in
        between the pre-check and our write.
        """
        return await self.count_recent_threads(author, now) > self.limit
