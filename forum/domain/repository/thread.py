"""Thread repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from forum.domain.model.thread import Thread
from forum.domain.value import Slug, ThreadId, UserId


class ThreadRepository(ABC):
    """Repository for Thread aggregate.

    Defines the contract for thread persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, thread_id: ThreadId) -> Optional[Thread]:
        """Find a thread by ID.

        Args:
            thread_id: The thread's unique identifier

        Returns:
            The thread if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_slug(self, slug: Slug) -> Optional[Thread]:
        """Find a thread by slug.

        Args:
            slug: The thread's slug

        Returns:
            The thread if found, None otherwise
        """
        pass

    @abstractmethod
    async def slug_exists(self, slug: Slug) -> bool:
        """Check whether a slug is already taken.

        Args:
            slug: Slug to check

        Returns:
            True if another thread uses this slug
        """
        pass

    @abstractmethod
    async def lock_author(self, author_id: UserId) -> None:
        """Serialize thread creation for an author until the transaction ends.

        Args:
            author_id: The author's ID
        """
        pass

    @abstractmethod
    async def count_by_author_since(
        self, author_id: UserId, since: datetime, until: datetime
    ) -> int:
        """Count threads created by an author inside a time range.

        Args:
            author_id: The author's ID
            since: Inclusive lower bound on created_at
            until: Inclusive upper bound on created_at

        Returns:
            Number of matching threads
        """
        pass

    @abstractmethod
    async def save(self, thread: Thread) -> Thread:
        """Save a thread (create or update).

        Args:
            thread: The thread to save

        Returns:
            The saved thread
        """
        pass

    @abstractmethod
    async def touch_activity(self, thread_id: ThreadId, at: datetime) -> None:
        """Set a thread's last activity timestamp.

        Args:
            thread_id: The thread's ID
            at: New last activity time
        """
        pass

    @abstractmethod
    async def delete(self, thread_id: ThreadId) -> None:
        """Remove a thread.

        Replies and likes attached to the thread are removed by storage
        cascade.

        Args:
            thread_id: The thread ID to delete
        """
        pass
