"""In-memory reply repository for testing."""

from typing import List, Optional

from forum.domain.model import Reply
from forum.domain.repository import ReplyRepository
from forum.domain.value import ReplyableType, ReplyId, ThreadId


class InMemoryReplyRepository(ReplyRepository):
    """In-memory implementation of ReplyRepository for testing."""

    def __init__(self) -> None:
        self._replies: dict[ReplyId, Reply] = {}

    async def find_by_id(self, reply_id: ReplyId) -> Optional[Reply]:
        """Find a reply by ID."""
        return self._replies.get(reply_id)

    async def find_by_thread(self, thread_id: ThreadId) -> List[Reply]:
        """Find all replies of a thread, oldest first."""
        replies = [
            r
            for r in self._replies.values()
            if r.replyable_type == ReplyableType.THREAD and r.replyable_id == thread_id
        ]
        return sorted(replies, key=lambda r: r.created_at)

    async def save(self, reply: Reply) -> Reply:
        """Save a reply."""
        self._replies[reply.id] = reply
        return reply
