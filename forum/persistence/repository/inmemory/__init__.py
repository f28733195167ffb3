"""In-memory repository implementations for testing."""

from .like import InMemoryLikeRepository
from .notification import InMemoryNotificationRepository
from .reply import InMemoryReplyRepository
from .thread import InMemoryThreadRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryLikeRepository",
    "InMemoryNotificationRepository",
    "InMemoryReplyRepository",
    "InMemoryThreadRepository",
    "InMemoryUserRepository",
]
