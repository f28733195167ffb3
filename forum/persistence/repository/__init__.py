"""PostgreSQL repository implementations."""

from forum.persistence.repository.like import PostgresLikeRepository
from forum.persistence.repository.notification import PostgresNotificationRepository
from forum.persistence.repository.reply import PostgresReplyRepository
from forum.persistence.repository.thread import PostgresThreadRepository
from forum.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresThreadRepository",
    "PostgresReplyRepository",
    "PostgresLikeRepository",
    "PostgresNotificationRepository",
]
