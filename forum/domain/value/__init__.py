"""Domain value objects for the forum."""

from forum.domain.value.identifiers import (
    LikeId,
    NotificationId,
    ReplyId,
    TagId,
    ThreadId,
    UserId,
)
from forum.domain.value.types import (
    LikeableType,
    NotificationKind,
    ReplyableType,
    Slug,
    Username,
)

__all__ = [
    # Identifiers
    "UserId",
    "ThreadId",
    "ReplyId",
    "LikeId",
    "NotificationId",
    "TagId",
    # Types
    "LikeableType",
    "ReplyableType",
    "NotificationKind",
    "Slug",
    "Username",
]
