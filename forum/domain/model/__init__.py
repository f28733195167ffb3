"""Domain model entities for the forum."""

from forum.domain.model.like import Like, LikeState
from forum.domain.model.notification import Notification
from forum.domain.model.reply import Reply
from forum.domain.model.thread import Thread
from forum.domain.model.user import User

__all__ = [
    "User",
    "Thread",
    "Reply",
    "Like",
    "LikeState",
    "Notification",
]
