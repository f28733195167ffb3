"""Domain services."""

from .base import Service
from .content_validator import ContentValidator
from .jwt_service import JWTService
from .like_service import LikeService
from .moderation_service import ModerationService
from .notification_service import (
    MentionDispatcher,
    MentionSource,
    NotificationChannel,
    NotificationService,
    PlannedNotification,
    plan_mention_notifications,
)
from .rate_limit_service import RateLimitService
from .reply_service import ReplyService
from .thread_service import ThreadService
from .user_service import UserService

__all__ = [
    "ContentValidator",
    "JWTService",
    "LikeService",
    "MentionDispatcher",
    "MentionSource",
    "ModerationService",
    "NotificationChannel",
    "NotificationService",
    "PlannedNotification",
    "RateLimitService",
    "ReplyService",
    "Service",
    "ThreadService",
    "UserService",
    "plan_mention_notifications",
]
