"""Domain layer DI providers."""

from dishka import Scope, provide

from forum.adapter.mail import MailClient
from forum.adapter.notification import InAppMailNotificationChannel
from forum.config import AuthSettings, ForumSettings
from forum.domain.repository import (
    LikeRepository,
    NotificationRepository,
    ReplyRepository,
    ThreadRepository,
    UserRepository,
)
from forum.domain.service import (
    ContentValidator,
    JWTService,
    LikeService,
    MentionDispatcher,
    ModerationService,
    NotificationChannel,
    NotificationService,
    RateLimitService,
    ReplyService,
    ThreadService,
    UserService,
)
from forum.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_content_validator(self, forum_settings: ForumSettings) -> ContentValidator:
        """Provide subject/body validator."""
        return ContentValidator(forum_settings=forum_settings)

    @provide
    def get_rate_limit_service(
        self, thread_repository: ThreadRepository, forum_settings: ForumSettings
    ) -> RateLimitService:
        """Provide thread creation rate limiter."""
        return RateLimitService(
            thread_repository=thread_repository, forum_settings=forum_settings
        )

    @provide
    def get_notification_channel(
        self, notification_repository: NotificationRepository, mail_client: MailClient
    ) -> NotificationChannel:
        """Provide the in-app + mail notification channel."""
        return InAppMailNotificationChannel(
            notification_repository=notification_repository, mail_client=mail_client
        )

    @provide
    def get_mention_dispatcher(
        self,
        user_repository: UserRepository,
        notification_channel: NotificationChannel,
        forum_settings: ForumSettings,
    ) -> MentionDispatcher:
        """Provide mention notification dispatcher."""
        return MentionDispatcher(
            user_repository=user_repository,
            notification_channel=notification_channel,
            forum_settings=forum_settings,
        )

    @provide
    def get_thread_service(
        self,
        thread_repository: ThreadRepository,
        content_validator: ContentValidator,
        rate_limit_service: RateLimitService,
        mention_dispatcher: MentionDispatcher,
    ) -> ThreadService:
        """Provide thread domain service."""
        return ThreadService(
            thread_repository=thread_repository,
            content_validator=content_validator,
            rate_limit_service=rate_limit_service,
            mention_dispatcher=mention_dispatcher,
        )

    @provide
    def get_reply_service(
        self,
        reply_repository: ReplyRepository,
        thread_service: ThreadService,
        content_validator: ContentValidator,
        mention_dispatcher: MentionDispatcher,
    ) -> ReplyService:
        """Provide reply domain service."""
        return ReplyService(
            reply_repository=reply_repository,
            thread_service=thread_service,
            content_validator=content_validator,
            mention_dispatcher=mention_dispatcher,
        )

    @provide
    def get_like_service(
        self,
        like_repository: LikeRepository,
        thread_repository: ThreadRepository,
        reply_repository: ReplyRepository,
    ) -> LikeService:
        """Provide like domain service."""
        return LikeService(
            like_repository=like_repository,
            thread_repository=thread_repository,
            reply_repository=reply_repository,
        )

    @provide
    def get_moderation_service(
        self,
        thread_repository: ThreadRepository,
        user_repository: UserRepository,
        notification_channel: NotificationChannel,
    ) -> ModerationService:
        """Provide moderation domain service."""
        return ModerationService(
            thread_repository=thread_repository,
            user_repository=user_repository,
            notification_channel=notification_channel,
        )

    @provide
    def get_notification_service(
        self, notification_repository: NotificationRepository
    ) -> NotificationService:
        """Provide notification inbox service."""
        return NotificationService(notification_repository=notification_repository)
