"""Application layer DI providers."""

from dishka import Scope, provide

from forum.application.usecase.like import ToggleLikeUseCase
from forum.application.usecase.notification import (
    ListNotificationsUseCase,
    MarkNotificationReadUseCase,
)
from forum.application.usecase.reply import CreateReplyUseCase, UpdateReplyUseCase
from forum.application.usecase.thread import (
    CreateThreadUseCase,
    DeleteThreadUseCase,
    GetThreadUseCase,
    MarkSolutionUseCase,
    UnmarkSolutionUseCase,
    UpdateThreadUseCase,
)
from forum.domain.service import (
    LikeService,
    ModerationService,
    NotificationService,
    ReplyService,
    ThreadService,
    UserService,
)
from forum.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Thread use cases
    @provide(scope=Scope.REQUEST)
    def get_create_thread_use_case(
        self, thread_service: ThreadService, user_service: UserService
    ) -> CreateThreadUseCase:
        """Provide create thread use case."""
        return CreateThreadUseCase(
            thread_service=thread_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_get_thread_use_case(
        self,
        thread_service: ThreadService,
        reply_service: ReplyService,
        like_service: LikeService,
        user_service: UserService,
    ) -> GetThreadUseCase:
        """Provide get thread use case."""
        return GetThreadUseCase(
            thread_service=thread_service,
            reply_service=reply_service,
            like_service=like_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_update_thread_use_case(
        self, thread_service: ThreadService, user_service: UserService
    ) -> UpdateThreadUseCase:
        """Provide update thread use case."""
        return UpdateThreadUseCase(
            thread_service=thread_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_thread_use_case(
        self,
        moderation_service: ModerationService,
        thread_service: ThreadService,
        user_service: UserService,
    ) -> DeleteThreadUseCase:
        """Provide delete thread use case."""
        return DeleteThreadUseCase(
            moderation_service=moderation_service,
            thread_service=thread_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_mark_solution_use_case(
        self,
        thread_service: ThreadService,
        reply_service: ReplyService,
        user_service: UserService,
    ) -> MarkSolutionUseCase:
        """Provide mark solution use case."""
        return MarkSolutionUseCase(
            thread_service=thread_service,
            reply_service=reply_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_unmark_solution_use_case(
        self, thread_service: ThreadService, user_service: UserService
    ) -> UnmarkSolutionUseCase:
        """Provide unmark solution use case."""
        return UnmarkSolutionUseCase(
            thread_service=thread_service, user_service=user_service
        )

    # Reply use cases
    @provide(scope=Scope.REQUEST)
    def get_create_reply_use_case(
        self,
        reply_service: ReplyService,
        thread_service: ThreadService,
        user_service: UserService,
    ) -> CreateReplyUseCase:
        """Provide create reply use case."""
        return CreateReplyUseCase(
            reply_service=reply_service,
            thread_service=thread_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_update_reply_use_case(
        self,
        reply_service: ReplyService,
        thread_service: ThreadService,
        user_service: UserService,
    ) -> UpdateReplyUseCase:
        """Provide update reply use case."""
        return UpdateReplyUseCase(
            reply_service=reply_service,
            thread_service=thread_service,
            user_service=user_service,
        )

    # Like use cases
    @provide(scope=Scope.REQUEST)
    def get_toggle_like_use_case(
        self, like_service: LikeService, user_service: UserService
    ) -> ToggleLikeUseCase:
        """Provide toggle like use case."""
        return ToggleLikeUseCase(like_service=like_service, user_service=user_service)

    # Notification use cases
    @provide(scope=Scope.REQUEST)
    def get_list_notifications_use_case(
        self, notification_service: NotificationService, user_service: UserService
    ) -> ListNotificationsUseCase:
        """Provide list notifications use case."""
        return ListNotificationsUseCase(
            notification_service=notification_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_mark_notification_read_use_case(
        self, notification_service: NotificationService, user_service: UserService
    ) -> MarkNotificationReadUseCase:
        """Provide mark notification read use case."""
        return MarkNotificationReadUseCase(
            notification_service=notification_service, user_service=user_service
        )
