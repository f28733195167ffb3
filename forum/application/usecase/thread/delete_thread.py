"""Delete thread use case."""

from pydantic import BaseModel

from forum.application.usecase.common import (
    FORUM_URL,
    THREAD_DELETED,
    ActionResponse,
    parse_id,
)
from forum.domain.error import ForbiddenError
from forum.domain.service import ModerationService, ThreadService, UserService
from forum.domain.value import UserId


class DeleteThreadRequest(BaseModel):
    """Delete thread request."""

    user_id: str
    slug: str
    reason: str | None = None  # Shown to the author when a moderator deletes


class DeleteThreadUseCase:
    """Use case for deleting a thread as its author or a moderator."""

    def __init__(
        self,
        moderation_service: ModerationService,
        thread_service: ThreadService,
        user_service: UserService,
    ) -> None:
        """Initialize delete thread use case.

        Args:
            moderation_service: Moderation domain service
            thread_service: Thread domain service
            user_service: User domain service
        """
        self.moderation_service = moderation_service
        self.thread_service = thread_service
        self.user_service = user_service

    async def execute(self, request: DeleteThreadRequest) -> ActionResponse:
        """Execute delete thread flow.

        Raises:
            NotFoundError: If the user or thread does not exist
        """
        actor = await self.user_service.get_by_id(
            UserId(parse_id(request.user_id, "User"))
        )
        thread = await self.thread_service.get_thread_by_slug(request.slug)

        try:
            await self.moderation_service.delete_thread(actor, thread, request.reason)
        except ForbiddenError:
            return ActionResponse.denied()

        return ActionResponse(
            success=True, message=THREAD_DELETED, redirect_target=FORUM_URL
        )
