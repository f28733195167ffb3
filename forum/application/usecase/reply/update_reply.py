"""Update reply use case."""

from pydantic import BaseModel

from forum.application.usecase.common import (
    REPLY_UPDATED,
    ActionResponse,
    parse_id,
    thread_url,
)
from forum.domain.error import ContentValidationError, ForbiddenError
from forum.domain.service import ReplyService, ThreadService, UserService
from forum.domain.value import ReplyId, ThreadId, UserId


class UpdateReplyRequest(BaseModel):
    """Update reply request."""

    user_id: str  # Current user ID (must be author or moderator)
    reply_id: str
    body: str


class UpdateReplyUseCase:
    """Use case for editing a reply's body."""

    def __init__(
        self,
        reply_service: ReplyService,
        thread_service: ThreadService,
        user_service: UserService,
    ) -> None:
        """Initialize update reply use case.

        Args:
            reply_service: Reply domain service
            thread_service: Thread domain service
            user_service: User domain service
        """
        self.reply_service = reply_service
        self.thread_service = thread_service
        self.user_service = user_service

    async def execute(self, request: UpdateReplyRequest) -> ActionResponse:
        """Execute update reply flow.

        Raises:
            NotFoundError: If the user or reply does not exist
        """
        actor = await self.user_service.get_by_id(
            UserId(parse_id(request.user_id, "User"))
        )
        reply = await self.reply_service.get_reply_by_id(
            ReplyId(parse_id(request.reply_id, "Reply"))
        )

        try:
            await self.reply_service.edit_reply(actor, reply, request.body)
        except ForbiddenError:
            return ActionResponse.denied()
        except ContentValidationError as e:
            return ActionResponse.invalid(e)

        thread = await self.thread_service.get_thread_by_id(ThreadId(reply.replyable_id))
        return ActionResponse(
            success=True,
            message=REPLY_UPDATED,
            redirect_target=thread_url(thread.slug.root),
        )
