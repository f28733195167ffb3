"""Create reply use case."""

from pydantic import BaseModel

from forum.application.usecase.common import (
    REPLY_CREATED,
    ActionResponse,
    parse_id,
    thread_url,
)
from forum.domain.error import ContentValidationError
from forum.domain.service import ReplyService, ThreadService, UserService
from forum.domain.value import UserId


class CreateReplyRequest(BaseModel):
    """Create reply request."""

    user_id: str  # User ID from authenticated user
    slug: str  # Slug of the thread being replied to
    body: str


class CreateReplyResponse(ActionResponse):
    """Create reply response."""

    reply_id: str | None = None


class CreateReplyUseCase:
    """Use case for replying to a thread."""

    def __init__(
        self,
        reply_service: ReplyService,
        thread_service: ThreadService,
        user_service: UserService,
    ) -> None:
        """Initialize create reply use case.

        Args:
            reply_service: Reply domain service
            thread_service: Thread domain service
            user_service: User domain service
        """
        self.reply_service = reply_service
        self.thread_service = thread_service
        self.user_service = user_service

    async def execute(self, request: CreateReplyRequest) -> CreateReplyResponse:
        """Execute create reply flow.

        Steps:
        1. Resolve the author and the thread
        2. Create the reply (validates, bumps thread activity, notifies mentions)

        Raises:
            NotFoundError: If the user or thread does not exist
        """
        author = await self.user_service.get_by_id(
            UserId(parse_id(request.user_id, "User"))
        )
        thread = await self.thread_service.get_thread_by_slug(request.slug)

        try:
            reply = await self.reply_service.create_reply(author, thread, request.body)
        except ContentValidationError as e:
            return CreateReplyResponse.invalid(e)

        return CreateReplyResponse(
            success=True,
            message=REPLY_CREATED,
            redirect_target=thread_url(thread.slug.root),
            reply_id=str(reply.id),
        )
