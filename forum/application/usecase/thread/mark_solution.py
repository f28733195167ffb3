"""Mark solution use case."""

from pydantic import BaseModel

from forum.application.usecase.common import (
    SOLUTION_MARKED,
    ActionResponse,
    parse_id,
    thread_url,
)
from forum.domain.error import ForbiddenError
from forum.domain.service import ReplyService, ThreadService, UserService
from forum.domain.value import ReplyId, UserId


class MarkSolutionRequest(BaseModel):
    """Mark solution request."""

    user_id: str
    slug: str
    reply_id: str


class MarkSolutionUseCase:
    """Use case for resolving a thread with one of its replies."""

    def __init__(
        self,
        thread_service: ThreadService,
        reply_service: ReplyService,
        user_service: UserService,
    ) -> None:
        """Initialize mark solution use case.

        Args:
            thread_service: Thread domain service
            reply_service: Reply domain service
            user_service: User domain service
        """
        self.thread_service = thread_service
        self.reply_service = reply_service
        self.user_service = user_service

    async def execute(self, request: MarkSolutionRequest) -> ActionResponse:
        """Execute mark solution flow.

        Raises:
            NotFoundError: If the user, thread or reply does not exist
            BusinessRuleViolationError: If the reply belongs to another thread
        """
        actor = await self.user_service.get_by_id(
            UserId(parse_id(request.user_id, "User"))
        )
        thread = await self.thread_service.get_thread_by_slug(request.slug)
        reply = await self.reply_service.get_reply_by_id(
            ReplyId(parse_id(request.reply_id, "Reply"))
        )

        try:
            await self.thread_service.mark_solution(actor, thread, reply)
        except ForbiddenError:
            return ActionResponse.denied()

        return ActionResponse(
            success=True,
            message=SOLUTION_MARKED,
            redirect_target=thread_url(thread.slug.root),
        )
