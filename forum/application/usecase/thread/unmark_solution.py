"""Unmark solution use case."""

from pydantic import BaseModel

from forum.application.usecase.common import (
    SOLUTION_UNMARKED,
    ActionResponse,
    parse_id,
    thread_url,
)
from forum.domain.error import ForbiddenError
from forum.domain.service import ThreadService, UserService
from forum.domain.value import UserId


class UnmarkSolutionRequest(BaseModel):
    """Unmark solution request."""

    user_id: str
    slug: str


class UnmarkSolutionUseCase:
    """Use case for reopening a resolved thread."""

    def __init__(self, thread_service: ThreadService, user_service: UserService) -> None:
        """Initialize unmark solution use case.

        Args:
            thread_service: Thread domain service
            user_service: User domain service
        """
        self.thread_service = thread_service
        self.user_service = user_service

    async def execute(self, request: UnmarkSolutionRequest) -> ActionResponse:
        """Execute unmark solution flow."""
        actor = await self.user_service.get_by_id(
            UserId(parse_id(request.user_id, "User"))
        )
        thread = await self.thread_service.get_thread_by_slug(request.slug)

        try:
            await self.thread_service.unmark_solution(actor, thread)
        except ForbiddenError:
            return ActionResponse.denied()

        return ActionResponse(
            success=True,
            message=SOLUTION_UNMARKED,
            redirect_target=thread_url(thread.slug.root),
        )
