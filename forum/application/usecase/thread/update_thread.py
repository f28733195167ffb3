"""Update thread use case."""

from pydantic import BaseModel

from forum.application.usecase.common import (
    THREAD_UPDATED,
    ActionResponse,
    parse_id,
    thread_url,
)
from forum.domain.error import ContentValidationError, ForbiddenError
from forum.domain.service import ThreadService, UserService
from forum.domain.value import TagId, UserId


class UpdateThreadRequest(BaseModel):
    """Update thread request."""

    user_id: str  # Current user ID (must be author or moderator)
    slug: str
    subject: str
    body: str
    tag_ids: list[str] = []


class UpdateThreadUseCase:
    """Use case for editing a thread's subject, body and tags."""

    def __init__(self, thread_service: ThreadService, user_service: UserService) -> None:
        """Initialize update thread use case.

        Args:
            thread_service: Thread domain service
            user_service: User domain service
        """
        self.thread_service = thread_service
        self.user_service = user_service

    async def execute(self, request: UpdateThreadRequest) -> ActionResponse:
        """Execute update thread flow.

        Mentions in the new body are not notified.

        Raises:
            NotFoundError: If the user or thread does not exist
        """
        actor = await self.user_service.get_by_id(
            UserId(parse_id(request.user_id, "User"))
        )
        thread = await self.thread_service.get_thread_by_slug(request.slug)

        try:
            updated = await self.thread_service.edit_thread(
                actor=actor,
                thread=thread,
                subject=request.subject,
                body=request.body,
                tag_ids=[TagId(parse_id(tag_id, "Tag")) for tag_id in request.tag_ids],
            )
        except ForbiddenError:
            return ActionResponse.denied()
        except ContentValidationError as e:
            return ActionResponse.invalid(e)

        return ActionResponse(
            success=True,
            message=THREAD_UPDATED,
            redirect_target=thread_url(updated.slug.root),
        )
