"""Create thread use case."""

from pydantic import BaseModel

from forum.application.usecase.common import (
    FORUM_URL,
    THREAD_CREATED,
    ActionResponse,
    parse_id,
    thread_url,
)
from forum.domain.error import ContentValidationError, RateLimitExceededError
from forum.domain.service import ThreadService, UserService
from forum.domain.value import TagId, UserId


class CreateThreadRequest(BaseModel):
    """Create thread request."""

    user_id: str  # User ID from authenticated user
    subject: str
    body: str
    tag_ids: list[str] = []  # Already resolved tag UUIDs


class CreateThreadResponse(ActionResponse):
    """Create thread response."""

    rate_limited: bool = False
    thread_id: str | None = None
    slug: str | None = None


class CreateThreadUseCase:
    """Use case for starting a new thread."""

    def __init__(self, thread_service: ThreadService, user_service: UserService) -> None:
        """Initialize create thread use case.

        Args:
            thread_service: Thread domain service
            user_service: User domain service
        """
        self.thread_service = thread_service
        self.user_service = user_service

    async def execute(self, request: CreateThreadRequest) -> CreateThreadResponse:
        """Execute create thread flow.

        Args:
            request: Create thread request

        Returns:
            Success with the thread location, or the reason it was refused

        Raises:
            NotFoundError: If the user does not exist
        """
        author = await self.user_service.get_by_id(
            UserId(parse_id(request.user_id, "User"))
        )

        try:
            thread = await self.thread_service.create_thread(
                author=author,
                subject=request.subject,
                body=request.body,
                tag_ids=[TagId(parse_id(tag_id, "Tag")) for tag_id in request.tag_ids],
            )
        except RateLimitExceededError as e:
            return CreateThreadResponse(
                success=False,
                rate_limited=True,
                message=str(e),
                redirect_target=FORUM_URL,
            )
        except ContentValidationError as e:
            return CreateThreadResponse.invalid(e)

        return CreateThreadResponse(
            success=True,
            message=THREAD_CREATED,
            redirect_target=thread_url(thread.slug.root),
            thread_id=str(thread.id),
            slug=thread.slug.root,
        )
