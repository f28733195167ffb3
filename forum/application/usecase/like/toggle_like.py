"""Toggle like use case."""

from pydantic import BaseModel

from forum.application.usecase.common import parse_id
from forum.domain.service import LikeService, UserService
from forum.domain.value import LikeableType


class ToggleLikeRequest(BaseModel):
    """Toggle like request."""

    likeable_type: LikeableType
    likeable_id: str  # UUID string
    user_id: str | None = None  # None for logged-out visitors


class ToggleLikeResponse(BaseModel):
    """Toggle like response."""

    liked: bool
    count: int


class ToggleLikeUseCase:
    """Use case for liking or unliking a thread or reply."""

    def __init__(self, like_service: LikeService, user_service: UserService) -> None:
        """Initialize toggle like use case.

        Args:
            like_service: Like domain service
            user_service: User domain service
        """
        self.like_service = like_service
        self.user_service = user_service

    async def execute(self, request: ToggleLikeRequest) -> ToggleLikeResponse:
        """Execute toggle like flow.

        An unknown or missing user leaves the like untouched.

        Raises:
            NotFoundError: If the thread or reply does not exist
        """
        actor = await self.user_service.find_actor(request.user_id)
        state = await self.like_service.toggle_like(
            actor,
            request.likeable_type,
            parse_id(request.likeable_id, request.likeable_type.value.capitalize()),
        )
        return ToggleLikeResponse(liked=state.liked, count=state.count)
