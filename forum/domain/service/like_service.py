"""Like domain service."""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

import logfire

from forum.domain.error import NotFoundError
from forum.domain.model.like import Like, LikeState
from forum.domain.model.user import User
from forum.domain.repository import LikeRepository, ReplyRepository, ThreadRepository
from forum.domain.value import LikeableType, LikeId, ReplyId, ThreadId

from .base import Service


class LikeService(Service):
    """Domain service for like toggling.

    The like count is always derived from like rows; there is no
    denormalized counter to drift.
    """

    def __init__(
        self,
        like_repository: LikeRepository,
        thread_repository: ThreadRepository,
        reply_repository: ReplyRepository,
    ) -> None:
        """Initialize like service.

        Args:
            like_repository: Like repository
            thread_repository: Thread repository
            reply_repository: Reply repository
        """
        self.like_repository = like_repository
        self.thread_repository = thread_repository
        self.reply_repository = reply_repository

    async def _ensure_likeable_exists(
        self, likeable_type: LikeableType, likeable_id: UUID
    ) -> None:
        if likeable_type == LikeableType.THREAD:
            found = await self.thread_repository.find_by_id(ThreadId(likeable_id))
        else:  # LikeableType.REPLY
            found = await self.reply_repository.find_by_id(ReplyId(likeable_id))

        if found is None:
            logfire.warn(
                "Like on non-existent item",
                likeable_type=likeable_type.value,
                likeable_id=str(likeable_id),
            )
            raise NotFoundError(likeable_type.value.capitalize(), str(likeable_id))

    async def get_like_state(
        self,
        actor: Optional[User],
        likeable_type: LikeableType,
        likeable_id: UUID,
    ) -> LikeState:
        """Current like state of an item as seen by the actor."""
        count = await self.like_repository.count_by_likeable(likeable_type, likeable_id)
        liked = False
        if actor is not None:
            like = await self.like_repository.find_by_user_and_likeable(
                actor.id, likeable_type, likeable_id
            )
            liked = like is not None
        return LikeState(liked=liked, count=count)

    async def toggle_like(
        self,
        actor: Optional[User],
        likeable_type: LikeableType,
        likeable_id: UUID,
    ) -> LikeState:
        """Like the item if the actor hasn't yet, otherwise remove the like.

        Logged-out actors cannot like: the call leaves storage untouched and
        returns the current state.

        Args:
            actor: Current user, None when not authenticated
            likeable_type: Type of item (thread or reply)
            likeable_id: ID of the item

        Returns:
            Like state after the toggle

        Raises:
            NotFoundError: If the item does not exist
        """
        with logfire.span(
            "like_service.toggle_like",
            likeable_type=likeable_type.value,
            likeable_id=str(likeable_id),
            user_id=str(actor.id) if actor else None,
        ):
            await self._ensure_likeable_exists(likeable_type, likeable_id)

            if actor is None:
                logfire.info("Ignoring like toggle from anonymous user")
                return await self.get_like_state(None, likeable_type, likeable_id)

            liked = await self.like_repository.toggle(
                Like(
                    id=LikeId(uuid4()),
                    user_id=actor.id,
                    likeable_type=likeable_type,
                    likeable_id=likeable_id,
                    created_at=datetime.now(),
                )
            )
            count = await self.like_repository.count_by_likeable(
                likeable_type, likeable_id
            )

            logfire.info(
                "Like toggled",
                likeable_type=likeable_type.value,
                likeable_id=str(likeable_id),
                liked=liked,
                count=count,
            )
            return LikeState(liked=liked, count=count)
