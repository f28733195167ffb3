"""Get thread use case."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from forum.domain.model import LikeState, Reply, Thread, User
from forum.domain.service import LikeService, ReplyService, ThreadService, UserService
from forum.domain.service.ownership import can_manage
from forum.domain.value import LikeableType


class GetThreadRequest(BaseModel):
    """Get thread request."""

    slug: str
    user_id: str | None = None  # Optional, for like state and permissions


class ReplyItem(BaseModel):
    """A reply as shown under its thread."""

    reply_id: str
    body: str
    author_id: str
    created_at: datetime
    updated_at: datetime
    like_count: int
    liked: bool
    is_solution: bool
    can_manage: bool


class GetThreadResponse(BaseModel):
    """Get thread response."""

    thread_id: str
    slug: str
    subject: str
    body: str
    author_id: str
    tag_ids: list[str]
    solution_reply_id: str | None
    is_resolved: bool
    created_at: datetime
    updated_at: datetime
    last_activity_at: datetime
    like_count: int
    liked: bool
    can_manage: bool
    replies: list[ReplyItem]


class GetThreadUseCase:
    """Use case for reading a thread with its replies."""

    def __init__(
        self,
        thread_service: ThreadService,
        reply_service: ReplyService,
        like_service: LikeService,
        user_service: UserService,
    ) -> None:
        """Initialize get thread use case.

        Args:
            thread_service: Thread domain service
            reply_service: Reply domain service
            like_service: Like domain service
            user_service: User domain service
        """
        self.thread_service = thread_service
        self.reply_service = reply_service
        self.like_service = like_service
        self.user_service = user_service

    async def execute(self, request: GetThreadRequest) -> GetThreadResponse:
        """Execute get thread flow.

        Raises:
            NotFoundError: If the thread does not exist
        """
        actor = await self.user_service.find_actor(request.user_id)
        thread = await self.thread_service.get_thread_by_slug(request.slug)
        replies = await self.reply_service.list_replies(thread)

        thread_likes = await self.like_service.get_like_state(
            actor, LikeableType.THREAD, thread.id
        )
        reply_items = [
            self._reply_item(
                reply,
                thread,
                actor,
                await self.like_service.get_like_state(
                    actor, LikeableType.REPLY, reply.id
                ),
            )
            for reply in replies
        ]

        return GetThreadResponse(
            thread_id=str(thread.id),
            slug=thread.slug.root,
            subject=thread.subject,
            body=thread.body,
            author_id=str(thread.author_id),
            tag_ids=sorted(str(tag_id) for tag_id in thread.tag_ids),
            solution_reply_id=(
                str(thread.solution_reply_id) if thread.solution_reply_id else None
            ),
            is_resolved=thread.is_resolved,
            created_at=thread.created_at,
            updated_at=thread.updated_at,
            last_activity_at=thread.last_activity_at,
            like_count=thread_likes.count,
            liked=thread_likes.liked,
            can_manage=can_manage(actor, thread),
            replies=reply_items,
        )

    @staticmethod
    def _reply_item(
        reply: Reply, thread: Thread, actor: Optional[User], likes: LikeState
    ) -> ReplyItem:
        return ReplyItem(
            reply_id=str(reply.id),
            body=reply.body,
            author_id=str(reply.author_id),
            created_at=reply.created_at,
            updated_at=reply.updated_at,
            like_count=likes.count,
            liked=likes.liked,
            is_solution=thread.solution_reply_id == reply.id,
            can_manage=can_manage(actor, reply),
        )
