"""Reply domain service."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire

from forum.domain.error import ForbiddenError, NotFoundError
from forum.domain.model.reply import Reply
from forum.domain.model.thread import Thread
from forum.domain.model.user import User
from forum.domain.repository import ReplyRepository
from forum.domain.value import ReplyableType, ReplyId

from .base import Service
from .content_validator import ContentValidator
from .notification_service import MentionDispatcher, MentionSource
from .ownership import can_manage
from .thread_service import ThreadService


class ReplyService(Service):
    """Domain service for replies."""

    def __init__(
        self,
        reply_repository: ReplyRepository,
        thread_service: ThreadService,
        content_validator: ContentValidator,
        mention_dispatcher: MentionDispatcher,
    ) -> None:
        """Initialize reply service.

        Args:
            reply_repository: Reply repository
            thread_service: Thread domain service
            content_validator: Body validator
            mention_dispatcher: Mention notification dispatcher
        """
        self.reply_repository = reply_repository
        self.thread_service = thread_service
        self.content_validator = content_validator
        self.mention_dispatcher = mention_dispatcher

    async def get_reply_by_id(self, reply_id: ReplyId) -> Reply:
        """Get a reply by ID.

        Raises:
            NotFoundError: If the reply does not exist
        """
        reply = await self.reply_repository.find_by_id(reply_id)
        if reply is None:
            raise NotFoundError("Reply", str(reply_id))
        return reply

    async def list_replies(self, thread: Thread) -> list[Reply]:
        """List a thread's replies, oldest first."""
        return await self.reply_repository.find_by_thread(thread.id)

    async def create_reply(
        self,
        author: User,
        thread: Thread,
        body: str,
        now: Optional[datetime] = None,
    ) -> Reply:
        """Reply to a thread and notify the users the reply mentions.

        Raises:
            ContentValidationError: If the body is invalid
        """
        now = now or datetime.now()

        with logfire.span(
            "reply_service.create_reply",
            thread_id=str(thread.id),
            author_id=str(author.id),
        ):
            self.content_validator.validate_body(body)

            reply = await self.reply_repository.save(
                Reply(
                    id=ReplyId(uuid4()),
                    body=body,
                    author_id=author.id,
                    replyable_type=ReplyableType.THREAD,
                    replyable_id=thread.id,
                    created_at=now,
                    updated_at=now,
                )
            )
            await self.thread_service.record_activity(thread.id, now)
            logfire.info("Reply created", reply_id=str(reply.id), thread_id=str(thread.id))

            await self.mention_dispatcher.dispatch(
                creator=author,
                subject=thread.subject,
                body=reply.body,
                source=MentionSource(source_type="reply", source_id=reply.id),
            )
            return reply

    async def edit_reply(self, actor: User, reply: Reply, body: str) -> Reply:
        """Update a reply's body without notifying mentions again.

        Raises:
            ForbiddenError: If the actor neither owns the reply nor moderates
            ContentValidationError: If the body is invalid
        """
        with logfire.span(
            "reply_service.edit_reply", reply_id=str(reply.id), actor_id=str(actor.id)
        ):
            if not can_manage(actor, reply):
                raise ForbiddenError("edit", "reply", str(reply.id), str(actor.id))

            self.content_validator.validate_body(body)

            saved = await self.reply_repository.save(
                reply.model_copy(update={"body": body, "updated_at": datetime.now()})
            )
            logfire.info("Reply updated", reply_id=str(saved.id))
            return saved
