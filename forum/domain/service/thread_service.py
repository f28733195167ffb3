"""Thread domain service."""

import re
from datetime import datetime
from typing import Iterable, Optional
from uuid import uuid4

import logfire
from pydantic import ValidationError

from forum.domain.error import (
    BusinessRuleViolationError,
    ForbiddenError,
    NotFoundError,
    RateLimitExceededError,
)
from forum.domain.model.reply import Reply
from forum.domain.model.thread import Thread
from forum.domain.model.user import User
from forum.domain.repository import ThreadRepository
from forum.domain.value import ReplyableType, Slug, TagId, ThreadId

from .base import Service
from .content_validator import ContentValidator
from .notification_service import MentionDispatcher, MentionSource
from .ownership import can_manage
from .rate_limit_service import RateLimitService


class ThreadService(Service):
    """Domain service for the thread lifecycle.

    Creation order: rate limit, validation, persistence, then mention
    notifications. Nothing is written when a check fails.
    """

    def __init__(
        self,
        thread_repository: ThreadRepository,
        content_validator: ContentValidator,
        rate_limit_service: RateLimitService,
        mention_dispatcher: MentionDispatcher,
    ) -> None:
        """Initialize thread service.

        Args:
            thread_repository: Thread repository
            content_validator: Subject/body validator
            rate_limit_service: Thread creation rate limiter
            mention_dispatcher: Mention notification dispatcher
        """
        self.thread_repository = thread_repository
        self.content_validator = content_validator
        self.rate_limit_service = rate_limit_service
        self.mention_dispatcher = mention_dispatcher

    async def get_thread_by_id(self, thread_id: ThreadId) -> Thread:
        """Get a thread by ID.

        Raises:
            NotFoundError: If the thread does not exist
        """
        thread = await self.thread_repository.find_by_id(thread_id)
        if thread is None:
            raise NotFoundError("Thread", str(thread_id))
        return thread

    async def get_thread_by_slug(self, slug: str) -> Thread:
        """Get a thread by slug.

        Raises:
            NotFoundError: If the thread does not exist
        """
        with logfire.span("thread_service.get_thread_by_slug", slug=slug):
            try:
                parsed = Slug(slug)
            except ValidationError:
                logfire.warn("Malformed thread slug", slug=slug)
                raise NotFoundError("Thread", slug) from None
            thread = await self.thread_repository.find_by_slug(parsed)
            if thread is None:
                logfire.warn("Thread not found by slug", slug=slug)
                raise NotFoundError("Thread", slug)
            return thread

    async def create_thread(
        self,
        author: User,
        subject: str,
        body: str,
        tag_ids: Iterable[TagId] = (),
        now: Optional[datetime] = None,
    ) -> Thread:
        """Create a thread and notify the users it mentions.

        Args:
            author: Thread author
            subject: Thread subject
            body: Thread body
            tag_ids: Already resolved tag ids
            now: Creation time (defaults to the current time)

        Returns:
            The persisted thread

        Raises:
            RateLimitExceededError: If the author reached the daily limit
            ContentValidationError: If subject or body is invalid
        """
        now = now or datetime.now()

        with logfire.span(
            "thread_service.create_thread",
            author_id=str(author.id),
            subject=subject,
        ):
            await self.rate_limit_service.lock_author(author)
            await self.rate_limit_service.ensure_can_create_thread(author, now)
            self.content_validator.validate_thread(subject, body)

            thread_id = ThreadId(uuid4())
            thread = Thread(
                id=thread_id,
                slug=await self.generate_unique_slug(subject, thread_id),
                subject=subject,
                body=body,
                author_id=author.id,
                tag_ids=frozenset(tag_ids),
                solution_reply_id=None,
                created_at=now,
                updated_at=now,
                last_activity_at=now,
            )
            saved = await self.thread_repository.save(thread)

            if await self.rate_limit_service.is_over_limit(author, now):
                # A concurrent create slipped past the pre-check
                await self.thread_repository.delete(saved.id)
                logfire.warn(
                    "Rolled back thread exceeding rate limit",
                    thread_id=str(saved.id),
                    author_id=str(author.id),
                )
                raise RateLimitExceededError(self.rate_limit_service.limit)

            logfire.info(
                "Thread created", thread_id=str(saved.id), slug=str(saved.slug)
            )

            await self.mention_dispatcher.dispatch(
                creator=author,
                subject=saved.subject,
                body=saved.body,
                source=MentionSource(source_type="thread", source_id=saved.id),
            )
            return saved

    async def edit_thread(
        self,
        actor: User,
        thread: Thread,
        subject: str,
        body: str,
        tag_ids: Iterable[TagId] = (),
    ) -> Thread:
        """Update a thread's subject, body and tags.

        Author, creation time and last activity are left untouched, and
        mentions are not notified again.

        Raises:
            ForbiddenError: If the actor neither owns the thread nor moderates
            ContentValidationError: If subject or body is invalid
        """
        with logfire.span(
            "thread_service.edit_thread",
            thread_id=str(thread.id),
            actor_id=str(actor.id),
        ):
            if not can_manage(actor, thread):
                logfire.warn(
                    "Forbidden thread edit",
                    thread_id=str(thread.id),
                    actor_id=str(actor.id),
                )
                raise ForbiddenError("edit", "thread", str(thread.id), str(actor.id))

            self.content_validator.validate_thread(subject, body)

            slug = thread.slug
            if subject != thread.subject and self._slugify(subject) != slug.root:
                slug = await self.generate_unique_slug(
                    subject, thread.id, current=slug
                )

            updated = thread.model_copy(
                update={
                    "subject": subject,
                    "body": body,
                    "slug": slug,
                    "tag_ids": frozenset(tag_ids),
                    "updated_at": datetime.now(),
                }
            )
            saved = await self.thread_repository.save(updated)
            logfire.info("Thread updated", thread_id=str(saved.id), slug=str(saved.slug))
            return saved

    async def mark_solution(self, actor: User, thread: Thread, reply: Reply) -> Thread:
        """Mark one of the thread's replies as its solution.

        Raises:
            ForbiddenError: If the actor neither owns the thread nor moderates
            BusinessRuleViolationError: If the reply belongs to another thread
        """
        with logfire.span(
            "thread_service.mark_solution",
            thread_id=str(thread.id),
            reply_id=str(reply.id),
        ):
            if not can_manage(actor, thread):
                raise ForbiddenError(
                    "resolve", "thread", str(thread.id), str(actor.id)
                )
            if (
                reply.replyable_type != ReplyableType.THREAD
                or reply.replyable_id != thread.id
            ):
                raise BusinessRuleViolationError(
                    f"Reply {reply.id} does not belong to thread {thread.id}"
                )

            saved = await self.thread_repository.save(
                thread.model_copy(update={"solution_reply_id": reply.id})
            )
            logfire.info(
                "Thread marked resolved", thread_id=str(thread.id), reply_id=str(reply.id)
            )
            return saved

    async def unmark_solution(self, actor: User, thread: Thread) -> Thread:
        """Clear the thread's solution.

        Raises:
            ForbiddenError: If the actor neither owns the thread nor moderates
        """
        if not can_manage(actor, thread):
            raise ForbiddenError("resolve", "thread", str(thread.id), str(actor.id))

        saved = await self.thread_repository.save(
            thread.model_copy(update={"solution_reply_id": None})
        )
        logfire.info("Thread solution cleared", thread_id=str(thread.id))
        return saved

    async def record_activity(self, thread_id: ThreadId, at: datetime) -> None:
        """Move the thread's last activity timestamp (new reply)."""
        await self.thread_repository.touch_activity(thread_id, at)

    async def generate_unique_slug(
        self, subject: str, thread_id: ThreadId, current: Optional[Slug] = None
    ) -> Slug:
        """Generate a unique slug from a subject.

        Handles collisions by appending numeric suffixes. A candidate equal
        to ``current`` is the thread's own slug and not a collision.

        Args:
            subject: Thread subject to slugify
            thread_id: Thread ID (used for fallback if subject produces empty slug)
            current: Slug the thread already holds, when editing

        Returns:
            Unique slug for the thread
        """
        base_slug_str = self._slugify(subject)

        if not base_slug_str:
            return Slug(f"thread-{thread_id.hex[:8]}")

        slug_str = base_slug_str
        counter = 1
        while (
            current is None or slug_str != current.root
        ) and await self.thread_repository.slug_exists(Slug(slug_str)):
            suffix = f"-{counter}"
            slug_str = base_slug_str[: 100 - len(suffix)].rstrip("-") + suffix
            counter += 1

        return Slug(slug_str)

    @staticmethod
    def _slugify(subject: str) -> str:
        """Convert a subject to URL-safe slug format (may be empty)."""
        slug = re.sub(r"[^a-z0-9]+", "-", subject.lower())
        slug = re.sub(r"-+", "-", slug)
        return slug.strip("-")[:100].rstrip("-")
