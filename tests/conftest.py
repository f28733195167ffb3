"""Test configuration and helpers."""

from datetime import datetime
from uuid import uuid4

from forum.domain.model import Reply, Thread, User
from forum.domain.value import ReplyableType, ReplyId, Slug, ThreadId, UserId, Username


def make_user(username: str, is_moderator: bool = False) -> User:
    """Build a user with a fresh ID."""
    return User(
        id=UserId(uuid4()),
        username=Username(username),
        email=f"{username}@example.com",
        is_moderator=is_moderator,
    )


def make_thread(
    author: User,
    subject: str = "How to work with Eloquent",
    body: str = "Some question about relationships.",
    created_at: datetime | None = None,
    slug: str | None = None,
) -> Thread:
    """Build a thread by ``author`` without going through the service."""
    created_at = created_at or datetime.now()
    thread_id = ThreadId(uuid4())
    return Thread(
        id=thread_id,
        slug=Slug(slug or f"thread-{thread_id.hex[:8]}"),
        subject=subject,
        body=body,
        author_id=author.id,
        created_at=created_at,
        updated_at=created_at,
        last_activity_at=created_at,
    )


def make_reply(author: User, thread: Thread, body: str = "Have you tried eager loading?") -> Reply:
    """Build a reply to ``thread``."""
    return Reply(
        id=ReplyId(uuid4()),
        body=body,
        author_id=author.id,
        replyable_type=ReplyableType.THREAD,
        replyable_id=thread.id,
    )
