"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's ORM.
"""

from typing import Any, Dict, Iterable
from uuid import UUID

from forum.domain.model import Like, Notification, Reply, Thread, User
from forum.domain.value import (
    LikeableType,
    LikeId,
    NotificationId,
    NotificationKind,
    ReplyableType,
    ReplyId,
    Slug,
    TagId,
    ThreadId,
    UserId,
    Username,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model."""
    return User(
        id=UserId(_uuid(row["id"])),
        username=Username(row["username"]),
        email=row.get("email"),
        is_moderator=row["is_moderator"],
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return user.model_dump()


def row_to_thread(row: Dict[str, Any], tag_ids: Iterable[UUID] = ()) -> Thread:
    """Convert database row (plus its tag ids) to Thread domain model."""
    return Thread(
        id=ThreadId(_uuid(row["id"])),
        slug=Slug(row["slug"]),
        subject=row["subject"],
        body=row["body"],
        author_id=UserId(_uuid(row["author_id"])),
        tag_ids=frozenset(TagId(_uuid(tag_id)) for tag_id in tag_ids),
        solution_reply_id=ReplyId(_uuid(row["solution_reply_id"]))
        if row.get("solution_reply_id")
        else None,
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        last_activity_at=row["last_activity_at"],
    )


def thread_to_dict(thread: Thread) -> Dict[str, Any]:
    """Convert Thread domain model to a threads table dict.

    Tags live in the junction table and are excluded.
    """
    return thread.model_dump(exclude={"tag_ids"})


def row_to_reply(row: Dict[str, Any]) -> Reply:
    """Convert database row to Reply domain model."""
    return Reply(
        id=ReplyId(_uuid(row["id"])),
        body=row["body"],
        author_id=UserId(_uuid(row["author_id"])),
        replyable_type=ReplyableType(row["replyable_type"]),
        replyable_id=_uuid(row["replyable_id"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def reply_to_dict(reply: Reply) -> Dict[str, Any]:
    """Convert Reply domain model to database dict."""
    return {
        "id": reply.id,
        "body": reply.body,
        "author_id": reply.author_id,
        "replyable_type": reply.replyable_type.value,
        "replyable_id": reply.replyable_id,
        "created_at": reply.created_at,
        "updated_at": reply.updated_at,
    }


def row_to_like(row: Dict[str, Any]) -> Like:
    """Convert database row to Like domain model."""
    return Like(
        id=LikeId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        likeable_type=LikeableType(row["likeable_type"]),
        likeable_id=_uuid(row["likeable_id"]),
        created_at=row["created_at"],
    )


def like_to_dict(like: Like) -> Dict[str, Any]:
    """Convert Like domain model to database dict."""
    return {
        "id": like.id,
        "user_id": like.user_id,
        "likeable_type": like.likeable_type.value,
        "likeable_id": like.likeable_id,
        "created_at": like.created_at,
    }


def row_to_notification(row: Dict[str, Any]) -> Notification:
    """Convert database row to Notification domain model."""
    return Notification(
        id=NotificationId(_uuid(row["id"])),
        recipient_id=UserId(_uuid(row["recipient_id"])),
        kind=NotificationKind(row["kind"]),
        payload=row.get("payload") or {},
        created_at=row["created_at"],
        read_at=row.get("read_at"),
    )


def notification_to_dict(notification: Notification) -> Dict[str, Any]:
    """Convert Notification domain model to database dict."""
    return {
        "id": notification.id,
        "recipient_id": notification.recipient_id,
        "kind": notification.kind.value,
        "payload": notification.payload,
        "created_at": notification.created_at,
        "read_at": notification.read_at,
    }
