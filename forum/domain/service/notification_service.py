"""Notification planning, dispatch and inbox operations."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Iterable, Literal
from uuid import UUID

import logfire

from forum.adapter.error import AdapterError
from forum.config import ForumSettings
from forum.domain.error import ForbiddenError, NotFoundError
from forum.domain.model.notification import Notification
from forum.domain.model.user import User
from forum.domain.repository import NotificationRepository, UserRepository
from forum.domain.service.mention import extract_mentions
from forum.domain.value import NotificationId, NotificationKind
from forum.domain.value.common import ValueObject

from .base import Service


class NotificationChannel(ABC):
    """Side channel that delivers notifications to a user.

    Implementations store the in-app notification and hand the kind and
    payload to an external mailer. The forum decides who gets notified and
    with what payload; formatting is the channel's concern.
    """

    @abstractmethod
    async def notify(
        self, recipient: User, kind: NotificationKind, payload: dict[str, Any]
    ) -> None:
        """Deliver a notification.

        Raises:
            AdapterError: If the external delivery fails
        """
        pass


class MentionSource(ValueObject):
    """The content a mention was written in."""

    source_type: Literal["thread", "reply"]
    source_id: UUID


class PlannedNotification(ValueObject):
    """A notification that should be sent."""

    recipient: User
    kind: NotificationKind
    payload: dict[str, Any]


def make_excerpt(body: str, length: int) -> str:
    """Collapse whitespace and cut the body to ``length`` characters."""
    text = " ".join(body.split())
    if len(text) <= length:
        return text
    return text[: max(length - 3, 0)].rstrip() + "..."


def plan_mention_notifications(
    creator: User,
    subject: str,
    body: str,
    source: MentionSource,
    users: Iterable[User],
    excerpt_length: int = 100,
) -> list[PlannedNotification]:
    """Decide who gets a mention notification and with what payload.

    Candidates come from the plain mentions in ``body``. They are matched
    exactly against ``users``; unknown names are dropped, each user is
    notified once, and the creator never notifies themselves.

    Args:
        creator: Author of the new thread or reply
        subject: Subject of the thread the content belongs to
        body: Body of the new content
        source: Where the mention was written
        users: Known users, at least those named in the body
        excerpt_length: Number of body characters carried in the payload

    Returns:
        Planned notifications ordered by username
    """
    by_username = {user.username.root: user for user in users}
    excerpt = make_excerpt(body, excerpt_length)

    planned: list[PlannedNotification] = []
    seen = {creator.id}
    for username in sorted(extract_mentions(body)):
        recipient = by_username.get(username)
        if recipient is None or recipient.id in seen:
            continue
        seen.add(recipient.id)
        planned.append(
            PlannedNotification(
                recipient=recipient,
                kind=NotificationKind.MENTION,
                payload={
                    "type": NotificationKind.MENTION.value,
                    "replyable_subject": subject,
                    "excerpt": excerpt,
                    "source_type": source.source_type,
                    "source_id": str(source.source_id),
                    "author_username": creator.username.root,
                },
            )
        )
    return planned


async def deliver(
    channel: NotificationChannel, planned: PlannedNotification
) -> bool:
    """Send one notification, logging instead of raising on channel failure.

    Returns:
        True if the channel accepted the notification
    """
    try:
        await channel.notify(planned.recipient, planned.kind, planned.payload)
        return True
    except AdapterError as e:
        logfire.warn(
            "Notification delivery failed",
            recipient_id=str(planned.recipient.id),
            kind=planned.kind.value,
            error=str(e),
        )
        return False


class MentionDispatcher(Service):
    """Sends mention notifications for newly created content.

    Only creation paths call this; edits never notify.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        notification_channel: NotificationChannel,
        forum_settings: ForumSettings,
    ) -> None:
        """Initialize mention dispatcher.

        Args:
            user_repository: User repository used to resolve usernames
            notification_channel: Channel that delivers notifications
            forum_settings: Forum business rules configuration
        """
        self.user_repository = user_repository
        self.notification_channel = notification_channel
        self.excerpt_length = forum_settings.excerpt_length

    async def dispatch(
        self,
        creator: User,
        subject: str,
        body: str,
        source: MentionSource,
    ) -> list[PlannedNotification]:
        """Notify every user mentioned in ``body``.

        Returns:
            The notifications the channel accepted
        """
        with logfire.span(
            "mention_dispatcher.dispatch",
            source_type=source.source_type,
            source_id=str(source.source_id),
        ):
            candidates = extract_mentions(body)
            if not candidates:
                return []

            users = await self.user_repository.find_by_usernames(candidates)
            planned = plan_mention_notifications(
                creator, subject, body, source, users, self.excerpt_length
            )

            delivered = [p for p in planned if await deliver(self.notification_channel, p)]
            logfire.info(
                "Mention notifications dispatched",
                candidates=len(candidates),
                planned=len(planned),
                delivered=len(delivered),
            )
            return delivered


class NotificationService(Service):
    """Domain service for a user's notification inbox."""

    def __init__(self, notification_repository: NotificationRepository) -> None:
        """Initialize notification service.

        Args:
            notification_repository: Notification repository
        """
        self.notification_repository = notification_repository

    async def list_for_user(
        self,
        user: User,
        unread_only: bool = False,
        limit: int = 30,
        offset: int = 0,
    ) -> list[Notification]:
        """List a user's notifications, most recent first."""
        return await self.notification_repository.find_by_recipient(
            user.id, unread_only=unread_only, limit=limit, offset=offset
        )

    async def mark_as_read(
        self, user: User, notification_id: NotificationId
    ) -> Notification:
        """Mark one of the user's notifications as read.

        Raises:
            NotFoundError: If the notification does not exist
            ForbiddenError: If the notification belongs to someone else
        """
        with logfire.span(
            "notification_service.mark_as_read",
            notification_id=str(notification_id),
            user_id=str(user.id),
        ):
            notification = await self.notification_repository.find_by_id(
                notification_id
            )
            if notification is None:
                raise NotFoundError("Notification", str(notification_id))
            if notification.recipient_id != user.id:
                raise ForbiddenError(
                    "read", "notification", str(notification_id), str(user.id)
                )
            if notification.is_read:
                return notification

            updated = await self.notification_repository.mark_as_read(
                notification_id, datetime.now()
            )
            if updated is None:
                raise NotFoundError("Notification", str(notification_id))
            return updated
