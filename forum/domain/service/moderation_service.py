"""Thread deletion and moderator notices."""

from typing import Optional

import logfire

from forum.domain.error import ForbiddenError
from forum.domain.model.thread import Thread
from forum.domain.model.user import User
from forum.domain.repository import ThreadRepository, UserRepository
from forum.domain.value import NotificationKind

from .base import Service
from .notification_service import NotificationChannel, PlannedNotification, deliver
from .ownership import can_manage, is_owner


class ModerationService(Service):
    """Authorizes deletions and tells authors when a moderator removed their thread."""

    def __init__(
        self,
        thread_repository: ThreadRepository,
        user_repository: UserRepository,
        notification_channel: NotificationChannel,
    ) -> None:
        """Initialize moderation service.

        Args:
            thread_repository: Thread repository
            user_repository: User repository
            notification_channel: Channel that delivers notifications
        """
        self.thread_repository = thread_repository
        self.user_repository = user_repository
        self.notification_channel = notification_channel

    async def delete_thread(
        self, actor: User, thread: Thread, reason: Optional[str] = None
    ) -> None:
        """Delete a thread: authorize, notify the author if needed, then remove.

        Args:
            actor: User requesting the deletion
            thread: Thread to delete
            reason: Optional explanation shown to the author

        Raises:
            ForbiddenError: If the actor neither owns the thread nor moderates
        """
        with logfire.span(
            "moderation_service.delete_thread",
            thread_id=str(thread.id),
            actor_id=str(actor.id),
        ):
            if not can_manage(actor, thread):
                logfire.warn(
                    "Forbidden thread deletion",
                    thread_id=str(thread.id),
                    actor_id=str(actor.id),
                )
                raise ForbiddenError("delete", "thread", str(thread.id), str(actor.id))

            by_moderator = not is_owner(actor, thread)
            await self.thread_repository.delete(thread.id)
            logfire.info(
                "Thread deleted",
                thread_id=str(thread.id),
                by_moderator=by_moderator,
            )

            if by_moderator:
                await self._notify_author(thread, reason)

    async def _notify_author(self, thread: Thread, reason: Optional[str]) -> None:
        author = await self.user_repository.find_by_id(thread.author_id)
        if author is None:
            logfire.warn("Deleted thread has no author", thread_id=str(thread.id))
            return

        await deliver(
            self.notification_channel,
            PlannedNotification(
                recipient=author,
                kind=NotificationKind.THREAD_DELETED,
                payload={
                    "type": NotificationKind.THREAD_DELETED.value,
                    "thread_subject": thread.subject,
                    "reason": reason or "",
                },
            ),
        )
