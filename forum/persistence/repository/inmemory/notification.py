"""In-memory notification repository for testing."""

from datetime import datetime
from typing import List, Optional

from forum.domain.model import Notification
from forum.domain.repository import NotificationRepository
from forum.domain.value import NotificationId, UserId


class InMemoryNotificationRepository(NotificationRepository):
    """In-memory implementation of NotificationRepository for testing."""

    def __init__(self) -> None:
        self._notifications: dict[NotificationId, Notification] = {}

    async def find_by_id(self, notification_id: NotificationId) -> Optional[Notification]:
        """Find a notification by ID."""
        return self._notifications.get(notification_id)

    async def find_by_recipient(
        self,
        recipient_id: UserId,
        unread_only: bool = False,
        limit: int = 30,
        offset: int = 0,
    ) -> List[Notification]:
        """Find a user's notifications, most recent first."""
        notifications = [
            n
            for n in self._notifications.values()
            if n.recipient_id == recipient_id and not (unread_only and n.is_read)
        ]
        notifications.sort(key=lambda n: n.created_at, reverse=True)
        return notifications[offset : offset + limit]

    async def save(self, notification: Notification) -> Notification:
        """Save a notification."""
        self._notifications[notification.id] = notification
        return notification

    async def mark_as_read(
        self, notification_id: NotificationId, read_at: datetime
    ) -> Optional[Notification]:
        """Set read_at if the notification is still unread."""
        notification = self._notifications.get(notification_id)
        if notification is None or notification.is_read:
            return notification

        updated = notification.model_copy(update={"read_at": read_at})
        self._notifications[notification_id] = updated
        return updated
