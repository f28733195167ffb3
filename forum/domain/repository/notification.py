"""Notification repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from forum.domain.model.notification import Notification
from forum.domain.value import NotificationId, UserId


class NotificationRepository(ABC):
    """Repository for Notification entity."""

    @abstractmethod
    async def find_by_id(self, notification_id: NotificationId) -> Optional[Notification]:
        """Find a notification by ID.

        Args:
            notification_id: The notification's unique identifier

        Returns:
            The notification if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_recipient(
        self,
        recipient_id: UserId,
        unread_only: bool = False,
        limit: int = 30,
        offset: int = 0,
    ) -> List[Notification]:
        """Find a user's notifications, most recent first.

        Args:
            recipient_id: The recipient's ID
            unread_only: Only return notifications without read_at
            limit: Maximum number of notifications to return
            offset: Number of notifications to skip

        Returns:
            List of notifications
        """
        pass

    @abstractmethod
    async def save(self, notification: Notification) -> Notification:
        """Create a notification.

        Args:
            notification: The notification to save

        Returns:
            The saved notification
        """
        pass

    @abstractmethod
    async def mark_as_read(
        self, notification_id: NotificationId, read_at: datetime
    ) -> Optional[Notification]:
        """Set the read timestamp of a notification, if not already read.

        Args:
            notification_id: The notification ID
            read_at: Time the notification was read

        Returns:
            The updated notification, None if it does not exist
        """
        pass
