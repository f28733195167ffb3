"""Notification channel storing an in-app notification and mailing the user."""

from datetime import datetime
from typing import Any
from uuid import uuid4

import logfire

from forum.adapter.mail.client import MailClient
from forum.domain.model.notification import Notification
from forum.domain.model.user import User
from forum.domain.repository import NotificationRepository
from forum.domain.service.notification_service import NotificationChannel
from forum.domain.value import NotificationId, NotificationKind


class InAppMailNotificationChannel(NotificationChannel):
    """Delivers every notification both in-app and by mail.

    The in-app record is written first and shares the request transaction.
    Mail failures propagate as MailDeliveryError for the caller to log.
    """

    def __init__(
        self,
        notification_repository: NotificationRepository,
        mail_client: MailClient,
    ) -> None:
        """Initialize notification channel.

        Args:
            notification_repository: Notification repository
            mail_client: Mail relay client
        """
        self.notification_repository = notification_repository
        self.mail_client = mail_client

    async def notify(
        self, recipient: User, kind: NotificationKind, payload: dict[str, Any]
    ) -> None:
        """Store the notification and hand it to the mailer."""
        notification = await self.notification_repository.save(
            Notification(
                id=NotificationId(uuid4()),
                recipient_id=recipient.id,
                kind=kind,
                payload=payload,
                created_at=datetime.now(),
                read_at=None,
            )
        )
        logfire.info(
            "Notification stored",
            notification_id=str(notification.id),
            recipient_id=str(recipient.id),
            kind=kind.value,
        )

        await self.mail_client.send(recipient, kind, payload)
