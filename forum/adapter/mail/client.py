"""Mail relay client.

The relay owns templates and transport. We post the recipient, the
notification kind and its payload; the relay renders and sends the email.
"""

from typing import Any

import httpx
import logfire

from forum.adapter.error import MailDeliveryError
from forum.config import MailSettings
from forum.domain.model.user import User
from forum.domain.value import NotificationKind


class MailClient:
    """Mail client interface."""

    async def send(
        self, recipient: User, kind: NotificationKind, payload: dict[str, Any]
    ) -> None:
        """Hand a notification to the mailer.

        Raises:
            MailDeliveryError: If the message could not be handed over
        """
        raise NotImplementedError


class DisabledMailClient(MailClient):
    """Mail client used when mail delivery is switched off."""

    async def send(
        self, recipient: User, kind: NotificationKind, payload: dict[str, Any]
    ) -> None:
        """Log and drop the message."""
        logfire.debug(
            "Mail delivery disabled, skipping",
            recipient_id=str(recipient.id),
            kind=kind.value,
        )


class HttpMailClient(MailClient):
    """Posts notifications to an HTTP mail relay."""

    def __init__(self, settings: MailSettings) -> None:
        """Initialize mail relay client.

        Args:
            settings: Mail relay configuration
        """
        self.relay_url = settings.relay_url
        self.api_key = settings.api_key
        self.timeout = settings.timeout_seconds

    async def send(
        self, recipient: User, kind: NotificationKind, payload: dict[str, Any]
    ) -> None:
        """Post the notification to the relay."""
        if not recipient.email:
            logfire.info(
                "Recipient has no email, skipping mail", recipient_id=str(recipient.id)
            )
            return

        headers = {"Authorization": f"Bearer {self.api_key}"} if self.api_key else {}
        body = {
            "to": recipient.email,
            "username": recipient.username.root,
            "kind": kind.value,
            "payload": payload,
        }

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(self.relay_url, json=body, headers=headers)
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise MailDeliveryError(
                f"Mail relay returned {e.response.status_code} for {kind.value}"
            ) from e
        except httpx.HTTPError as e:
            raise MailDeliveryError(f"Mail relay unreachable: {e}") from e

        logfire.info(
            "Mail handed to relay", recipient_id=str(recipient.id), kind=kind.value
        )
