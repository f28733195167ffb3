"""Notification entity.

Notifications are immutable once created, except for their read state.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import NotificationId, NotificationKind, UserId


class Notification(DomainModel):
    """In-app notification for a user."""

    id: NotificationId
    recipient_id: UserId
    kind: NotificationKind
    payload: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime = Field(default_factory=datetime.now)
    read_at: Optional[datetime] = None

    @property
    def is_read(self) -> bool:
        """Whether the recipient has read this notification."""
        return self.read_at is not None
