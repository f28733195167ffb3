"""List notifications use case."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from forum.application.usecase.common import parse_id
from forum.domain.service import NotificationService, UserService
from forum.domain.value import NotificationKind, UserId


class ListNotificationsRequest(BaseModel):
    """List notifications request."""

    user_id: str
    unread_only: bool = False
    limit: int = Field(default=30, ge=1, le=100)
    offset: int = Field(default=0, ge=0)


class NotificationItem(BaseModel):
    """A notification in the inbox."""

    notification_id: str
    kind: NotificationKind
    payload: dict[str, Any]
    created_at: datetime
    read_at: datetime | None


class ListNotificationsResponse(BaseModel):
    """List notifications response."""

    items: list[NotificationItem]


class ListNotificationsUseCase:
    """Use case for reading the current user's notifications."""

    def __init__(
        self, notification_service: NotificationService, user_service: UserService
    ) -> None:
        """Initialize list notifications use case.

        Args:
            notification_service: Notification domain service
            user_service: User domain service
        """
        self.notification_service = notification_service
        self.user_service = user_service

    async def execute(
        self, request: ListNotificationsRequest
    ) -> ListNotificationsResponse:
        """Execute list notifications flow."""
        user = await self.user_service.get_by_id(
            UserId(parse_id(request.user_id, "User"))
        )
        notifications = await self.notification_service.list_for_user(
            user,
            unread_only=request.unread_only,
            limit=request.limit,
            offset=request.offset,
        )

        return ListNotificationsResponse(
            items=[
                NotificationItem(
                    notification_id=str(n.id),
                    kind=n.kind,
                    payload=n.payload,
                    created_at=n.created_at,
                    read_at=n.read_at,
                )
                for n in notifications
            ]
        )
