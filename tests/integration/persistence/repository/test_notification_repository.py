"""Integration tests for PostgresNotificationRepository."""

from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from forum.domain.model import Notification
from forum.domain.repository import NotificationRepository, UserRepository
from forum.domain.value import NotificationId, NotificationKind
from tests.conftest import make_user
from tests.harness import create_env_fixture

pytestmark = pytest.mark.integration

integration_env = create_env_fixture(unmock={"persistence"})


class TestNotificationRepositoryIntegration:
    """Integration tests for PostgresNotificationRepository."""

    @pytest.mark.asyncio
    async def test_inbox_is_newest_first_and_read_is_kept(self, integration_env):
        # Arrange
        user_repo = await integration_env.get(UserRepository)
        notification_repo = await integration_env.get(NotificationRepository)
        recipient = await user_repo.save(make_user(f"reader_{uuid4().hex[:8]}"))
        now = datetime.now()
        older, newer = (
            Notification(
                id=NotificationId(uuid4()),
                recipient_id=recipient.id,
                kind=NotificationKind.MENTION,
                payload={"excerpt": excerpt},
                created_at=created_at,
            )
            for excerpt, created_at in (("first", now - timedelta(minutes=5)), ("second", now))
        )
        await notification_repo.save(older)
        await notification_repo.save(newer)

        # Act
        read = await notification_repo.mark_as_read(older.id, now)
        read_again = await notification_repo.mark_as_read(older.id, now + timedelta(hours=1))
        inbox = await notification_repo.find_by_recipient(recipient.id)
        unread = await notification_repo.find_by_recipient(recipient.id, unread_only=True)

        # Assert
        assert [n.id for n in inbox] == [newer.id, older.id]
        assert inbox[1].payload == {"excerpt": "first"}
        assert read.read_at is not None
        assert read_again.read_at == read.read_at
        assert [n.id for n in unread] == [newer.id]
