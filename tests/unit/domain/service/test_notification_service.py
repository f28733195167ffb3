"""Unit tests for mention planning, dispatch and the notification inbox."""

from typing import Any
from uuid import uuid4

import pytest

from forum.adapter.error import MailDeliveryError
from forum.config import ForumSettings
from forum.domain.error import ForbiddenError, NotFoundError
from forum.domain.model import User
from forum.domain.repository import NotificationRepository, UserRepository
from forum.domain.service import (
    MentionDispatcher,
    MentionSource,
    NotificationChannel,
    NotificationService,
    plan_mention_notifications,
)
from forum.domain.service.notification_service import make_excerpt
from forum.domain.value import NotificationId, NotificationKind
from tests.conftest import make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class FlakyChannel(NotificationChannel):
    """Channel failing for selected recipients."""

    def __init__(self, failing: set[str]) -> None:
        self.failing = failing
        self.delivered: list[str] = []

    async def notify(
        self, recipient: User, kind: NotificationKind, payload: dict[str, Any]
    ) -> None:
        if recipient.username.root in self.failing:
            raise MailDeliveryError("relay down")
        self.delivered.append(recipient.username.root)


def _source() -> MentionSource:
    return MentionSource(source_type="thread", source_id=uuid4())


class TestPlanMentionNotifications:
    """Tests for the pure planning function."""

    def test_plans_one_notification_per_mentioned_user(self):
        # Arrange
        creator = make_user("johndoe")
        jane = make_user("janedoe")
        source = _source()

        # Act
        planned = plan_mention_notifications(
            creator,
            "Eager loading",
            "Hey @janedoe, and again @janedoe",
            source,
            [jane],
        )

        # Assert
        assert len(planned) == 1
        assert planned[0].recipient == jane
        assert planned[0].kind == NotificationKind.MENTION
        assert planned[0].payload == {
            "type": "mention",
            "replyable_subject": "Eager loading",
            "excerpt": "Hey @janedoe, and again @janedoe",
            "source_type": "thread",
            "source_id": str(source.source_id),
            "author_username": "johndoe",
        }

    def test_creator_is_never_notified(self):
        creator = make_user("johndoe")

        planned = plan_mention_notifications(
            creator, "Subject", "Note to self @johndoe", _source(), [creator]
        )

        assert planned == []

    def test_unknown_usernames_are_dropped(self):
        planned = plan_mention_notifications(
            make_user("johndoe"), "Subject", "@ghost @janedoe", _source(), []
        )

        assert planned == []

    def test_matching_is_case_sensitive(self):
        jane = make_user("janedoe")

        planned = plan_mention_notifications(
            make_user("johndoe"), "Subject", "@JaneDoe", _source(), [jane]
        )

        assert planned == []

    def test_linked_mentions_are_not_planned(self):
        joe = make_user("joedixon")

        planned = plan_mention_notifications(
            make_user("johndoe"),
            "Subject",
            "[@joedixon](https://example.com)",
            _source(),
            [joe],
        )

        assert planned == []

    def test_excerpt_is_truncated(self):
        jane = make_user("janedoe")
        body = "@janedoe " + "x" * 200

        planned = plan_mention_notifications(
            make_user("johndoe"), "Subject", body, _source(), [jane], excerpt_length=20
        )

        assert len(planned[0].payload["excerpt"]) == 20
        assert planned[0].payload["excerpt"].endswith("...")


class TestMakeExcerpt:
    """Tests for make_excerpt."""

    def test_short_text_is_kept(self):
        assert make_excerpt("short body", 100) == "short body"

    def test_whitespace_is_collapsed(self):
        assert make_excerpt("line one\n\n  line two", 100) == "line one line two"


class TestMentionDispatcher:
    """Tests for MentionDispatcher."""

    @pytest.mark.asyncio
    async def test_dispatch_stores_in_app_notification(self, unit_env):
        # Arrange
        dispatcher = await unit_env.get(MentionDispatcher)
        user_repo = await unit_env.get(UserRepository)
        notification_repo = await unit_env.get(NotificationRepository)
        creator = await user_repo.save(make_user("johndoe"))
        jane = await user_repo.save(make_user("janedoe"))

        # Act
        delivered = await dispatcher.dispatch(
            creator, "Eager loading", "Thoughts @janedoe?", _source()
        )

        # Assert
        assert [p.recipient.id for p in delivered] == [jane.id]
        inbox = await notification_repo.find_by_recipient(jane.id)
        assert len(inbox) == 1
        assert inbox[0].kind == NotificationKind.MENTION
        assert inbox[0].payload["replyable_subject"] == "Eager loading"

    @pytest.mark.asyncio
    async def test_channel_failure_does_not_stop_other_recipients(self, unit_env):
        """A failing delivery is logged and skipped."""
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        creator = await user_repo.save(make_user("johndoe"))
        await user_repo.save(make_user("alice"))
        await user_repo.save(make_user("bob"))
        channel = FlakyChannel(failing={"alice"})
        dispatcher = MentionDispatcher(user_repo, channel, ForumSettings())

        # Act
        delivered = await dispatcher.dispatch(
            creator, "Subject", "@alice @bob", _source()
        )

        # Assert
        assert channel.delivered == ["bob"]
        assert [p.recipient.username.root for p in delivered] == ["bob"]

    @pytest.mark.asyncio
    async def test_body_without_mentions_skips_lookup(self, unit_env):
        dispatcher = await unit_env.get(MentionDispatcher)

        delivered = await dispatcher.dispatch(
            make_user("johndoe"), "Subject", "No mentions here", _source()
        )

        assert delivered == []


class TestNotificationService:
    """Tests for the notification inbox."""

    @pytest.mark.asyncio
    async def test_recipient_marks_notification_read(self, unit_env):
        # Arrange
        dispatcher = await unit_env.get(MentionDispatcher)
        notification_service = await unit_env.get(NotificationService)
        user_repo = await unit_env.get(UserRepository)
        creator = await user_repo.save(make_user("johndoe"))
        jane = await user_repo.save(make_user("janedoe"))
        await dispatcher.dispatch(creator, "Subject", "@janedoe", _source())
        [notification] = await notification_service.list_for_user(jane)

        # Act
        updated = await notification_service.mark_as_read(jane, notification.id)

        # Assert
        assert updated.is_read
        assert await notification_service.list_for_user(jane, unread_only=True) == []

    @pytest.mark.asyncio
    async def test_other_user_cannot_mark_read(self, unit_env):
        # Arrange
        dispatcher = await unit_env.get(MentionDispatcher)
        notification_service = await unit_env.get(NotificationService)
        user_repo = await unit_env.get(UserRepository)
        creator = await user_repo.save(make_user("johndoe"))
        jane = await user_repo.save(make_user("janedoe"))
        await dispatcher.dispatch(creator, "Subject", "@janedoe", _source())
        [notification] = await notification_service.list_for_user(jane)

        # Act & Assert
        with pytest.raises(ForbiddenError):
            await notification_service.mark_as_read(creator, notification.id)

        [unchanged] = await notification_service.list_for_user(jane)
        assert not unchanged.is_read

    @pytest.mark.asyncio
    async def test_unknown_notification_raises_not_found(self, unit_env):
        notification_service = await unit_env.get(NotificationService)

        with pytest.raises(NotFoundError):
            await notification_service.mark_as_read(
                make_user("janedoe"), NotificationId(uuid4())
            )
