"""Unit tests for ThreadService."""

from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from forum.adapter.mail import MailClient
from forum.config import ForumSettings
from forum.domain.error import (
    BusinessRuleViolationError,
    ContentValidationError,
    ForbiddenError,
    NotFoundError,
    RateLimitExceededError,
    ValidationErrorCode,
)
from forum.domain.repository import (
    NotificationRepository,
    ReplyRepository,
    ThreadRepository,
    UserRepository,
)
from forum.domain.model import Thread
from forum.domain.service import (
    ContentValidator,
    MentionDispatcher,
    RateLimitService,
    ThreadService,
)
from forum.domain.value import Slug, ThreadId
from forum.persistence.repository.inmemory import InMemoryThreadRepository
from tests.conftest import make_reply, make_thread, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class RacingThreadRepository(InMemoryThreadRepository):
    """Stores a competing thread by the same author alongside the fifth one."""

    async def save(self, thread: Thread) -> Thread:
        recent = await self.count_by_author_since(
            thread.author_id, datetime.min, thread.created_at
        )
        if recent == 4 and thread.id not in self._threads:
            competing_id = ThreadId(uuid4())
            await super().save(
                thread.model_copy(
                    update={"id": competing_id, "slug": Slug("competing-thread")}
                )
            )
        return await super().save(thread)


class TestCreateThread:
    """Tests for create_thread."""

    @pytest.mark.asyncio
    async def test_create_thread_persists_with_slug_and_activity(self, unit_env):
        # Arrange
        thread_service = await unit_env.get(ThreadService)
        thread_repo = await unit_env.get(ThreadRepository)
        author = make_user("johndoe")
        now = datetime(2024, 5, 1, 12, 0)

        # Act
        thread = await thread_service.create_thread(
            author, "How to work with Eloquent?", "Question body", now=now
        )

        # Assert
        assert thread.slug.root == "how-to-work-with-eloquent"
        assert thread.author_id == author.id
        assert thread.created_at == now
        assert thread.last_activity_at == now
        assert thread.solution_reply_id is None
        assert await thread_repo.find_by_id(thread.id) == thread

    @pytest.mark.asyncio
    async def test_duplicate_subject_gets_numeric_suffix(self, unit_env):
        thread_service = await unit_env.get(ThreadService)
        author = make_user("johndoe")

        first = await thread_service.create_thread(author, "Same subject", "Body")
        second = await thread_service.create_thread(author, "Same subject", "Body")

        assert first.slug.root == "same-subject"
        assert second.slug.root == "same-subject-1"

    @pytest.mark.asyncio
    async def test_sixth_thread_in_a_day_is_refused(self, unit_env):
        """Five threads are allowed, the sixth fails and is not stored."""
        # Arrange
        thread_service = await unit_env.get(ThreadService)
        thread_repo = await unit_env.get(ThreadRepository)
        author = make_user("johndoe")
        for i in range(5):
            await thread_service.create_thread(author, f"Question {i}", "Body")

        # Act & Assert
        with pytest.raises(RateLimitExceededError):
            await thread_service.create_thread(author, "One too many", "Body")

        assert await thread_repo.count_by_author_since(
            author.id, datetime.min, datetime.max
        ) == 5
        assert await thread_repo.find_by_slug(Slug("one-too-many")) is None

    @pytest.mark.asyncio
    async def test_author_is_locked_before_the_window_is_counted(self, unit_env):
        """The lock is taken even when the pre-check refuses the create."""
        # Arrange
        thread_service = await unit_env.get(ThreadService)
        thread_repo = await unit_env.get(ThreadRepository)
        author = make_user("johndoe")
        for _ in range(5):
            await thread_repo.save(make_thread(author))

        # Act
        with pytest.raises(RateLimitExceededError):
            await thread_service.create_thread(author, "One too many", "Body")

        # Assert
        assert thread_repo.locked_authors == [author.id]

    @pytest.mark.asyncio
    async def test_concurrent_create_past_limit_is_rolled_back(self, unit_env):
        """A create that overshoots after its insert removes itself quietly."""
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        notification_repo = await unit_env.get(NotificationRepository)
        mail_client = await unit_env.get(MailClient)
        forum_settings = await unit_env.get(ForumSettings)
        thread_repo = RacingThreadRepository()
        thread_service = ThreadService(
            thread_repository=thread_repo,
            content_validator=await unit_env.get(ContentValidator),
            rate_limit_service=RateLimitService(thread_repo, forum_settings),
            mention_dispatcher=await unit_env.get(MentionDispatcher),
        )
        author = await user_repo.save(make_user("johndoe"))
        jane = await user_repo.save(make_user("janedoe"))
        now = datetime(2024, 5, 1, 12, 0)
        for hours_ago in range(1, 5):
            await thread_repo.save(
                make_thread(author, created_at=now - timedelta(hours=hours_ago))
            )

        # Act
        with pytest.raises(RateLimitExceededError):
            await thread_service.create_thread(
                author, "Fifth question", "Thoughts @janedoe?", now=now
            )

        # Assert
        assert await thread_repo.count_by_author_since(
            author.id, datetime.min, datetime.max
        ) == 5
        assert await thread_repo.find_by_slug(Slug("fifth-question")) is None
        assert await thread_repo.find_by_slug(Slug("competing-thread")) is not None
        assert await notification_repo.find_by_recipient(jane.id) == []
        assert mail_client.sent == []

    @pytest.mark.asyncio
    async def test_rate_limit_is_checked_before_validation(self, unit_env):
        # Arrange
        thread_service = await unit_env.get(ThreadService)
        thread_repo = await unit_env.get(ThreadRepository)
        author = make_user("johndoe")
        for _ in range(5):
            await thread_repo.save(make_thread(author))

        # Act & Assert
        with pytest.raises(RateLimitExceededError):
            await thread_service.create_thread(author, "", "")

    @pytest.mark.asyncio
    async def test_old_threads_do_not_block_creation(self, unit_env):
        # Arrange
        thread_service = await unit_env.get(ThreadService)
        thread_repo = await unit_env.get(ThreadRepository)
        author = make_user("johndoe")
        yesterday = datetime.now() - timedelta(hours=25)
        for _ in range(5):
            await thread_repo.save(make_thread(author, created_at=yesterday))

        # Act
        thread = await thread_service.create_thread(author, "Fresh question", "Body")

        # Assert
        assert thread.subject == "Fresh question"

    @pytest.mark.asyncio
    async def test_invalid_content_persists_nothing(self, unit_env):
        # Arrange
        thread_service = await unit_env.get(ThreadService)
        thread_repo = await unit_env.get(ThreadRepository)
        author = make_user("johndoe")

        # Act
        with pytest.raises(ContentValidationError) as exc_info:
            await thread_service.create_thread(
                author,
                "Visit https://example.com",
                "[@joedixon](https://somethingnasty.com)",
            )

        # Assert
        assert exc_info.value.codes() == {
            "subject": ValidationErrorCode.CONTAINS_URL,
            "body": ValidationErrorCode.INVALID_MENTION,
        }
        assert await thread_repo.count_by_author_since(
            author.id, datetime.min, datetime.max
        ) == 0

    @pytest.mark.asyncio
    async def test_mentioned_user_is_notified_once(self, unit_env):
        # Arrange
        thread_service = await unit_env.get(ThreadService)
        user_repo = await unit_env.get(UserRepository)
        notification_repo = await unit_env.get(NotificationRepository)
        mail_client = await unit_env.get(MailClient)
        author = await user_repo.save(make_user("johndoe"))
        jane = await user_repo.save(make_user("janedoe"))

        # Act
        thread = await thread_service.create_thread(
            author, "Eager loading", "Hey @janedoe, what do you think @janedoe?"
        )

        # Assert
        inbox = await notification_repo.find_by_recipient(jane.id)
        assert len(inbox) == 1
        assert inbox[0].payload["replyable_subject"] == "Eager loading"
        assert inbox[0].payload["source_id"] == str(thread.id)
        assert [(r.id, k.value) for r, k, _ in mail_client.sent] == [
            (jane.id, "mention")
        ]


class TestEditThread:
    """Tests for edit_thread."""

    @pytest.mark.asyncio
    async def test_owner_edit_keeps_author_and_activity(self, unit_env):
        # Arrange
        thread_service = await unit_env.get(ThreadService)
        author = make_user("johndoe")
        created = await thread_service.create_thread(
            author, "Original subject", "Body", now=datetime(2024, 5, 1, 12, 0)
        )

        # Act
        edited = await thread_service.edit_thread(
            author, created, "New subject", "New body"
        )

        # Assert
        assert edited.subject == "New subject"
        assert edited.body == "New body"
        assert edited.slug.root == "new-subject"
        assert edited.author_id == author.id
        assert edited.created_at == created.created_at
        assert edited.last_activity_at == created.last_activity_at

    @pytest.mark.asyncio
    async def test_edit_keeps_own_suffixed_slug(self, unit_env):
        """A thread already holding the suffixed slug is not bumped to the next one."""
        # Arrange
        thread_service = await unit_env.get(ThreadService)
        author = make_user("johndoe")
        await thread_service.create_thread(author, "Foo", "Body")
        second = await thread_service.create_thread(author, "Foo", "Body")
        renamed = await thread_service.edit_thread(author, second, "Foo?", "Body")

        # Act
        edited = await thread_service.edit_thread(author, renamed, "Foo", "Body")

        # Assert
        assert second.slug.root == "foo-1"
        assert renamed.slug.root == "foo-1"
        assert edited.slug.root == "foo-1"

    @pytest.mark.asyncio
    async def test_edit_does_not_notify_mentions(self, unit_env):
        # Arrange
        thread_service = await unit_env.get(ThreadService)
        user_repo = await unit_env.get(UserRepository)
        notification_repo = await unit_env.get(NotificationRepository)
        author = await user_repo.save(make_user("johndoe"))
        jane = await user_repo.save(make_user("janedoe"))
        thread = await thread_service.create_thread(author, "Subject", "Body")

        # Act
        await thread_service.edit_thread(author, thread, "Subject", "Now with @janedoe")

        # Assert
        assert await notification_repo.find_by_recipient(jane.id) == []

    @pytest.mark.asyncio
    async def test_non_owner_cannot_edit(self, unit_env):
        # Arrange
        thread_service = await unit_env.get(ThreadService)
        thread_repo = await unit_env.get(ThreadRepository)
        thread = await thread_repo.save(make_thread(make_user("johndoe")))

        # Act & Assert
        with pytest.raises(ForbiddenError):
            await thread_service.edit_thread(
                make_user("janedoe"), thread, "Hijacked", "Body"
            )

        assert (await thread_repo.find_by_id(thread.id)).subject == thread.subject

    @pytest.mark.asyncio
    async def test_moderator_can_edit(self, unit_env):
        thread_service = await unit_env.get(ThreadService)
        thread_repo = await unit_env.get(ThreadRepository)
        thread = await thread_repo.save(make_thread(make_user("johndoe")))

        edited = await thread_service.edit_thread(
            make_user("mod", is_moderator=True), thread, "Cleaned up", "Body"
        )

        assert edited.subject == "Cleaned up"
        assert edited.author_id == thread.author_id


class TestResolution:
    """Tests for mark_solution and unmark_solution."""

    @pytest.mark.asyncio
    async def test_owner_marks_reply_as_solution(self, unit_env):
        # Arrange
        thread_service = await unit_env.get(ThreadService)
        thread_repo = await unit_env.get(ThreadRepository)
        author = make_user("johndoe")
        thread = await thread_repo.save(make_thread(author))
        reply = make_reply(make_user("janedoe"), thread)

        # Act
        resolved = await thread_service.mark_solution(author, thread, reply)

        # Assert
        assert resolved.solution_reply_id == reply.id
        assert resolved.is_resolved

    @pytest.mark.asyncio
    async def test_reply_from_other_thread_is_rejected(self, unit_env):
        # Arrange
        thread_service = await unit_env.get(ThreadService)
        thread_repo = await unit_env.get(ThreadRepository)
        author = make_user("johndoe")
        thread = await thread_repo.save(make_thread(author))
        other_thread = await thread_repo.save(make_thread(author))
        foreign_reply = make_reply(make_user("janedoe"), other_thread)

        # Act & Assert
        with pytest.raises(BusinessRuleViolationError):
            await thread_service.mark_solution(author, thread, foreign_reply)

        assert (await thread_repo.find_by_id(thread.id)).solution_reply_id is None

    @pytest.mark.asyncio
    async def test_non_owner_cannot_mark_solution(self, unit_env):
        thread_service = await unit_env.get(ThreadService)
        thread_repo = await unit_env.get(ThreadRepository)
        thread = await thread_repo.save(make_thread(make_user("johndoe")))
        stranger = make_user("janedoe")

        with pytest.raises(ForbiddenError):
            await thread_service.mark_solution(
                stranger, thread, make_reply(stranger, thread)
            )

    @pytest.mark.asyncio
    async def test_unmark_clears_solution(self, unit_env):
        # Arrange
        thread_service = await unit_env.get(ThreadService)
        thread_repo = await unit_env.get(ThreadRepository)
        reply_repo = await unit_env.get(ReplyRepository)
        author = make_user("johndoe")
        thread = await thread_repo.save(make_thread(author))
        reply = await reply_repo.save(make_reply(author, thread))
        resolved = await thread_service.mark_solution(author, thread, reply)

        # Act
        reopened = await thread_service.unmark_solution(author, resolved)

        # Assert
        assert reopened.solution_reply_id is None


class TestLookup:
    """Tests for thread lookups."""

    @pytest.mark.asyncio
    async def test_unknown_slug_raises_not_found(self, unit_env):
        thread_service = await unit_env.get(ThreadService)

        with pytest.raises(NotFoundError):
            await thread_service.get_thread_by_slug("does-not-exist")

    @pytest.mark.asyncio
    async def test_malformed_slug_raises_not_found(self, unit_env):
        thread_service = await unit_env.get(ThreadService)

        with pytest.raises(NotFoundError, match="Thread not found: Not_A_Slug!"):
            await thread_service.get_thread_by_slug("Not_A_Slug!")
