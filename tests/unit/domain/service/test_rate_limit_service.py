"""Unit tests for RateLimitService."""

from datetime import datetime, timedelta

import pytest

from forum.domain.error import RateLimitExceededError
from forum.domain.repository import ThreadRepository
from forum.domain.service import RateLimitService
from tests.conftest import make_thread, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCanCreateThread:
    """Tests for the rolling thread creation window."""

    @pytest.mark.asyncio
    async def test_allows_until_limit_reached(self, unit_env):
        """Four recent threads leave room for a fifth."""
        # Arrange
        rate_limit_service = await unit_env.get(RateLimitService)
        thread_repo = await unit_env.get(ThreadRepository)
        author = make_user("johndoe")
        now = datetime.now()
        for hours_ago in range(4):
            await thread_repo.save(
                make_thread(author, created_at=now - timedelta(hours=hours_ago))
            )

        # Act & Assert
        assert await rate_limit_service.can_create_thread(author, now)

    @pytest.mark.asyncio
    async def test_denies_at_limit(self, unit_env):
        # Arrange
        rate_limit_service = await unit_env.get(RateLimitService)
        thread_repo = await unit_env.get(ThreadRepository)
        author = make_user("johndoe")
        now = datetime.now()
        for hours_ago in range(5):
            await thread_repo.save(
                make_thread(author, created_at=now - timedelta(hours=hours_ago))
            )

        # Act & Assert
        assert not await rate_limit_service.can_create_thread(author, now)
        with pytest.raises(
            RateLimitExceededError,
            match="You can only post a maximum of 5 threads per day.",
        ):
            await rate_limit_service.ensure_can_create_thread(author, now)

    @pytest.mark.asyncio
    async def test_threads_outside_window_do_not_count(self, unit_env):
        """The window is rolling, not per calendar day."""
        # Arrange
        rate_limit_service = await unit_env.get(RateLimitService)
        thread_repo = await unit_env.get(ThreadRepository)
        author = make_user("johndoe")
        now = datetime.now()
        for _ in range(5):
            await thread_repo.save(
                make_thread(author, created_at=now - timedelta(hours=25))
            )

        # Act & Assert
        assert await rate_limit_service.count_recent_threads(author, now) == 0
        assert await rate_limit_service.can_create_thread(author, now)

    @pytest.mark.asyncio
    async def test_other_authors_do_not_count(self, unit_env):
        # Arrange
        rate_limit_service = await unit_env.get(RateLimitService)
        thread_repo = await unit_env.get(ThreadRepository)
        author = make_user("johndoe")
        other = make_user("janedoe")
        for _ in range(5):
            await thread_repo.save(make_thread(other))

        # Act & Assert
        assert await rate_limit_service.can_create_thread(author, datetime.now())

    @pytest.mark.asyncio
    async def test_threads_after_now_do_not_count(self, unit_env):
        """The window ends at the evaluation time."""
        # Arrange
        rate_limit_service = await unit_env.get(RateLimitService)
        thread_repo = await unit_env.get(ThreadRepository)
        author = make_user("johndoe")
        now = datetime(2024, 5, 1, 12, 0)
        await thread_repo.save(make_thread(author, created_at=now))
        for minutes_later in range(1, 6):
            await thread_repo.save(
                make_thread(author, created_at=now + timedelta(minutes=minutes_later))
            )

        # Act & Assert
        assert await rate_limit_service.count_recent_threads(author, now) == 1
        assert await rate_limit_service.can_create_thread(author, now)
