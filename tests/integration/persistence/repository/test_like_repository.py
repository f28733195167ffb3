"""Integration tests for PostgresLikeRepository.

These tests verify the toggle round trip and the unique constraint on
(user, likeable) against a real database.
"""

from uuid import uuid4

import pytest

from forum.domain.model import Like
from forum.domain.repository import LikeRepository, ThreadRepository, UserRepository
from forum.domain.value import LikeableType, LikeId
from tests.conftest import make_thread, make_user
from tests.harness import create_env_fixture

pytestmark = pytest.mark.integration

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})


def _like(user, thread) -> Like:
    return Like(
        id=LikeId(uuid4()),
        user_id=user.id,
        likeable_type=LikeableType.THREAD,
        likeable_id=thread.id,
    )


class TestLikeRepositoryIntegration:
    """Integration tests for PostgresLikeRepository."""

    @pytest.mark.asyncio
    async def test_toggle_inserts_then_removes(self, integration_env):
        # Arrange
        user_repo = await integration_env.get(UserRepository)
        thread_repo = await integration_env.get(ThreadRepository)
        like_repo = await integration_env.get(LikeRepository)
        user = await user_repo.save(make_user(f"liker_{uuid4().hex[:8]}"))
        thread = await thread_repo.save(make_thread(user))

        # Act
        first = await like_repo.toggle(_like(user, thread))
        count_after_like = await like_repo.count_by_likeable(
            LikeableType.THREAD, thread.id
        )
        second = await like_repo.toggle(_like(user, thread))

        # Assert
        assert first is True
        assert count_after_like == 1
        assert second is False
        assert await like_repo.count_by_likeable(LikeableType.THREAD, thread.id) == 0
        assert (
            await like_repo.find_by_user_and_likeable(
                user.id, LikeableType.THREAD, thread.id
            )
            is None
        )

    @pytest.mark.asyncio
    async def test_deleting_thread_removes_its_likes(self, integration_env):
        # Arrange
        user_repo = await integration_env.get(UserRepository)
        thread_repo = await integration_env.get(ThreadRepository)
        like_repo = await integration_env.get(LikeRepository)
        user = await user_repo.save(make_user(f"liker_{uuid4().hex[:8]}"))
        thread = await thread_repo.save(make_thread(user))
        await like_repo.toggle(_like(user, thread))

        # Act
        await thread_repo.delete(thread.id)

        # Assert
        assert await like_repo.count_by_likeable(LikeableType.THREAD, thread.id) == 0
