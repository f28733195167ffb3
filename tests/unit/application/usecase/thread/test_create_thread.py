"""Unit tests for CreateThreadUseCase."""

from datetime import datetime
from uuid import uuid4

import pytest

from forum.application.usecase.thread import CreateThreadRequest, CreateThreadUseCase
from forum.domain.error import NotFoundError
from forum.domain.repository import ThreadRepository, UserRepository
from tests.conftest import make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateThreadUseCase:
    """Tests for CreateThreadUseCase."""

    @pytest.mark.asyncio
    async def test_success_redirects_to_thread(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CreateThreadUseCase)
        user_repo = await unit_env.get(UserRepository)
        author = await user_repo.save(make_user("johndoe"))
        tag_id = str(uuid4())

        # Act
        response = await use_case.execute(
            CreateThreadRequest(
                user_id=str(author.id),
                subject="Eager loading question",
                body="How do I avoid N+1?",
                tag_ids=[tag_id],
            )
        )

        # Assert
        assert response.success is True
        assert response.message == "Thread successfully created!"
        assert response.redirect_target == "/forum/eager-loading-question"
        assert response.field_errors == {}

    @pytest.mark.asyncio
    async def test_validation_failure_returns_field_errors(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CreateThreadUseCase)
        user_repo = await unit_env.get(UserRepository)
        author = await user_repo.save(make_user("johndoe"))

        # Act
        response = await use_case.execute(
            CreateThreadRequest(
                user_id=str(author.id),
                subject="a" * 61,
                body="[@joedixon](https://somethingnasty.com)",
            )
        )

        # Assert
        assert response.success is False
        assert response.message == "Something went wrong. Please review the fields below."
        assert response.field_errors == {
            "subject": "The subject must not be greater than 60 characters.",
            "body": "The body field contains an invalid mention.",
        }
        assert response.redirect_target is None

    @pytest.mark.asyncio
    async def test_sixth_thread_is_rate_limited(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CreateThreadUseCase)
        user_repo = await unit_env.get(UserRepository)
        thread_repo = await unit_env.get(ThreadRepository)
        author = await user_repo.save(make_user("johndoe"))
        for i in range(5):
            await use_case.execute(
                CreateThreadRequest(
                    user_id=str(author.id), subject=f"Question {i}", body="Body"
                )
            )

        # Act
        response = await use_case.execute(
            CreateThreadRequest(user_id=str(author.id), subject="Another", body="Body")
        )

        # Assert
        assert response.success is False
        assert response.rate_limited is True
        assert response.message == "You can only post a maximum of 5 threads per day."
        assert response.redirect_target == "/forum"
        assert await thread_repo.count_by_author_since(
            author.id, datetime.min, datetime.max
        ) == 5

    @pytest.mark.asyncio
    async def test_unknown_user_raises_not_found(self, unit_env):
        use_case = await unit_env.get(CreateThreadUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateThreadRequest(user_id=str(uuid4()), subject="Hi", body="Body")
            )
