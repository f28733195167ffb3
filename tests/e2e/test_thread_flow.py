"""End-to-end tests for the thread, reply, like and notification flow.

Assumes postgres is running with migrations applied.
"""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import httpx
import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from forum.config import Settings
from forum.domain.repository import UserRepository
from forum.interface.api.app import create_app
from forum.util.di.container import create_container
from forum.util.jwt import encode_token
from tests.conftest import make_user
from tests.harness import create_env_fixture

pytestmark = pytest.mark.e2e

# E2E test fixture, used to seed users owned by the auth system
e2e_env = create_env_fixture(unmock={"persistence"})


def _auth(user) -> dict[str, str]:
    token = encode_token(
        {
            "user_id": str(user.id),
            "username": user.username.root,
            "exp": datetime.now(timezone.utc) + timedelta(hours=1),
        },
        Settings().auth,
    )
    return {"Cookie": f"auth_token={token}"}


async def _seed_users(e2e_env, *prefixes: str):
    user_repo = await e2e_env.get(UserRepository)
    users = [
        await user_repo.save(make_user(f"{prefix}_{uuid4().hex[:8]}"))
        for prefix in prefixes
    ]
    session = await e2e_env.get(AsyncSession)
    await session.commit()
    return users


class TestThreadFlow:
    """End-to-end tests through the HTTP API."""

    @pytest.mark.asyncio
    async def test_thread_reply_like_and_mention(self, e2e_env):
        # Arrange
        author, jane = await _seed_users(e2e_env, "author", "jane")
        container = create_container()
        app = create_app(container)
        subject = f"E2E question {uuid4().hex[:8]}"

        async with httpx.AsyncClient(
            transport=httpx.ASGITransport(app=app), base_url="http://test"
        ) as client:
            # Act
            created = await client.post(
                "/threads",
                json={"subject": subject, "body": "How do I eager load?"},
                headers=_auth(author),
            )
            slug = created.json()["slug"]
            reply = await client.post(
                f"/threads/{slug}/replies",
                json={"body": f"@{jane.username.root} might know"},
                headers=_auth(author),
            )
            thread = await client.get(f"/threads/{slug}")
            like = await client.post(
                f"/threads/{thread.json()['thread_id']}/like",
                headers=_auth(jane),
            )
            inbox = await client.get(
                "/notifications", headers=_auth(jane)
            )

        await container.close()

        # Assert
        assert created.status_code == 201
        assert created.json()["redirect_target"] == f"/forum/{slug}"
        assert reply.status_code == 201
        assert thread.status_code == 200
        assert len(thread.json()["replies"]) == 1
        assert like.json() == {"liked": True, "count": 1}
        assert [item["kind"] for item in inbox.json()["items"]] == ["mention"]

    @pytest.mark.asyncio
    async def test_anonymous_requests(self, e2e_env):
        # Arrange
        container = create_container()
        app = create_app(container)

        async with httpx.AsyncClient(
            transport=httpx.ASGITransport(app=app), base_url="http://test"
        ) as client:
            # Act
            created = await client.post(
                "/threads", json={"subject": "Hello", "body": "World"}
            )
            missing = await client.get("/threads/no-such-thread")
            malformed_slug = await client.get("/threads/Not_A_Slug!")
            malformed_id = await client.post("/replies/not-a-uuid/like")
            health = await client.get("/health")

        await container.close()

        # Assert
        assert created.status_code == 401
        assert missing.status_code == 404
        assert malformed_slug.status_code == 404
        assert malformed_id.status_code == 404
        assert health.status_code == 200
