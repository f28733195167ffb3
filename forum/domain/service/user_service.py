"""User domain service."""

from typing import Optional
from uuid import UUID

import logfire

from forum.domain.error import NotFoundError
from forum.domain.model.user import User
from forum.domain.repository import UserRepository
from forum.domain.value import UserId

from .base import Service


class UserService(Service):
    """Domain service for user lookups."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get a user by ID.

        Raises:
            NotFoundError: If the user does not exist
        """
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise NotFoundError("User", str(user_id))
        return user

    async def find_actor(self, user_id: Optional[str]) -> Optional[User]:
        """Resolve the current actor from an authenticated user id.

        Returns None for anonymous requests, malformed ids and unknown users.
        """
        if not user_id:
            return None
        try:
            parsed = UserId(UUID(user_id))
        except ValueError:
            logfire.warn("Malformed actor id", user_id=user_id)
            return None
        return await self.user_repository.find_by_id(parsed)
