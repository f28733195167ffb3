"""In-memory user repository for testing."""

from typing import Iterable, List, Optional

from forum.domain.model import User
from forum.domain.repository import UserRepository
from forum.domain.value import UserId, Username


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by exact username."""
        for user in self._users.values():
            if user.username == username:
                return user
        return None

    async def find_by_usernames(self, usernames: Iterable[str]) -> List[User]:
        """Find users matching any of the given usernames exactly."""
        names = set(usernames)
        return [user for user in self._users.values() if user.username.root in names]

    async def save(self, user: User) -> User:
        """Save a user."""
        self._users[user.id] = user
        return user
