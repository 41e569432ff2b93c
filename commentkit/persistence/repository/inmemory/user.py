"""In-memory user repository for testing."""

from typing import Optional

from commentkit.domain.model.user import User
from commentkit.domain.repository.user import UserRepository
from commentkit.domain.value import Email, UserId

from .store import InMemoryStore


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._store.users.get(user_id)

    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by their email."""
        for user in self._store.users.values():
            if user.email == email:
                return user
        return None

    async def save(self, user: User) -> User:
        """Save or update a user."""
        if user.id is None:
            user = user.model_copy(update={"id": UserId(self._store.next_id("users"))})
        self._store.users[user.id] = user
        return user

    async def count(self) -> int:
        return len(self._store.users)
