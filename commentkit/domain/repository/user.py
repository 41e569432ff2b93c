"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from commentkit.domain.model.user import User
from commentkit.domain.value import Email, UserId


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by normalised e-mail address.

        Args:
            email: The user's e-mail

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create when id is None, otherwise update).

        Returns:
            The saved user with its id assigned
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all users."""
        pass
