"""User domain service."""

import logfire

from commentkit.domain.error import NotFoundError
from commentkit.domain.model import User
from commentkit.domain.model.common import utcnow
from commentkit.domain.repository import UserRepository
from commentkit.domain.value import UserId


class UserService:
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            logfire.info("User found", user_id=str(user_id))
            return user

    async def find_by_id(self, user_id: UserId | None) -> User | None:
        """Get user by ID, tolerating a missing or unknown ID."""
        if user_id is None:
            return None
        return await self.user_repository.find_by_id(user_id)

    async def update_profile(self, user: User, display_name: str | None) -> User:
        """Update the user's display name.

        Args:
            user: User to update
            display_name: New name; None leaves it unchanged

        Returns:
            Saved user
        """
        with logfire.span("user_service.update_profile", user_id=str(user.id)):
            if display_name is None:
                return user
            saved = await self.user_repository.save(
                user.model_copy(
                    update={"display_name": display_name.strip(), "updated_at": utcnow()}
                )
            )
            logfire.info("User profile updated", user_id=str(saved.id))
            return saved

    async def count(self) -> int:
        return await self.user_repository.count()
