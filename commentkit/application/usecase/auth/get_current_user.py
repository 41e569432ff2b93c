"""Get current user use case."""

from datetime import datetime

from pydantic import BaseModel

from commentkit.domain.model import User
from commentkit.domain.service import UserService
from commentkit.domain.value import UserId


class UserInfo(BaseModel):
    """User as returned to the dashboard and the widget."""

    id: int
    email: str
    email_hash: str
    display_name: str | None
    is_superadmin: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserInfo":
        return cls(
            id=user.id,
            email=user.email.root,
            email_hash=user.email_hash,
            display_name=user.display_name,
            is_superadmin=user.is_superadmin,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    user_id: int  # From the verified session token


class GetCurrentUserUseCase:
    """Use case for getting current authenticated user."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> UserInfo:
        """Load the session's user.

        Raises:
            NotFoundError: If the user no longer exists
        """
        user = await self.user_service.get_by_id(UserId(request.user_id))
        return UserInfo.from_user(user)
