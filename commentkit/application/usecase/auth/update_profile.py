"""Update profile use case."""

from pydantic import BaseModel, Field

from commentkit.domain.service import UserService
from commentkit.domain.value import UserId

from .get_current_user import UserInfo


class UpdateProfileRequest(BaseModel):
    user_id: int
    display_name: str | None = Field(default=None, min_length=1, max_length=100)


class UpdateProfileUseCase:
    """Use case for changing the caller's display name."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: UpdateProfileRequest) -> UserInfo:
        user = await self.user_service.get_by_id(UserId(request.user_id))
        user = await self.user_service.update_profile(user, request.display_name)
        return UserInfo.from_user(user)
