"""Toggle like use case."""

from pydantic import BaseModel

from commentkit.domain.service import LikeService
from commentkit.domain.value import LikeSubject, LikeTarget, UserId


class ToggleLikeRequest(BaseModel):
    target_kind: LikeTarget
    target_id: int
    user_id: int


class ToggleLikeResponse(BaseModel):
    liked: bool
    total_likes: int


class ToggleLikeUseCase:
    """Use case for flipping the caller's like on a target."""

    def __init__(self, like_service: LikeService) -> None:
        self.like_service = like_service

    async def execute(self, request: ToggleLikeRequest) -> ToggleLikeResponse:
        """Flip the like.

        Raises:
            NotFoundError: If the page or comment does not exist
        """
        stats = await self.like_service.toggle_like(
            request.target_kind,
            request.target_id,
            LikeSubject.for_user(UserId(request.user_id)),
        )
        return ToggleLikeResponse(liked=stats.liked, total_likes=stats.total_likes)
