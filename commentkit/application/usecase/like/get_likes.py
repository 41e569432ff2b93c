"""Get likes use case."""

from pydantic import BaseModel

from commentkit.domain.service import LikeService
from commentkit.domain.value import LikeSubject, LikeTarget, UserId


class GetLikesRequest(BaseModel):
    target_kind: LikeTarget
    target_id: int
    user_id: int | None = None


class LikesResponse(BaseModel):
    total_likes: int
    user_liked: bool


class GetLikesUseCase:
    """Use case for reading the like total of a page or comment."""

    def __init__(self, like_service: LikeService) -> None:
        self.like_service = like_service

    async def execute(self, request: GetLikesRequest) -> LikesResponse:
        subject = LikeSubject.for_user(UserId(request.user_id)) if request.user_id else None
        stats = await self.like_service.stats(
            request.target_kind, request.target_id, subject
        )
        return LikesResponse(total_likes=stats.total_likes, user_liked=stats.liked)
