"""Set or clear like use case."""

from pydantic import BaseModel

from commentkit.domain.service import LikeService
from commentkit.domain.value import LikeSubject, LikeTarget, UserId

from .get_likes import LikesResponse


class SetLikeRequest(BaseModel):
    """Set like request. liked=False clears the like."""

    target_kind: LikeTarget
    target_id: int
    user_id: int
    liked: bool = True


class SetLikeUseCase:
    """Use case for explicitly liking or unliking a target.

    Both directions are idempotent: liking twice keeps one like, unliking
    without a like is a no-op.
    """

    def __init__(self, like_service: LikeService) -> None:
        self.like_service = like_service

    async def execute(self, request: SetLikeRequest) -> LikesResponse:
        """Apply the like state.

        Raises:
            NotFoundError: If the page or comment does not exist
        """
        subject = LikeSubject.for_user(UserId(request.user_id))
        if request.liked:
            stats = await self.like_service.like(
                request.target_kind, request.target_id, subject
            )
        else:
            stats = await self.like_service.unlike(
                request.target_kind, request.target_id, subject
            )
        return LikesResponse(total_likes=stats.total_likes, user_liked=stats.liked)
