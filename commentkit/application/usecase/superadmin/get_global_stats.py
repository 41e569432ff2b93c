"""Global stats use case."""

from pydantic import BaseModel

from commentkit.application.usecase.base import BaseUseCase
from commentkit.domain.error import NotAuthorizedError
from commentkit.domain.service import CommentService, PageService, SiteService, UserService
from commentkit.domain.value import CommentStatus, UserId


class GetGlobalStatsRequest(BaseModel):
    user_id: int


class GetGlobalStatsResponse(BaseModel):
    total_users: int
    total_sites: int
    total_pages: int
    total_comments: int
    comments_by_status: dict[CommentStatus, int]


class GetGlobalStatsUseCase(BaseUseCase[GetGlobalStatsRequest, GetGlobalStatsResponse]):
    """Use case for platform-wide counts. Superadmins only."""

    def __init__(
        self,
        user_service: UserService,
        site_service: SiteService,
        page_service: PageService,
        comment_service: CommentService,
    ) -> None:
        self.user_service = user_service
        self.site_service = site_service
        self.page_service = page_service
        self.comment_service = comment_service

    async def execute(self, request: GetGlobalStatsRequest) -> GetGlobalStatsResponse:
        """Count users, sites, pages and comments.

        Raises:
            NotAuthorizedError: If the caller is not a superadmin
        """
        user = await self.user_service.get_by_id(UserId(request.user_id))
        if not user.is_superadmin:
            raise NotAuthorizedError("superadmin stats", "global", str(user.id))

        by_status = await self.comment_service.count_by_status()
        return GetGlobalStatsResponse(
            total_users=await self.user_service.count(),
            total_sites=await self.site_service.count(),
            total_pages=await self.page_service.count(),
            total_comments=sum(by_status.values()),
            comments_by_status={s: by_status.get(s, 0) for s in CommentStatus},
        )
