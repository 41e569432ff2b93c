"""Bulk moderation use case."""

from pydantic import BaseModel, Field

from commentkit.application.usecase.base import BaseUseCase
from commentkit.domain.service import ModerationService, SiteService
from commentkit.domain.value import (
    BulkOutcome,
    CommentId,
    ModerationAction,
    SiteId,
    UserId,
)

MAX_BULK_IDS = 100


class BulkModerateRequest(BaseModel):
    site_id: int
    user_id: int
    comment_ids: list[int] = Field(min_length=1, max_length=MAX_BULK_IDS)
    action: ModerationAction


class BulkModerateResponse(BaseModel):
    """Outcome per requested comment id; the batch itself never fails."""

    action: ModerationAction
    results: dict[int, BulkOutcome]
    succeeded: int
    failed: int


class BulkModerateUseCase(BaseUseCase[BulkModerateRequest, BulkModerateResponse]):
    """Use case for applying one moderation action to many comments."""

    def __init__(
        self, site_service: SiteService, moderation_service: ModerationService
    ) -> None:
        """Initialize bulk moderate use case.

        Args:
            site_service: Site domain service
            moderation_service: Moderation domain service
        """
        self.site_service = site_service
        self.moderation_service = moderation_service

    async def execute(self, request: BulkModerateRequest) -> BulkModerateResponse:
        """Execute bulk moderation.

        Steps:
        1. Check the caller owns the site
        2. Apply the action id by id; comments of other sites are refused
        3. Report each id's outcome

        Raises:
            NotFoundError: If the site does not exist
            NotAuthorizedError: If the user does not own the site
        """
        site = await self.site_service.get_owned_site(
            SiteId(request.site_id), UserId(request.user_id)
        )

        outcomes = await self.moderation_service.bulk_moderate(
            [CommentId(i) for i in request.comment_ids],
            request.action,
            actor_id=UserId(request.user_id),
            site_id=site.id,
        )

        succeeded = sum(1 for o in outcomes.values() if o == BulkOutcome.OK)
        return BulkModerateResponse(
            action=request.action,
            results={int(k): v for k, v in outcomes.items()},
            succeeded=succeeded,
            failed=len(outcomes) - succeeded,
        )
