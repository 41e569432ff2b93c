"""Site owner dashboard routes."""

import logging
from typing import Any

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, status
from pydantic import BaseModel, Field

from commentkit.application.usecase.site import (
    BulkModerateRequest,
    BulkModerateResponse,
    BulkModerateUseCase,
    CreateSiteRequest,
    CreateSiteResponse,
    CreateSiteUseCase,
    DeleteSiteRequest,
    DeleteSiteResponse,
    DeleteSiteUseCase,
    GetModerationLogRequest,
    GetModerationLogResponse,
    GetModerationLogUseCase,
    GetSiteActivityRequest,
    GetSiteActivityResponse,
    GetSiteActivityUseCase,
    GetSiteRequest,
    GetSiteStatsRequest,
    GetSiteStatsUseCase,
    GetSitesOverviewRequest,
    GetSitesOverviewResponse,
    GetSitesOverviewUseCase,
    GetSiteUseCase,
    ListSiteCommentsRequest,
    ListSiteCommentsResponse,
    ListSiteCommentsUseCase,
    ListSitePagesRequest,
    ListSitePagesResponse,
    ListSitePagesUseCase,
    ListSitesRequest,
    ListSitesResponse,
    ListSitesUseCase,
    RegenerateApiKeyRequest,
    RegenerateApiKeyResponse,
    RegenerateApiKeyUseCase,
    SiteDetailResponse,
    SiteStatsInfo,
    UpdateSiteRequest,
    UpdateSiteResponse,
    UpdateSiteUseCase,
    VerifySiteRequest,
    VerifySiteResponse,
    VerifySiteUseCase,
)
from commentkit.config import AuthSettings
from commentkit.domain.service import JWTService
from commentkit.domain.value import CommentStatus, ModerationAction
from commentkit.interface.api.session import parse_id, require_user_id

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/admin/sites", tags=["sites"], route_class=DishkaRoute)


class CreateSiteAPIRequest(BaseModel):
    name: str
    domain: str


class UpdateSiteAPIRequest(BaseModel):
    name: str | None = None
    domain: str | None = None
    settings: dict[str, Any] | None = None


class BulkModerateAPIRequest(BaseModel):
    """Apply one moderation action to many comments of the site."""

    comment_ids: list[int] = Field(default_factory=list)
    action: ModerationAction


@router.get("", response_model=ListSitesResponse)
async def list_sites(
    request: Request,
    list_sites_use_case: FromDishka[ListSitesUseCase],
    jwt_service: FromDishka[JWTService],
    auth_settings: FromDishka[AuthSettings],
) -> ListSitesResponse:
    """Sites owned by the caller. API keys are masked."""
    user_id = require_user_id(request, jwt_service, auth_settings)
    return await list_sites_use_case.execute(ListSitesRequest(user_id=user_id))


@router.post("", response_model=CreateSiteResponse, status_code=status.HTTP_201_CREATED)
async def create_site(
    request: Request,
    body: CreateSiteAPIRequest,
    create_site_use_case: FromDishka[CreateSiteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_settings: FromDishka[AuthSettings],
) -> CreateSiteResponse:
    """Register a site. The only response that reveals the API key besides
    regenerate-key."""
    user_id = require_user_id(request, jwt_service, auth_settings)
    site = await create_site_use_case.execute(
        CreateSiteRequest(user_id=user_id, name=body.name, domain=body.domain)
    )
    logger.info(f"User {user_id} created site {site.id}")
    return site


@router.get("/overview", response_model=GetSitesOverviewResponse)
async def sites_overview(
    request: Request,
    overview_use_case: FromDishka[GetSitesOverviewUseCase],
    jwt_service: FromDishka[JWTService],
    auth_settings: FromDishka[AuthSettings],
) -> GetSitesOverviewResponse:
    """Every owned site with its stats, plus totals across them."""
    user_id = require_user_id(request, jwt_service, auth_settings)
    return await overview_use_case.execute(GetSitesOverviewRequest(user_id=user_id))


@router.get("/{site_id}", response_model=SiteDetailResponse)
async def get_site(
    site_id: str,
    request: Request,
    get_site_use_case: FromDishka[GetSiteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_settings: FromDishka[AuthSettings],
    include_comments: bool = True,
    status: CommentStatus | None = None,
    limit: int = 50,
    offset: int = 0,
) -> SiteDetailResponse:
    user_id = require_user_id(request, jwt_service, auth_settings)
    return await get_site_use_case.execute(
        GetSiteRequest(
            site_id=parse_id(site_id, "site_id"),
            user_id=user_id,
            include_comments=include_comments,
            comment_status=status,
            comment_limit=limit,
            comment_offset=offset,
        )
    )


@router.patch("/{site_id}", response_model=UpdateSiteResponse)
async def update_site(
    site_id: str,
    request: Request,
    body: UpdateSiteAPIRequest,
    update_site_use_case: FromDishka[UpdateSiteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_settings: FromDishka[AuthSettings],
) -> UpdateSiteResponse:
    """Update name, domain or settings. A new domain must be verified again."""
    user_id = require_user_id(request, jwt_service, auth_settings)
    return await update_site_use_case.execute(
        UpdateSiteRequest(
            site_id=parse_id(site_id, "site_id"),
            user_id=user_id,
            name=body.name,
            domain=body.domain,
            settings=body.settings,
        )
    )


@router.delete("/{site_id}", response_model=DeleteSiteResponse)
async def delete_site(
    site_id: str,
    request: Request,
    delete_site_use_case: FromDishka[DeleteSiteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_settings: FromDishka[AuthSettings],
) -> DeleteSiteResponse:
    user_id = require_user_id(request, jwt_service, auth_settings)
    return await delete_site_use_case.execute(
        DeleteSiteRequest(site_id=parse_id(site_id, "site_id"), user_id=user_id)
    )


@router.post("/{site_id}/regenerate-key", response_model=RegenerateApiKeyResponse)
async def regenerate_api_key(
    site_id: str,
    request: Request,
    regenerate_use_case: FromDishka[RegenerateApiKeyUseCase],
    jwt_service: FromDishka[JWTService],
    auth_settings: FromDishka[AuthSettings],
) -> RegenerateApiKeyResponse:
    user_id = require_user_id(request, jwt_service, auth_settings)
    return await regenerate_use_case.execute(
        RegenerateApiKeyRequest(site_id=parse_id(site_id, "site_id"), user_id=user_id)
    )


@router.get("/{site_id}/stats", response_model=SiteStatsInfo)
async def site_stats(
    site_id: str,
    request: Request,
    get_site_stats_use_case: FromDishka[GetSiteStatsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_settings: FromDishka[AuthSettings],
) -> SiteStatsInfo:
    user_id = require_user_id(request, jwt_service, auth_settings)
    return await get_site_stats_use_case.execute(
        GetSiteStatsRequest(site_id=parse_id(site_id, "site_id"), user_id=user_id)
    )


@router.get("/{site_id}/pages", response_model=ListSitePagesResponse)
async def site_pages(
    site_id: str,
    request: Request,
    list_pages_use_case: FromDishka[ListSitePagesUseCase],
    jwt_service: FromDishka[JWTService],
    auth_settings: FromDishka[AuthSettings],
    limit: int = 50,
    offset: int = 0,
) -> ListSitePagesResponse:
    """Pages of the site, most recently commented first."""
    user_id = require_user_id(request, jwt_service, auth_settings)
    return await list_pages_use_case.execute(
        ListSitePagesRequest(
            site_id=parse_id(site_id, "site_id"),
            user_id=user_id,
            limit=limit,
            offset=offset,
        )
    )


@router.get("/{site_id}/activity", response_model=GetSiteActivityResponse)
async def site_activity(
    site_id: str,
    request: Request,
    activity_use_case: FromDishka[GetSiteActivityUseCase],
    jwt_service: FromDishka[JWTService],
    auth_settings: FromDishka[AuthSettings],
    limit: int = 20,
) -> GetSiteActivityResponse:
    """Recent comments and moderation actions, newest first."""
    user_id = require_user_id(request, jwt_service, auth_settings)
    return await activity_use_case.execute(
        GetSiteActivityRequest(site_id=parse_id(site_id, "site_id"), user_id=user_id, limit=limit)
    )


@router.get("/{site_id}/comments", response_model=ListSiteCommentsResponse)
async def site_comments(
    site_id: str,
    request: Request,
    list_comments_use_case: FromDishka[ListSiteCommentsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_settings: FromDishka[AuthSettings],
    status: CommentStatus | None = None,
    limit: int = 50,
    offset: int = 0,
) -> ListSiteCommentsResponse:
    """Moderation queue. Without `status` every comment is listed."""
    user_id = require_user_id(request, jwt_service, auth_settings)
    return await list_comments_use_case.execute(
        ListSiteCommentsRequest(
            site_id=parse_id(site_id, "site_id"),
            user_id=user_id,
            status=status,
            limit=limit,
            offset=offset,
        )
    )


@router.post("/{site_id}/comments/bulk", response_model=BulkModerateResponse)
async def bulk_moderate(
    site_id: str,
    request: Request,
    body: BulkModerateAPIRequest,
    bulk_moderate_use_case: FromDishka[BulkModerateUseCase],
    jwt_service: FromDishka[JWTService],
    auth_settings: FromDishka[AuthSettings],
) -> BulkModerateResponse:
    """Moderate many comments at once. Each id gets its own outcome."""
    user_id = require_user_id(request, jwt_service, auth_settings)
    return await bulk_moderate_use_case.execute(
        BulkModerateRequest(
            site_id=parse_id(site_id, "site_id"),
            user_id=user_id,
            comment_ids=body.comment_ids,
            action=body.action,
        )
    )


@router.get("/{site_id}/moderation-log", response_model=GetModerationLogResponse)
async def moderation_log(
    site_id: str,
    request: Request,
    moderation_log_use_case: FromDishka[GetModerationLogUseCase],
    jwt_service: FromDishka[JWTService],
    auth_settings: FromDishka[AuthSettings],
    limit: int = 50,
    offset: int = 0,
) -> GetModerationLogResponse:
    user_id = require_user_id(request, jwt_service, auth_settings)
    return await moderation_log_use_case.execute(
        GetModerationLogRequest(
            site_id=parse_id(site_id, "site_id"),
            user_id=user_id,
            limit=limit,
            offset=offset,
        )
    )


@router.post("/{site_id}/verify", response_model=VerifySiteResponse)
async def verify_site(
    site_id: str,
    request: Request,
    verify_site_use_case: FromDishka[VerifySiteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_settings: FromDishka[AuthSettings],
) -> VerifySiteResponse:
    """Check the domain's well-known file and mark the site verified.

    A failed check answers verified=false with the URL and token to publish.
    """
    user_id = require_user_id(request, jwt_service, auth_settings)
    return await verify_site_use_case.execute(
        VerifySiteRequest(site_id=parse_id(site_id, "site_id"), user_id=user_id)
    )
