"""Site management use cases (owner dashboard)."""

from .bulk_moderate import BulkModerateRequest, BulkModerateResponse, BulkModerateUseCase
from .create_site import CreateSiteRequest, CreateSiteResponse, CreateSiteUseCase
from .delete_site import DeleteSiteRequest, DeleteSiteResponse, DeleteSiteUseCase
from .get_moderation_log import (
    GetModerationLogRequest,
    GetModerationLogResponse,
    GetModerationLogUseCase,
)
from .get_site import GetSiteRequest, GetSiteUseCase, SiteDetailResponse
from .get_site_activity import (
    GetSiteActivityRequest,
    GetSiteActivityResponse,
    GetSiteActivityUseCase,
)
from .get_site_stats import GetSiteStatsRequest, GetSiteStatsUseCase
from .get_sites_overview import (
    GetSitesOverviewRequest,
    GetSitesOverviewResponse,
    GetSitesOverviewUseCase,
)
from .list_site_comments import (
    ListSiteCommentsRequest,
    ListSiteCommentsResponse,
    ListSiteCommentsUseCase,
)
from .list_site_pages import (
    ListSitePagesRequest,
    ListSitePagesResponse,
    ListSitePagesUseCase,
)
from .list_sites import ListSitesRequest, ListSitesResponse, ListSitesUseCase, SiteStatsInfo
from .regenerate_api_key import (
    RegenerateApiKeyRequest,
    RegenerateApiKeyResponse,
    RegenerateApiKeyUseCase,
)
from .update_site import UpdateSiteRequest, UpdateSiteResponse, UpdateSiteUseCase
from .verify_site import VerifySiteRequest, VerifySiteResponse, VerifySiteUseCase

__all__ = [
    "BulkModerateRequest",
    "BulkModerateResponse",
    "BulkModerateUseCase",
    "CreateSiteRequest",
    "CreateSiteResponse",
    "CreateSiteUseCase",
    "DeleteSiteRequest",
    "DeleteSiteResponse",
    "DeleteSiteUseCase",
    "GetModerationLogRequest",
    "GetModerationLogResponse",
    "GetModerationLogUseCase",
    "GetSiteActivityRequest",
    "GetSiteActivityResponse",
    "GetSiteActivityUseCase",
    "GetSiteRequest",
    "GetSiteStatsRequest",
    "GetSiteStatsUseCase",
    "GetSiteUseCase",
    "GetSitesOverviewRequest",
    "GetSitesOverviewResponse",
    "GetSitesOverviewUseCase",
    "ListSiteCommentsRequest",
    "ListSiteCommentsResponse",
    "ListSiteCommentsUseCase",
    "ListSitePagesRequest",
    "ListSitePagesResponse",
    "ListSitePagesUseCase",
    "ListSitesRequest",
    "ListSitesResponse",
    "ListSitesUseCase",
    "RegenerateApiKeyRequest",
    "RegenerateApiKeyResponse",
    "RegenerateApiKeyUseCase",
    "SiteDetailResponse",
    "SiteStatsInfo",
    "UpdateSiteRequest",
    "UpdateSiteResponse",
    "UpdateSiteUseCase",
    "VerifySiteRequest",
    "VerifySiteResponse",
    "VerifySiteUseCase",
]
