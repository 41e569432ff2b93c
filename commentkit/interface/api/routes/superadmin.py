"""Platform-wide routes for superadmins."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request

from commentkit.application.usecase.superadmin import (
    GetGlobalStatsRequest,
    GetGlobalStatsResponse,
    GetGlobalStatsUseCase,
)
from commentkit.config import AuthSettings
from commentkit.domain.service import JWTService
from commentkit.interface.api.session import require_user_id

router = APIRouter(prefix="/api/v1/superadmin", tags=["superadmin"], route_class=DishkaRoute)


@router.get("/stats", response_model=GetGlobalStatsResponse)
async def global_stats(
    request: Request,
    get_global_stats_use_case: FromDishka[GetGlobalStatsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_settings: FromDishka[AuthSettings],
) -> GetGlobalStatsResponse:
    user_id = require_user_id(request, jwt_service, auth_settings)
    return await get_global_stats_use_case.execute(GetGlobalStatsRequest(user_id=user_id))
