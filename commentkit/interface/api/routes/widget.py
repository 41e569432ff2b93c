"""Widget bootstrap routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from commentkit.application.usecase.widget import (
    VerifyWidgetSiteRequest,
    VerifyWidgetSiteResponse,
    VerifyWidgetSiteUseCase,
)
from commentkit.domain.error import ValidationError

router = APIRouter(prefix="/api/v1/widget", tags=["widget"], route_class=DishkaRoute)


@router.get("/verify-site", response_model=VerifyWidgetSiteResponse)
async def verify_site(
    verify_use_case: FromDishka[VerifyWidgetSiteUseCase],
    domain: str | None = None,
) -> VerifyWidgetSiteResponse:
    """Tell the widget whether it may render on the given domain.

    Unknown or unverified domains are reported with verified=false and a
    message, not an error status.
    """
    if not domain:
        raise ValidationError("Domain parameter is required")
    return await verify_use_case.execute(VerifyWidgetSiteRequest(domain=domain))
