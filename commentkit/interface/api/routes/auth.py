"""Authentication routes (magic-link sign-in and session cookie)."""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, Response
from pydantic import BaseModel, Field

from commentkit.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginResponse,
    LoginUseCase,
    UpdateProfileRequest,
    UpdateProfileUseCase,
    UserInfo,
    VerifyMagicLinkRequest,
    VerifyMagicLinkResponse,
    VerifyMagicLinkUseCase,
)
from commentkit.config import AuthSettings
from commentkit.domain.error import AuthenticationError, NotFoundError
from commentkit.domain.service import JWTService
from commentkit.interface.api.session import (
    clear_session_cookie,
    require_user_id,
    set_session_cookie,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/auth", tags=["authentication"], route_class=DishkaRoute)

NOT_AUTHENTICATED = "Not authenticated"


class LogoutResponse(BaseModel):
    message: str


class UpdateProfileAPIRequest(BaseModel):
    display_name: str | None = Field(default=None, min_length=1, max_length=100)


@router.post("/login", response_model=LoginResponse)
async def login(
    request: LoginRequest,
    login_use_case: FromDishka[LoginUseCase],
) -> LoginResponse:
    """Send a magic link to the given e-mail address."""
    logger.info("Magic link requested")
    return await login_use_case.execute(request)


@router.get("/verify", response_model=VerifyMagicLinkResponse)
async def verify(
    response: Response,
    verify_use_case: FromDishka[VerifyMagicLinkUseCase],
    auth_settings: FromDishka[AuthSettings],
    token: str | None = None,
) -> VerifyMagicLinkResponse:
    """Exchange a magic-link token for a session.

    The session token is returned in the body and set as the HttpOnly
    session cookie.
    """
    result = await verify_use_case.execute(VerifyMagicLinkRequest(token=token))
    set_session_cookie(response, result.token, auth_settings)
    logger.info(f"User {result.user.id} signed in")
    return result


@router.get("/me", response_model=UserInfo)
async def me(
    request: Request,
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    jwt_service: FromDishka[JWTService],
    auth_settings: FromDishka[AuthSettings],
) -> UserInfo:
    """Current user, 401 without a valid session."""
    user_id = require_user_id(request, jwt_service, auth_settings, NOT_AUTHENTICATED)
    try:
        return await get_current_user_use_case.execute(
            GetCurrentUserRequest(user_id=user_id)
        )
    except NotFoundError:
        # Session outlived its user
        raise AuthenticationError(NOT_AUTHENTICATED)


@router.patch("/profile", response_model=UserInfo)
async def update_profile(
    request: Request,
    body: UpdateProfileAPIRequest,
    update_profile_use_case: FromDishka[UpdateProfileUseCase],
    jwt_service: FromDishka[JWTService],
    auth_settings: FromDishka[AuthSettings],
) -> UserInfo:
    """Update the current user's display name."""
    user_id = require_user_id(request, jwt_service, auth_settings, NOT_AUTHENTICATED)
    return await update_profile_use_case.execute(
        UpdateProfileRequest(user_id=user_id, display_name=body.display_name)
    )


@router.post("/logout", response_model=LogoutResponse)
async def logout(
    response: Response,
    auth_settings: FromDishka[AuthSettings],
) -> LogoutResponse:
    """Clear the session cookie.

    Sessions are stateless JWTs, so logging out only drops the cookie.
    """
    clear_session_cookie(response, auth_settings)
    return LogoutResponse(message="Logged out successfully")
