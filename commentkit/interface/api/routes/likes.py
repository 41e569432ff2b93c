"""Like routes for pages and comments.

Both targets expose the same four endpoints under
/api/v1/{pages|comments}/{id}/likes. Reading is open to anonymous callers,
changing a like needs a session.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request

from commentkit.application.usecase.like import (
    GetLikesRequest,
    GetLikesUseCase,
    LikesResponse,
    SetLikeRequest,
    SetLikeUseCase,
    ToggleLikeRequest,
    ToggleLikeResponse,
    ToggleLikeUseCase,
)
from commentkit.config import AuthSettings
from commentkit.domain.service import JWTService
from commentkit.domain.value import LikeTarget
from commentkit.interface.api.session import optional_user_id, parse_id, require_user_id

router = APIRouter(prefix="/api/v1", tags=["likes"], route_class=DishkaRoute)


def _add_like_routes(collection: str, kind: LikeTarget, id_name: str) -> None:
    path = f"/{collection}/{{target_id}}/likes"

    @router.get(path, response_model=LikesResponse, name=f"get_{kind.value}_likes")
    async def get_likes(
        target_id: str,
        request: Request,
        get_likes_use_case: FromDishka[GetLikesUseCase],
        jwt_service: FromDishka[JWTService],
        auth_settings: FromDishka[AuthSettings],
    ) -> LikesResponse:
        """Like total and whether the caller has liked the target."""
        return await get_likes_use_case.execute(
            GetLikesRequest(
                target_kind=kind,
                target_id=parse_id(target_id, id_name),
                user_id=optional_user_id(request, jwt_service, auth_settings),
            )
        )

    @router.post(path, response_model=LikesResponse, name=f"like_{kind.value}")
    async def like(
        target_id: str,
        request: Request,
        set_like_use_case: FromDishka[SetLikeUseCase],
        jwt_service: FromDishka[JWTService],
        auth_settings: FromDishka[AuthSettings],
    ) -> LikesResponse:
        """Like the target. Repeating the call keeps a single like."""
        parsed_id = parse_id(target_id, id_name)
        user_id = require_user_id(request, jwt_service, auth_settings)
        return await set_like_use_case.execute(
            SetLikeRequest(target_kind=kind, target_id=parsed_id, user_id=user_id, liked=True)
        )

    @router.delete(path, response_model=LikesResponse, name=f"unlike_{kind.value}")
    async def unlike(
        target_id: str,
        request: Request,
        set_like_use_case: FromDishka[SetLikeUseCase],
        jwt_service: FromDishka[JWTService],
        auth_settings: FromDishka[AuthSettings],
    ) -> LikesResponse:
        """Remove the caller's like, if any."""
        parsed_id = parse_id(target_id, id_name)
        user_id = require_user_id(request, jwt_service, auth_settings)
        return await set_like_use_case.execute(
            SetLikeRequest(target_kind=kind, target_id=parsed_id, user_id=user_id, liked=False)
        )

    @router.post(
        f"{path}/toggle",
        response_model=ToggleLikeResponse,
        name=f"toggle_{kind.value}_like",
    )
    async def toggle_like(
        target_id: str,
        request: Request,
        toggle_like_use_case: FromDishka[ToggleLikeUseCase],
        jwt_service: FromDishka[JWTService],
        auth_settings: FromDishka[AuthSettings],
    ) -> ToggleLikeResponse:
        """Flip the caller's like."""
        parsed_id = parse_id(target_id, id_name)
        user_id = require_user_id(request, jwt_service, auth_settings)
        return await toggle_like_use_case.execute(
            ToggleLikeRequest(target_kind=kind, target_id=parsed_id, user_id=user_id)
        )


_add_like_routes("pages", LikeTarget.PAGE, "page_id")
_add_like_routes("comments", LikeTarget.COMMENT, "comment_id")
