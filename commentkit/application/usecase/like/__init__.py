"""Like use cases."""

from .get_likes import GetLikesRequest, GetLikesUseCase, LikesResponse
from .set_like import SetLikeRequest, SetLikeUseCase
from .toggle_like import ToggleLikeRequest, ToggleLikeResponse, ToggleLikeUseCase

__all__ = [
    "GetLikesRequest",
    "GetLikesUseCase",
    "LikesResponse",
    "SetLikeRequest",
    "SetLikeUseCase",
    "ToggleLikeRequest",
    "ToggleLikeResponse",
    "ToggleLikeUseCase",
]
