"""Authentication use cases."""

from .get_current_user import GetCurrentUserRequest, GetCurrentUserUseCase, UserInfo
from .login import LoginRequest, LoginResponse, LoginUseCase
from .update_profile import UpdateProfileRequest, UpdateProfileUseCase
from .verify_magic_link import (
    VerifyMagicLinkRequest,
    VerifyMagicLinkResponse,
    VerifyMagicLinkUseCase,
)

__all__ = [
    "GetCurrentUserRequest",
    "GetCurrentUserUseCase",
    "LoginRequest",
    "LoginResponse",
    "LoginUseCase",
    "UpdateProfileRequest",
    "UpdateProfileUseCase",
    "UserInfo",
    "VerifyMagicLinkRequest",
    "VerifyMagicLinkResponse",
    "VerifyMagicLinkUseCase",
]
