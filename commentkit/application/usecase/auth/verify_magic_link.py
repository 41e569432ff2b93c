"""Verify magic link use case."""

from pydantic import BaseModel

from commentkit.domain.error import ValidationError
from commentkit.domain.service import AuthService, JWTService

from .get_current_user import UserInfo


class VerifyMagicLinkRequest(BaseModel):
    token: str | None = None


class VerifyMagicLinkResponse(BaseModel):
    """Session token plus the signed-in user.

    The route also sets the token as the session cookie.
    """

    token: str
    user: UserInfo


class VerifyMagicLinkUseCase:
    """Use case for exchanging a magic-link token for a session."""

    def __init__(self, auth_service: AuthService, jwt_service: JWTService) -> None:
        self.auth_service = auth_service
        self.jwt_service = jwt_service

    async def execute(self, request: VerifyMagicLinkRequest) -> VerifyMagicLinkResponse:
        """Execute verification flow.

        Steps:
        1. Consume the single-use token (first sign-in creates the user)
        2. Issue a session JWT

        Raises:
            ValidationError: If the token is missing, unknown, used or expired
        """
        if not request.token:
            raise ValidationError("Missing token")

        user = await self.auth_service.verify_magic_link(request.token)
        token = self.jwt_service.create_token(user.id, user.email.root)
        return VerifyMagicLinkResponse(token=token, user=UserInfo.from_user(user))
