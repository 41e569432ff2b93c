"""Login use case (magic-link request)."""

from pydantic import BaseModel

from commentkit.domain.service import AuthService
from commentkit.domain.value import Email

LINK_SENT_MESSAGE = "Magic link sent! Check your email."


class LoginRequest(BaseModel):
    """Login request.

    The e-mail is validated by the Email value object; redirect_url is
    carried through the link so the dashboard can return the user to
    where they started (for example the page hosting the widget).
    """

    email: str
    redirect_url: str | None = None


class LoginResponse(BaseModel):
    message: str


class LoginUseCase:
    """Use case for sending a sign-in link by e-mail."""

    def __init__(self, auth_service: AuthService) -> None:
        """Initialize login use case.

        Args:
            auth_service: Authentication domain service
        """
        self.auth_service = auth_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Execute login flow.

        Steps:
        1. Normalise the e-mail address
        2. Store a single-use token and mail the link

        The response is the same whether or not an account exists for the
        address, so it cannot be used to probe for users.

        Raises:
            ValueError: If the e-mail address is malformed
            EmailDeliveryError: If the e-mail provider rejects the message
        """
        await self.auth_service.request_magic_link(
            Email(request.email), request.redirect_url
        )
        return LoginResponse(message=LINK_SENT_MESSAGE)
