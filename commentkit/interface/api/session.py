"""Session cookie handling shared by the routers.

The session is a JWT carried in the `ck_auth` cookie (HttpOnly). A Bearer
Authorization header is accepted as well for API clients.
"""

from fastapi import Request, Response

from commentkit.config import AuthSettings
from commentkit.domain.error import AuthenticationError, ValidationError
from commentkit.domain.service import JWTService
from commentkit.domain.value import UserId


def session_token(request: Request, auth_settings: AuthSettings) -> str | None:
    """Session token from the cookie, falling back to a Bearer header."""
    token = request.cookies.get(auth_settings.cookie_name)
    if token:
        return token
    header = request.headers.get("authorization", "")
    if header.startswith("Bearer "):
        return header[len("Bearer ") :] or None
    return None


def optional_user_id(
    request: Request, jwt_service: JWTService, auth_settings: AuthSettings
) -> UserId | None:
    """User id of a valid session, None for anonymous callers."""
    return jwt_service.get_user_id_from_token(session_token(request, auth_settings))


def require_user_id(
    request: Request,
    jwt_service: JWTService,
    auth_settings: AuthSettings,
    message: str = "Authentication required",
) -> UserId:
    """User id of a valid session.

    Raises:
        AuthenticationError: If there is no valid session
    """
    user_id = optional_user_id(request, jwt_service, auth_settings)
    if user_id is None:
        raise AuthenticationError(message)
    return user_id


def set_session_cookie(response: Response, token: str, auth_settings: AuthSettings) -> None:
    """Set the session cookie.

    Over HTTPS the cookie is SameSite=None so the widget iframe on a
    customer's domain can send it; plain-HTTP development uses Lax.
    """
    response.set_cookie(
        key=auth_settings.cookie_name,
        value=token,
        httponly=True,
        secure=auth_settings.cookie_secure,
        samesite="none" if auth_settings.cookie_secure else "lax",
        path="/",
        max_age=auth_settings.session_days * 24 * 60 * 60,
    )


def clear_session_cookie(response: Response, auth_settings: AuthSettings) -> None:
    response.delete_cookie(
        key=auth_settings.cookie_name,
        path="/",
        secure=auth_settings.cookie_secure,
        httponly=True,
        samesite="none" if auth_settings.cookie_secure else "lax",
    )


def parse_id(value: str, name: str) -> int:
    """Parse an integer path parameter.

    Raises:
        ValidationError: "Invalid <name>" if the value is not a positive integer
    """
    try:
        parsed = int(value)
    except ValueError:
        raise ValidationError(f"Invalid {name}")
    if parsed < 1:
        raise ValidationError(f"Invalid {name}")
    return parsed
