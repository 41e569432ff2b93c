"""Interface layer error handling.

Every failure leaves the API as a JSON body {"error": "<message>"}:

    ValidationError, request validation  -> 400
    AuthenticationError                  -> 401
    NotAuthorizedError                   -> 403
    NotFoundError                        -> 404
    ConflictError                        -> 409
    EmailDeliveryError                   -> 500
    other AdapterError                   -> 502
    anything else                        -> 500
"""

import logging

import logfire
import pydantic
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from commentkit.adapter.error import AdapterError, EmailDeliveryError
from commentkit.domain.error import (
    AuthenticationError,
    ConflictError,
    DomainError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

DOMAIN_STATUS: dict[type[DomainError], int] = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    AuthenticationError: status.HTTP_401_UNAUTHORIZED,
    NotAuthorizedError: status.HTTP_403_FORBIDDEN,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ConflictError: status.HTTP_409_CONFLICT,
}


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def domain_error_message(exc: DomainError) -> str:
    """Client-facing message. Ownership failures never echo ids back."""
    if isinstance(exc, NotAuthorizedError):
        return "Forbidden"
    if isinstance(exc, NotFoundError):
        return f"{exc.resource} not found"
    return str(exc)


def validation_message(errors: list[dict]) -> str:
    """First validation problem as 'field: message'."""
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = [str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path")]
    message = str(first.get("msg", "Invalid value")).removeprefix("Value error, ")
    return f"{'.'.join(location)}: {message}" if location else message


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    status_code = next(
        (code for cls, code in DOMAIN_STATUS.items() if isinstance(exc, cls)),
        status.HTTP_400_BAD_REQUEST,
    )
    if status_code >= status.HTTP_403_FORBIDDEN:
        logfire.warn(
            "Request failed",
            path=request.url.path,
            status_code=status_code,
            error=str(exc),
        )
    return error_response(status_code, domain_error_message(exc))


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return error_response(status.HTTP_400_BAD_REQUEST, validation_message(exc.errors()))


async def handle_value_error(request: Request, exc: ValueError) -> JSONResponse:
    """Malformed values rejected by value objects (e.g. a bad domain)."""
    if isinstance(exc, pydantic.ValidationError):
        message = validation_message(exc.errors())
    else:
        message = str(exc)
    return error_response(status.HTTP_400_BAD_REQUEST, message)


async def handle_adapter_error(request: Request, exc: AdapterError) -> JSONResponse:
    logfire.error("Upstream service failed", path=request.url.path, error=str(exc))
    if isinstance(exc, EmailDeliveryError):
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Failed to send magic link email. Please try again.",
        )
    return error_response(status.HTTP_502_BAD_GATEWAY, "Upstream service error")


async def handle_http_exception(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error"
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the JSON error handlers on an application."""
    app.add_exception_handler(DomainError, handle_domain_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(ValueError, handle_value_error)
    app.add_exception_handler(AdapterError, handle_adapter_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(Exception, handle_unexpected_error)
