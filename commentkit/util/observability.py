"""Logfire setup for the API process.

Services log through logfire directly:

    import logfire

    logfire.info("Comment created", comment_id=comment.id, status=status.value)

    with logfire.span("site_service.verify_site", site_id=str(site.id)):
        ...

Call configure_logfire() once at start-up, before the app is created, then
instrument the framework pieces that matter (FastAPI, SQLAlchemy, httpx).
"""

from typing import Any

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from commentkit.config import Settings

SERVICE_NAME = "commentkit-api"


def should_send(settings: Settings) -> bool:
    """Explicit setting wins, otherwise send only when a token is present."""
    if settings.observability.send_to_logfire is not None:
        return settings.observability.send_to_logfire
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the current environment.

    Without OBSERVABILITY__LOGFIRE_TOKEN everything stays on the console.
    """
    send_to_logfire = should_send(settings)

    config_kwargs: dict[str, Any] = {
        "service_name": SERVICE_NAME,
        "service_version": settings.git_sha,
        "environment": settings.environment,
        "send_to_logfire": send_to_logfire,
        "console": logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    }
    if settings.observability.logfire_token:
        config_kwargs["token"] = settings.observability.logfire_token

    logfire.configure(**config_kwargs)
    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request handled by the app.

    Headers are not captured: requests carry session cookies.
    """

    def _request_attributes(request, attributes):
        result = {**attributes}
        if hasattr(request, "method"):
            result["method"] = request.method
        if hasattr(request, "url"):
            result["path"] = request.url.path
        if getattr(request, "client", None):
            result["client_host"] = request.client.host
        return result

    logfire.instrument_fastapi(app, request_attributes_mapper=_request_attributes)


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL statements issued through the engine."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)


def instrument_httpx() -> None:
    """Trace outbound calls (Resend, domain verification)."""
    logfire.instrument_httpx()
