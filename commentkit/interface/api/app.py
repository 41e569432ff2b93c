"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from commentkit.config import Settings
from commentkit.interface.api.routes import (
    auth,
    comments,
    health,
    likes,
    sites,
    superadmin,
    widget,
)
from commentkit.interface.error import register_exception_handlers
from commentkit.util.di.container import create_container, setup_di
from commentkit.util.observability import instrument_fastapi, instrument_httpx
from commentkit.widget import CSRF_HEADER


def cors_origins(settings: Settings) -> list[str]:
    """Origins allowed to call the API with credentials.

    Host pages never call the API directly; the widget iframe and the
    dashboard are both served from the frontend origin.
    """
    origins = [
        settings.api.frontend_url,
        "http://localhost:3000",  # Local development
        "http://localhost:5173",  # Vite default
    ]
    for origin in settings.cors_origins:
        if origin not in origins:
            origins.append(origin)
    return origins


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Args:
        container: DI container to use. Defaults to the production container;
            tests pass one built from mock providers.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    """
    settings = Settings()

    instrument_httpx()

    app_instance = FastAPI(
        title="CommentKit API",
        description="Backend for CommentKit - embeddable comments for any website",
        version=health.API_VERSION,
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins(settings),
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "Cache-Control",
            "X-Requested-With",
            CSRF_HEADER,
        ],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    register_exception_handlers(app_instance)

    setup_di(app_instance, container or create_container())

    app_instance.include_router(health.router)
    app_instance.include_router(auth.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(likes.router)
    app_instance.include_router(sites.router)
    app_instance.include_router(widget.router)
    app_instance.include_router(superadmin.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
app = create_app()
