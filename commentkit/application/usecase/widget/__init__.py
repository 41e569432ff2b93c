"""Widget use cases."""

from .verify_widget_site import (
    VerifyWidgetSiteRequest,
    VerifyWidgetSiteResponse,
    VerifyWidgetSiteUseCase,
)

__all__ = [
    "VerifyWidgetSiteRequest",
    "VerifyWidgetSiteResponse",
    "VerifyWidgetSiteUseCase",
]
