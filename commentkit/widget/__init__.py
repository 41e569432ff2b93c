"""Widget bridge: the message contract between host page, widget frame and API."""

from .csrf import CSRF_HEADER, generate_csrf_token
from .dispatcher import MessageDispatcher, accepts_origin
from .message import ApiRequest, BridgeMessage, Effect, PostMessage, Render
from .state import WidgetConfig, WidgetState, WidgetStatus, WidgetUser

__all__ = [
    "ApiRequest",
    "BridgeMessage",
    "CSRF_HEADER",
    "Effect",
    "MessageDispatcher",
    "PostMessage",
    "Render",
    "WidgetConfig",
    "WidgetState",
    "WidgetStatus",
    "WidgetUser",
    "accepts_origin",
    "generate_csrf_token",
]
