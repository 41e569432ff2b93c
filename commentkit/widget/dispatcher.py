"""Dispatch table for widget bridge messages."""

import logging
from typing import Any, Mapping

from pydantic import ValidationError

from .handlers import DEFAULT_HANDLERS, Handler, Result, fail
from .message import BridgeMessage
from .state import WidgetState

logger = logging.getLogger(__name__)


def accepts_origin(origin: str | None, expected_origin: str) -> bool:
    """Exact origin match; no wildcards, no prefix matching."""
    return origin is not None and origin.rstrip("/") == expected_origin.rstrip("/")


class MessageDispatcher:
    """Routes bridge messages to handlers by action name."""

    def __init__(self, handlers: Mapping[str, Handler] | None = None) -> None:
        self.handlers: dict[str, Handler] = dict(
            DEFAULT_HANDLERS if handlers is None else handlers
        )

    def register(self, action: str, handler: Handler) -> None:
        self.handlers[action] = handler

    def dispatch(self, state: WidgetState, message: BridgeMessage) -> Result:
        """Run the handler for a trusted message (UI events, API replies)."""
        handler = self.handlers.get(message.action)
        if handler is None:
            logger.warning(f"Unknown widget action: {message.action}")
            return fail(state, f"Unknown action: {message.action}")
        return handler(state, message)

    def receive(self, state: WidgetState, origin: str | None, data: Any) -> Result:
        """Handle a cross-frame message from the host page.

        Messages from any origin other than the configured parent origin,
        or not shaped as commentkit bridge messages, are dropped.
        """
        if not accepts_origin(origin, state.config.parent_origin):
            logger.debug(f"Dropped widget message from origin {origin!r}")
            return state, []

        try:
            message = BridgeMessage.model_validate(data)
        except ValidationError:
            logger.debug("Dropped malformed widget message")
            return state, []

        return self.dispatch(state, message)
