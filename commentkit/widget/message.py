"""Bridge messages and the effects handlers emit."""

from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict

ACTIONS = (
    "loadComments",
    "commentsLoaded",
    "postComment",
    "commentPosted",
    "login",
    "loginEmailSent",
    "authStateChanged",
    "logout",
    "error",
    "resize",
    "ready",
)


class BridgeMessage(BaseModel):
    """Wire shape: {"type": "commentkit", "action": <name>, ...fields}."""

    model_config = ConfigDict(frozen=True, extra="allow")

    type: Literal["commentkit"] = "commentkit"
    action: str

    def field(self, name: str, default: Any = None) -> Any:
        """Read an action-specific field."""
        return (self.model_extra or {}).get(name, default)

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump()


class PostMessage(BaseModel):
    """Send a message to another frame with an explicit target origin."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["post_message"] = "post_message"
    target_origin: str
    message: BridgeMessage


class ApiRequest(BaseModel):
    """Call the backend; the result is dispatched back as `reply_action`."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["api_request"] = "api_request"
    method: Literal["GET", "POST", "PATCH", "DELETE"]
    url: str
    params: dict[str, str] = {}
    body: dict[str, Any] | None = None
    csrf_token: str | None = None
    reply_action: str | None = None

    @property
    def mutating(self) -> bool:
        return self.method != "GET"


class Render(BaseModel):
    """Re-render the widget from the new state."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["render"] = "render"


Effect = Union[PostMessage, ApiRequest, Render]
