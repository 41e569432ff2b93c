"""Pure handlers for widget bridge actions.

Each handler takes the current state and a message and returns the next
state plus the effects to run. Handlers never perform I/O themselves.
"""

from typing import Callable

from pydantic import ValidationError

from .message import ApiRequest, BridgeMessage, Effect, PostMessage, Render
from .state import WidgetState, WidgetStatus, WidgetUser

Result = tuple[WidgetState, list[Effect]]
Handler = Callable[[WidgetState, BridgeMessage], Result]

PENDING_NOTICE = "Your comment has been submitted and is awaiting moderation."


def to_parent(state: WidgetState, action: str, **fields) -> PostMessage:
    return PostMessage(
        target_origin=state.config.parent_origin,
        message=BridgeMessage(action=action, **fields),
    )


def fail(state: WidgetState, message: str) -> Result:
    """Move to the error state and tell the host page."""
    new_state = state.evolve(status=WidgetStatus.ERROR, error=message)
    return new_state, [Render(), to_parent(new_state, "error", message=message)]


def _text(message: BridgeMessage, name: str) -> str | None:
    """Read a string field; None when missing, blank or not a string."""
    value = message.field(name)
    if not isinstance(value, str) or not value.strip():
        return None
    return value.strip()


def _api(state: WidgetState, method, path: str, **kwargs) -> ApiRequest:
    api_request = ApiRequest(
        method=method, url=f"{state.config.api_base.rstrip('/')}{path}", **kwargs
    )
    if api_request.mutating:
        return api_request.model_copy(update={"csrf_token": state.csrf_token})
    return api_request


def load_request(state: WidgetState) -> ApiRequest:
    config = state.config
    return _api(
        state,
        "GET",
        "/api/v1/sites/comments",
        params={
            "domain": config.domain,
            "pageId": config.page_id,
            "title": config.page_title,
            "url": config.page_url,
        },
        reply_action="commentsLoaded",
    )


def handle_ready(state: WidgetState, message: BridgeMessage) -> Result:
    if state.ready:
        return state, []
    new_state = state.evolve(ready=True, status=WidgetStatus.LOADING)
    return new_state, [to_parent(new_state, "ready"), load_request(new_state)]


def handle_load_comments(state: WidgetState, message: BridgeMessage) -> Result:
    new_state = state.evolve(status=WidgetStatus.LOADING, error=None)
    return new_state, [Render(), load_request(new_state)]


def handle_comments_loaded(state: WidgetState, message: BridgeMessage) -> Result:
    error = message.field("error")
    if error:
        return fail(state, str(error))
    page = message.field("page")
    if not isinstance(page, dict):
        return fail(state, "Failed to load comments")
    return state.evolve(status=WidgetStatus.READY, page=page, error=None), [Render()]


def handle_post_comment(state: WidgetState, message: BridgeMessage) -> Result:
    content = _text(message, "content")
    if content is None:
        return fail(state, "Comment cannot be empty")

    body = {
        "domain": state.config.domain,
        "pageId": state.config.page_id,
        "content": content,
        "page_title": state.config.page_title,
        "page_url": state.config.page_url,
    }
    parent_id = message.field("parent_id")
    if parent_id is not None:
        if not isinstance(parent_id, int) or isinstance(parent_id, bool):
            return fail(state, "Invalid parent comment")
        body["parent_id"] = parent_id
    if state.user is None:
        name = _text(message, "author_name")
        if name is None:
            return fail(state, "Name is required")
        body["author_name"] = name
        email = _text(message, "author_email")
        if email:
            body["author_email"] = email

    new_state = state.evolve(status=WidgetStatus.POSTING, error=None, notice=None)
    return new_state, [
        Render(),
        _api(
            new_state,
            "POST",
            "/api/v1/sites/comments",
            body=body,
            reply_action="commentPosted",
        ),
    ]


def handle_comment_posted(state: WidgetState, message: BridgeMessage) -> Result:
    error = message.field("error")
    if error:
        return fail(state, str(error))
    comment = message.field("comment") or {}
    if not isinstance(comment, dict):
        return fail(state, "Failed to post comment")
    notice = PENDING_NOTICE if comment.get("status") == "pending" else None
    new_state = state.evolve(status=WidgetStatus.LOADING, notice=notice)
    return new_state, [Render(), load_request(new_state)]


def handle_login(state: WidgetState, message: BridgeMessage) -> Result:
    email = _text(message, "email")
    if email is None:
        return fail(state, "Email is required")
    return state, [
        _api(
            state,
            "POST",
            "/api/v1/auth/login",
            body={"email": email, "redirect_url": state.config.page_url or None},
            reply_action="loginEmailSent",
        )
    ]


def handle_login_email_sent(state: WidgetState, message: BridgeMessage) -> Result:
    error = message.field("error")
    if error:
        return fail(state, str(error))
    notice = _text(message, "message") or "Magic link sent! Check your email."
    return state.evolve(notice=notice, error=None), [Render()]


def handle_auth_state_changed(state: WidgetState, message: BridgeMessage) -> Result:
    raw_user = message.field("user")
    try:
        user = WidgetUser.model_validate(raw_user) if raw_user else None
    except ValidationError:
        return fail(state, "Invalid user")
    if user == state.user:
        return state, []
    new_state = state.evolve(user=user, status=WidgetStatus.LOADING)
    # Reload so user_liked flags reflect the new identity
    return new_state, [Render(), load_request(new_state)]


def handle_logout(state: WidgetState, message: BridgeMessage) -> Result:
    new_state = state.evolve(user=None, notice=None)
    return new_state, [
        _api(new_state, "POST", "/api/v1/auth/logout", reply_action="authStateChanged"),
        Render(),
    ]


def handle_error(state: WidgetState, message: BridgeMessage) -> Result:
    return fail(state, str(message.field("message") or "Something went wrong"))


def handle_resize(state: WidgetState, message: BridgeMessage) -> Result:
    height = message.field("height")
    if not isinstance(height, int) or height < 0 or height == state.height:
        return state, []
    new_state = state.evolve(height=height)
    return new_state, [to_parent(new_state, "resize", height=height)]


DEFAULT_HANDLERS: dict[str, Handler] = {
    "ready": handle_ready,
    "loadComments": handle_load_comments,
    "commentsLoaded": handle_comments_loaded,
    "postComment": handle_post_comment,
    "commentPosted": handle_comment_posted,
    "login": handle_login,
    "loginEmailSent": handle_login_email_sent,
    "authStateChanged": handle_auth_state_changed,
    "logout": handle_logout,
    "error": handle_error,
    "resize": handle_resize,
}
