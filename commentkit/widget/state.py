"""Explicit widget state container.

State is immutable: handlers return a new WidgetState instead of mutating
the current one, and the renderer is driven by the returned effects.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .csrf import generate_csrf_token


class WidgetStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    POSTING = "posting"
    ERROR = "error"


class WidgetConfig(BaseModel):
    """Values the embed script passes to the iframe at creation time."""

    model_config = ConfigDict(frozen=True)

    api_base: str
    domain: str
    page_id: str
    page_title: str = ""
    page_url: str = ""
    # Origin of the embedding page; messages from anywhere else are dropped
    parent_origin: str

    @field_validator("parent_origin")
    @classmethod
    def validate_parent_origin(cls, v: str) -> str:
        """Require a concrete origin; wildcards defeat the origin check."""
        v = v.strip().rstrip("/")
        if v in ("", "*", "null") or "://" not in v:
            raise ValueError("parent_origin must be an exact origin such as https://example.com")
        return v


class WidgetUser(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    email: str
    display_name: str | None = None
    email_hash: str | None = None


class WidgetState(BaseModel):
    """Everything the widget renders from."""

    model_config = ConfigDict(frozen=True)

    config: WidgetConfig
    csrf_token: str = Field(default_factory=generate_csrf_token)
    status: WidgetStatus = WidgetStatus.IDLE
    user: WidgetUser | None = None
    # Page bootstrap payload: page metadata plus the comment tree
    page: dict[str, Any] | None = None
    error: str | None = None
    notice: str | None = None
    height: int = 0
    ready: bool = False

    @property
    def comments(self) -> list[dict[str, Any]]:
        if not self.page:
            return []
        return self.page.get("comments", [])

    def evolve(self, **changes: Any) -> "WidgetState":
        return self.model_copy(update=changes)
