"""Domain value objects for CommentKit.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import hashlib
import re
from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import Field, field_validator

from commentkit.domain.value.common import RootValueObject, ValueObject
from commentkit.domain.value.identifiers import UserId


class CommentStatus(str, Enum):
    """Moderation status of a comment."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    SPAM = "spam"


class ModerationAction(str, Enum):
    """Owner action applied to a comment."""

    APPROVE = "approve"
    REJECT = "reject"
    SPAM = "spam"

    @property
    def target_status(self) -> CommentStatus:
        """Status a comment ends up in after this action."""
        return _ACTION_TARGETS[self]


_ACTION_TARGETS = {
    ModerationAction.APPROVE: CommentStatus.APPROVED,
    ModerationAction.REJECT: CommentStatus.REJECTED,
    ModerationAction.SPAM: CommentStatus.SPAM,
}


class BulkOutcome(str, Enum):
    """Per-id result of a bulk moderation call."""

    OK = "ok"
    NOT_FOUND = "not_found"
    FORBIDDEN = "forbidden"


class LikeTarget(str, Enum):
    """Kind of entity that can be liked."""

    PAGE = "page"
    COMMENT = "comment"


class Email(RootValueObject[str]):
    """E-mail address, normalised to lower case."""

    @field_validator("root")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Trim, lower-case and check the address shape."""
        v = v.strip().lower()
        if len(v) > 255 or not re.match(r"^[^@\s]+@[^@\s]+\.[^@\s]+$", v):
            raise ValueError("Invalid email address")
        return v

    def gravatar_hash(self) -> str:
        """SHA-256 hex digest used for avatar lookup."""
        return hashlib.sha256(self.root.encode("utf-8")).hexdigest()

    @property
    def local_part(self) -> str:
        return self.root.split("@", 1)[0]


class PageSlug(RootValueObject[str]):
    """Identifier of a page within a site.

    The caller's page identifier (by default the page URL) is used verbatim.
    """

    @field_validator("root")
    @classmethod
    def validate_slug(cls, v: str) -> str:
        """Validate slug is not blank and within length limits."""
        v = v.strip()
        if len(v) < 1 or len(v) > 2048:
            raise ValueError("Page identifier must be 1-2048 characters")
        return v


class Domain(RootValueObject[str]):
    """Hostname a site is registered for, e.g. 'blog.example.com'."""

    @field_validator("root")
    @classmethod
    def validate_domain(cls, v: str) -> str:
        """Validate hostname format."""
        v = v.strip().lower()
        if not re.match(r"^[a-z0-9]([a-z0-9-]*[a-z0-9])?(\.[a-z0-9]([a-z0-9-]*[a-z0-9])?)*$", v):
            raise ValueError("Domain must be a bare hostname")
        if len(v) > 255:
            raise ValueError("Domain must be at most 255 characters")
        return v


class LikeSubject(RootValueObject[str]):
    """Who a like belongs to: 'user:<id>' or 'anon:<fingerprint>'."""

    @field_validator("root")
    @classmethod
    def validate_subject(cls, v: str) -> str:
        if not re.match(r"^(user:\d+|anon:[A-Za-z0-9_-]{8,128})$", v):
            raise ValueError("Like subject must be 'user:<id>' or 'anon:<fingerprint>'")
        return v

    @classmethod
    def for_user(cls, user_id: UserId) -> "LikeSubject":
        return cls(f"user:{user_id}")

    @classmethod
    def anonymous(cls, fingerprint: str) -> "LikeSubject":
        return cls(f"anon:{fingerprint}")


class UserAuthor(ValueObject):
    """Comment written by a registered user."""

    kind: Literal["user"] = "user"
    user_id: UserId
    display_name: str
    email_hash: str | None = None


class GuestAuthor(ValueObject):
    """Comment written by a guest. The plaintext e-mail is never kept."""

    kind: Literal["guest"] = "guest"
    name: str = Field(min_length=1)
    email_hash: str | None = None


Author = Annotated[Union[UserAuthor, GuestAuthor], Field(discriminator="kind")]
