"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict

from commentkit.domain.model import (
    Comment,
    Like,
    MagicLink,
    ModerationLogEntry,
    Page,
    Site,
    User,
)
from commentkit.domain.value import (
    CommentId,
    CommentStatus,
    Domain,
    Email,
    GuestAuthor,
    LikeId,
    LikeSubject,
    LikeTarget,
    MagicLinkId,
    ModerationLogId,
    PageId,
    PageSlug,
    SiteId,
    UserAuthor,
    UserId,
)


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model."""
    return User(
        id=UserId(row["id"]),
        email=Email(row["email"]),
        display_name=row.get("display_name"),
        is_superadmin=row["is_superadmin"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict (without id)."""
    return {
        "email": user.email.root,
        "display_name": user.display_name,
        "is_superadmin": user.is_superadmin,
        "created_at": user.created_at,
        "updated_at": user.updated_at,
    }


def row_to_magic_link(row: Dict[str, Any]) -> MagicLink:
    """Convert database row to MagicLink domain model."""
    return MagicLink(
        id=MagicLinkId(row["id"]),
        email=Email(row["email"]),
        token=row["token"],
        expires_at=row["expires_at"],
        used=row["used"],
        created_at=row["created_at"],
    )


def magic_link_to_dict(link: MagicLink) -> Dict[str, Any]:
    return {
        "email": link.email.root,
        "token": link.token,
        "expires_at": link.expires_at,
        "used": link.used,
        "created_at": link.created_at,
    }


def row_to_site(row: Dict[str, Any]) -> Site:
    """Convert database row to Site domain model."""
    return Site(
        id=SiteId(row["id"]),
        name=row["name"],
        domain=Domain(row["domain"]),
        api_key=row["api_key"],
        owner_id=UserId(row["owner_id"]),
        settings=row.get("settings") or {},
        verified=row["verified"],
        verified_at=row.get("verified_at"),
        verification_token=row["verification_token"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def site_to_dict(site: Site) -> Dict[str, Any]:
    """Convert Site domain model to database dict (without id)."""
    return {
        "name": site.name,
        "domain": site.domain.root,
        "api_key": site.api_key,
        "owner_id": site.owner_id,
        "settings": site.settings,
        "verified": site.verified,
        "verified_at": site.verified_at,
        "verification_token": site.verification_token,
        "created_at": site.created_at,
        "updated_at": site.updated_at,
    }


def row_to_page(row: Dict[str, Any]) -> Page:
    """Convert database row to Page domain model."""
    return Page(
        id=PageId(row["id"]),
        site_id=SiteId(row["site_id"]),
        slug=PageSlug(row["slug"]),
        title=row.get("title"),
        url=row.get("url"),
        created_at=row["created_at"],
    )


def page_to_dict(page: Page) -> Dict[str, Any]:
    return {
        "site_id": page.site_id,
        "slug": page.slug.root,
        "title": page.title,
        "url": page.url,
        "created_at": page.created_at,
    }


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    The author columns are folded back into the tagged author union.
    """
    if row["author_kind"] == "user":
        author: UserAuthor | GuestAuthor = UserAuthor(
            user_id=UserId(row["user_id"]),
            display_name=row["author_name"],
            email_hash=row.get("author_email_hash"),
        )
    else:
        author = GuestAuthor(
            name=row["author_name"],
            email_hash=row.get("author_email_hash"),
        )

    return Comment(
        id=CommentId(row["id"]),
        site_id=SiteId(row["site_id"]),
        page_id=PageId(row["page_id"]),
        author=author,
        content=row["content"],
        parent_id=CommentId(row["parent_id"]) if row.get("parent_id") else None,
        status=CommentStatus(row["status"]),
        like_count=row["like_count"],
        is_edited=row["is_edited"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict (without id)."""
    return {
        "site_id": comment.site_id,
        "page_id": comment.page_id,
        "parent_id": comment.parent_id,
        "author_kind": comment.author.kind,
        "user_id": comment.author_user_id,
        "author_name": comment.author_name,
        "author_email_hash": comment.author.email_hash,
        "content": comment.content,
        "status": comment.status.value,
        "like_count": comment.like_count,
        "is_edited": comment.is_edited,
        "created_at": comment.created_at,
        "updated_at": comment.updated_at,
    }


def row_to_like(row: Dict[str, Any]) -> Like:
    return Like(
        id=LikeId(row["id"]),
        site_id=SiteId(row["site_id"]),
        target_kind=LikeTarget(row["target_kind"]),
        target_id=row["target_id"],
        subject=LikeSubject(row["subject"]),
        created_at=row["created_at"],
    )


def like_to_dict(like: Like) -> Dict[str, Any]:
    return {
        "site_id": like.site_id,
        "target_kind": like.target_kind.value,
        "target_id": like.target_id,
        "subject": like.subject.root,
        "created_at": like.created_at,
    }


def row_to_moderation_log_entry(row: Dict[str, Any]) -> ModerationLogEntry:
    return ModerationLogEntry(
        id=ModerationLogId(row["id"]),
        site_id=SiteId(row["site_id"]),
        comment_id=CommentId(row["comment_id"]),
        from_status=CommentStatus(row["from_status"]),
        to_status=CommentStatus(row["to_status"]),
        actor_id=UserId(row["actor_id"]) if row.get("actor_id") else None,
        created_at=row["created_at"],
    )


def moderation_log_entry_to_dict(entry: ModerationLogEntry) -> Dict[str, Any]:
    return {
        "site_id": entry.site_id,
        "comment_id": entry.comment_id,
        "from_status": entry.from_status.value,
        "to_status": entry.to_status.value,
        "actor_id": entry.actor_id,
        "created_at": entry.created_at,
    }
