"""Like domain service."""

from dataclasses import dataclass

import logfire

from commentkit.domain.error import NotFoundError
from commentkit.domain.model import Like
from commentkit.domain.repository import (
    CommentRepository,
    LikeRepository,
    PageRepository,
)
from commentkit.domain.value import CommentId, LikeSubject, LikeTarget, PageId, SiteId

from .base import Service


@dataclass
class LikeStats:
    """Like state of one target as seen by one subject."""

    liked: bool
    total_likes: int


class LikeService(Service):
    """Domain service for likes on pages and comments.

    Uniqueness of (target, subject) is enforced by the store, so repeated
    calls never create duplicates and no application-level locking is used.
    """

    def __init__(
        self,
        like_repository: LikeRepository,
        page_repository: PageRepository,
        comment_repository: CommentRepository,
    ) -> None:
        self.like_repository = like_repository
        self.page_repository = page_repository
        self.comment_repository = comment_repository

    async def like(
        self, target_kind: LikeTarget, target_id: int, subject: LikeSubject
    ) -> LikeStats:
        """Set the like; a no-op if it already exists.

        Raises:
            NotFoundError: If the target does not exist
        """
        with logfire.span(
            "like_service.like",
            target_kind=target_kind.value,
            target_id=str(target_id),
        ):
            site_id = await self._site_of(target_kind, target_id)
            inserted = await self.like_repository.add(
                Like(
                    site_id=site_id,
                    target_kind=target_kind,
                    target_id=target_id,
                    subject=subject,
                )
            )
            if not inserted:
                logfire.info("Like already present", target_id=str(target_id))
            return await self._refresh(target_kind, target_id, liked=True)

    async def unlike(
        self, target_kind: LikeTarget, target_id: int, subject: LikeSubject
    ) -> LikeStats:
        """Clear the like; a no-op if there is none.

        Raises:
            NotFoundError: If the target does not exist
        """
        with logfire.span(
            "like_service.unlike",
            target_kind=target_kind.value,
            target_id=str(target_id),
        ):
            await self._site_of(target_kind, target_id)
            removed = await self.like_repository.remove(target_kind, target_id, subject)
            if not removed:
                logfire.info("No like to remove", target_id=str(target_id))
            return await self._refresh(target_kind, target_id, liked=False)

    async def toggle_like(
        self, target_kind: LikeTarget, target_id: int, subject: LikeSubject
    ) -> LikeStats:
        """Flip the subject's like on a target.

        Calling this twice returns the target to its original state.
        """
        with logfire.span(
            "like_service.toggle_like",
            target_kind=target_kind.value,
            target_id=str(target_id),
        ):
            if await self.like_repository.exists(target_kind, target_id, subject):
                return await self.unlike(target_kind, target_id, subject)
            return await self.like(target_kind, target_id, subject)

    async def stats(
        self,
        target_kind: LikeTarget,
        target_id: int,
        subject: LikeSubject | None = None,
    ) -> LikeStats:
        """Current like total and whether the subject has liked the target."""
        with logfire.span(
            "like_service.stats",
            target_kind=target_kind.value,
            target_id=str(target_id),
        ):
            await self._site_of(target_kind, target_id)
            total = await self.like_repository.count(target_kind, target_id)
            liked = subject is not None and await self.like_repository.exists(
                target_kind, target_id, subject
            )
            return LikeStats(liked=liked, total_likes=total)

    async def liked_comment_ids(
        self, comment_ids: list[CommentId], subject: LikeSubject | None
    ) -> set[int]:
        """Comments among comment_ids the subject has liked."""
        if subject is None or not comment_ids:
            return set()
        return await self.like_repository.find_liked_targets(
            LikeTarget.COMMENT, [int(c) for c in comment_ids], subject
        )

    async def count_by_site(self, site_id: SiteId) -> int:
        return await self.like_repository.count_by_site(site_id)

    async def _site_of(self, target_kind: LikeTarget, target_id: int) -> SiteId:
        if target_kind == LikeTarget.PAGE:
            page = await self.page_repository.find_by_id(PageId(target_id))
            if not page:
                raise NotFoundError("Page", str(target_id))
            return page.site_id

        comment = await self.comment_repository.find_by_id(CommentId(target_id))
        if not comment:
            raise NotFoundError("Comment", str(target_id))
        return comment.site_id

    async def _refresh(
        self, target_kind: LikeTarget, target_id: int, liked: bool
    ) -> LikeStats:
        total = await self.like_repository.count(target_kind, target_id)
        if target_kind == LikeTarget.COMMENT:
            await self.comment_repository.set_like_count(CommentId(target_id), total)
        logfire.info(
            "Like state updated",
            target_kind=target_kind.value,
            target_id=str(target_id),
            liked=liked,
            total_likes=total,
        )
        return LikeStats(liked=liked, total_likes=total)
