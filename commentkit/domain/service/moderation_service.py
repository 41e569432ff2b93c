"""Moderation state machine."""

import logfire

from commentkit.domain.model import ModerationLogEntry
from commentkit.domain.repository import CommentRepository, ModerationLogRepository
from commentkit.domain.value import (
    BulkOutcome,
    CommentId,
    CommentStatus,
    ModerationAction,
    SiteId,
    UserId,
)

from .base import Service


class ModerationService(Service):
    """Governs comment visibility status.

    Every status is reachable from every other through an explicit owner
    action; there are no automatic transitions. Each applied change is
    recorded in the moderation log.
    """

    def __init__(
        self,
        comment_repository: CommentRepository,
        moderation_log_repository: ModerationLogRepository,
    ) -> None:
        self.comment_repository = comment_repository
        self.moderation_log_repository = moderation_log_repository

    async def update_status(
        self,
        comment_id: CommentId,
        new_status: CommentStatus,
        actor_id: UserId | None = None,
    ) -> bool:
        """Move a comment to a new status.

        Setting the status a comment already has is a successful no-op and
        is not logged.

        Args:
            comment_id: Comment ID
            new_status: Target status
            actor_id: User applying the change

        Returns:
            True if the comment exists (and now has new_status), False otherwise
        """
        with logfire.span(
            "moderation_service.update_status",
            comment_id=str(comment_id),
            new_status=new_status.value,
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                logfire.warn("Moderation of unknown comment", comment_id=str(comment_id))
                return False

            if comment.status == new_status:
                logfire.info(
                    "Comment already in target status",
                    comment_id=str(comment_id),
                    status=new_status.value,
                )
                return True

            updated = await self.comment_repository.update_status(comment_id, new_status)
            if not updated:
                return False

            await self.moderation_log_repository.append(
                ModerationLogEntry(
                    site_id=comment.site_id,
                    comment_id=comment_id,
                    from_status=comment.status,
                    to_status=new_status,
                    actor_id=actor_id,
                )
            )
            logfire.info(
                "Comment status changed",
                comment_id=str(comment_id),
                from_status=comment.status.value,
                to_status=new_status.value,
            )
            return True

    async def moderate(
        self,
        comment_id: CommentId,
        action: ModerationAction,
        actor_id: UserId | None = None,
    ) -> bool:
        """Apply an owner action (approve, reject, spam) to one comment."""
        return await self.update_status(comment_id, action.target_status, actor_id)

    async def bulk_moderate(
        self,
        comment_ids: list[CommentId],
        action: ModerationAction,
        actor_id: UserId | None = None,
        site_id: SiteId | None = None,
    ) -> dict[CommentId, BulkOutcome]:
        """Apply one action to many comments, best effort.

        Each id is handled on its own; an unknown id or a comment outside
        the given site is reported and never aborts the batch.

        Args:
            comment_ids: Comments to moderate (duplicates are handled once)
            action: Action to apply
            actor_id: User applying the change
            site_id: When set, comments from other sites are refused

        Returns:
            Outcome per requested id, in request order
        """
        with logfire.span(
            "moderation_service.bulk_moderate",
            count=len(comment_ids),
            action=action.value,
            site_id=str(site_id) if site_id else None,
        ):
            found = {
                c.id: c for c in await self.comment_repository.find_by_ids(comment_ids)
            }
            outcomes: dict[CommentId, BulkOutcome] = {}

            for comment_id in comment_ids:
                if comment_id in outcomes:
                    continue

                comment = found.get(comment_id)
                if comment is None:
                    outcomes[comment_id] = BulkOutcome.NOT_FOUND
                elif site_id is not None and comment.site_id != site_id:
                    outcomes[comment_id] = BulkOutcome.FORBIDDEN
                elif await self.moderate(comment_id, action, actor_id):
                    outcomes[comment_id] = BulkOutcome.OK
                else:
                    # Removed between lookup and update
                    outcomes[comment_id] = BulkOutcome.NOT_FOUND

            logfire.info(
                "Bulk moderation applied",
                action=action.value,
                ok=sum(1 for o in outcomes.values() if o == BulkOutcome.OK),
                failed=sum(1 for o in outcomes.values() if o != BulkOutcome.OK),
            )
            return outcomes

    async def get_log(
        self, site_id: SiteId, limit: int = 50, offset: int = 0
    ) -> list[ModerationLogEntry]:
        """Moderation history of a site, newest first."""
        with logfire.span("moderation_service.get_log", site_id=str(site_id)):
            return await self.moderation_log_repository.find_by_site(
                site_id, limit=limit, offset=offset
            )
