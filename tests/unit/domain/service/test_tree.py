"""Unit tests for comment tree assembly."""

from datetime import datetime, timedelta, timezone

from commentkit.domain.model import Comment
from commentkit.domain.service import assemble_tree, flatten_tree
from commentkit.domain.value import (
    CommentId,
    CommentStatus,
    GuestAuthor,
    PageId,
    SiteId,
)

BASE = datetime(2026, 1, 1, tzinfo=timezone.utc)


def comment(comment_id: int, parent_id: int | None = None, minute: int = 0) -> Comment:
    return Comment(
        id=CommentId(comment_id),
        site_id=SiteId(1),
        page_id=PageId(1),
        author=GuestAuthor(name=f"guest{comment_id}"),
        content=f"comment {comment_id}",
        parent_id=CommentId(parent_id) if parent_id else None,
        status=CommentStatus.APPROVED,
        created_at=BASE + timedelta(minutes=minute),
    )


def ids(nodes) -> list[int]:
    return [n.comment.id for n in nodes]


class TestAssembleTree:
    """Tests for assemble_tree."""

    def test_top_level_comments_keep_order(self):
        roots = assemble_tree([comment(1, minute=0), comment(2, minute=1)])

        assert ids(roots) == [1, 2]
        assert all(not r.replies for r in roots)

    def test_reply_nested_under_parent(self):
        roots = assemble_tree([comment(1), comment(2, parent_id=1, minute=1)])

        assert ids(roots) == [1]
        assert ids(roots[0].replies) == [2]

    def test_grandchild_flattened_under_root(self):
        """Display nesting stops at one level."""
        roots = assemble_tree(
            [
                comment(1),
                comment(2, parent_id=1, minute=1),
                comment(3, parent_id=2, minute=2),
            ]
        )

        assert ids(roots) == [1]
        assert ids(roots[0].replies) == [2, 3]
        assert all(not r.replies for r in roots[0].replies)

    def test_orphan_becomes_root(self):
        """A reply whose parent is missing from the set is shown at the top."""
        roots = assemble_tree([comment(1), comment(5, parent_id=99, minute=1)])

        assert ids(roots) == [1, 5]

    def test_empty_input(self):
        assert assemble_tree([]) == []

    def test_idempotent_through_flatten(self):
        """Assembling the flattened tree again gives the same tree."""
        comments = [
            comment(1),
            comment(2, minute=1),
            comment(3, parent_id=1, minute=2),
            comment(4, parent_id=3, minute=3),
            comment(5, parent_id=2, minute=4),
        ]

        first = assemble_tree(comments)
        second = assemble_tree(flatten_tree(first))

        assert ids(first) == ids(second)
        for a, b in zip(first, second):
            assert ids(a.replies) == ids(b.replies)

    def test_parent_cycle_does_not_loop(self):
        roots = assemble_tree([comment(1, parent_id=2), comment(2, parent_id=1, minute=1)])

        assert sorted(c.id for c in flatten_tree(roots)) == [1, 2]
