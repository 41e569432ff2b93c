"""Comment tree assembly.

Turns the flat, creation-ordered comment list of a page into the display
tree used by the widget. Display nesting is capped at one level: every
reply, however deep its stored parent chain, is grouped under the root
comment it descends from.
"""

from dataclasses import dataclass, field
from typing import Iterable, Sequence

from commentkit.domain.model import Comment
from commentkit.domain.value import CommentId


@dataclass
class CommentNode:
    """A root comment and its flattened replies."""

    comment: Comment
    replies: list["CommentNode"] = field(default_factory=list)


def assemble_tree(comments: Sequence[Comment]) -> list[CommentNode]:
    """Build the display tree for a page.

    A comment whose parent is not in the given set (other page, filtered
    out by status, deleted) becomes a root. Roots keep input order and so
    do the replies grouped under each root.

    Args:
        comments: Flat comments with parent pointers intact

    Returns:
        Root nodes, each with its replies as direct children
    """
    by_id: dict[CommentId, Comment] = {}
    for comment in comments:
        if comment.id is not None:
            by_id[comment.id] = comment

    nodes: dict[CommentId, CommentNode] = {}
    roots: list[CommentNode] = []

    for comment in comments:
        root_id = _root_of(comment, by_id)

        if root_id is None or root_id == comment.id:
            if comment.id is None:
                roots.append(CommentNode(comment=comment))
                continue
            node = nodes.setdefault(comment.id, CommentNode(comment=comment))
            roots.append(node)
        else:
            root = nodes.setdefault(root_id, CommentNode(comment=by_id[root_id]))
            root.replies.append(CommentNode(comment=comment))

    return roots


def flatten_tree(roots: Iterable[CommentNode]) -> list[Comment]:
    """Flatten a display tree back to a list: each root followed by its replies."""
    flat: list[Comment] = []
    for root in roots:
        flat.append(root.comment)
        flat.extend(flatten_tree(root.replies))
    return flat


def _root_of(comment: Comment, by_id: dict[CommentId, Comment]) -> CommentId | None:
    """Walk parent pointers within the set up to the topmost ancestor."""
    current = comment
    seen: set[CommentId] = set()
    while current.parent_id is not None and current.parent_id in by_id:
        if current.id is not None:
            seen.add(current.id)
        if current.parent_id in seen:
            # Parent cycle: treat the comment itself as a root
            return comment.id
        current = by_id[current.parent_id]
    return current.id
