"""Shared state for the in-memory repositories.

One store plays the role of the database: repositories created for
different requests see the same rows, and ids come from per-table
counters the way SERIAL columns hand them out.
"""

from collections import defaultdict
from itertools import count
from typing import Iterator

from commentkit.domain.model import (
    Comment,
    Like,
    MagicLink,
    ModerationLogEntry,
    Page,
    Site,
    User,
)


class InMemoryStore:
    """Rows of every table, keyed by id."""

    def __init__(self) -> None:
        self.users: dict[int, User] = {}
        self.magic_links: dict[int, MagicLink] = {}
        self.sites: dict[int, Site] = {}
        self.pages: dict[int, Page] = {}
        self.comments: dict[int, Comment] = {}
        self.likes: dict[int, Like] = {}
        self.moderation_log: dict[int, ModerationLogEntry] = {}
        self._sequences: dict[str, Iterator[int]] = defaultdict(lambda: count(1))

    def next_id(self, table: str) -> int:
        return next(self._sequences[table])

    def delete_site(self, site_id: int) -> bool:
        """Remove a site and cascade to its pages, comments, likes and log."""
        if self.sites.pop(site_id, None) is None:
            return False

        for table in (self.pages, self.comments, self.likes, self.moderation_log):
            for row_id in [k for k, row in table.items() if row.site_id == site_id]:
                del table[row_id]
        return True
