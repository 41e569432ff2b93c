"""Strongly typed identifiers for CommentKit domain entities.

All ids are integers assigned by the store. Using NewType keeps a SiteId
from being passed where a CommentId is expected.
"""

from typing import NewType

UserId = NewType("UserId", int)
SiteId = NewType("SiteId", int)
PageId = NewType("PageId", int)
CommentId = NewType("CommentId", int)
LikeId = NewType("LikeId", int)
MagicLinkId = NewType("MagicLinkId", int)
ModerationLogId = NewType("ModerationLogId", int)
