"""Domain services."""

from .auth_service import AuthService, EmailSender
from .base import Service
from .comment_service import CommentService, initial_status
from .identity_resolver import IdentityResolver
from .jwt_service import JWTService
from .like_service import LikeService, LikeStats
from .moderation_service import ModerationService
from .page_service import PageService
from .site_service import DomainVerifier, SiteService, SiteStats
from .tree import CommentNode, assemble_tree, flatten_tree
from .user_service import UserService

__all__ = [
    "AuthService",
    "CommentNode",
    "CommentService",
    "DomainVerifier",
    "EmailSender",
    "IdentityResolver",
    "JWTService",
    "LikeService",
    "LikeStats",
    "ModerationService",
    "PageService",
    "Service",
    "SiteService",
    "SiteStats",
    "UserService",
    "assemble_tree",
    "flatten_tree",
    "initial_status",
]
