"""Domain layer DI providers."""

from dishka import Scope, provide

from commentkit.config import AuthSettings, ModerationSettings
from commentkit.domain.repository import (
    CommentRepository,
    LikeRepository,
    MagicLinkRepository,
    ModerationLogRepository,
    PageRepository,
    SiteRepository,
    UserRepository,
)
from commentkit.domain.service import (
    AuthService,
    CommentService,
    DomainVerifier,
    EmailSender,
    IdentityResolver,
    JWTService,
    LikeService,
    ModerationService,
    PageService,
    SiteService,
    UserService,
)
from commentkit.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT session token service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_auth_service(
        self,
        magic_link_repository: MagicLinkRepository,
        user_repository: UserRepository,
        email_sender: EmailSender,
        auth_settings: AuthSettings,
    ) -> AuthService:
        """Provide magic-link authentication service."""
        return AuthService(
            magic_link_repository=magic_link_repository,
            user_repository=user_repository,
            email_sender=email_sender,
            auth_settings=auth_settings,
        )

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        return UserService(user_repository=user_repository)

    @provide
    def get_identity_resolver(
        self, moderation_settings: ModerationSettings
    ) -> IdentityResolver:
        return IdentityResolver(moderation_settings=moderation_settings)

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        moderation_settings: ModerationSettings,
    ) -> CommentService:
        """Provide comment (thread store) service."""
        return CommentService(
            comment_repository=comment_repository,
            moderation_settings=moderation_settings,
        )

    @provide
    def get_moderation_service(
        self,
        comment_repository: CommentRepository,
        moderation_log_repository: ModerationLogRepository,
    ) -> ModerationService:
        return ModerationService(
            comment_repository=comment_repository,
            moderation_log_repository=moderation_log_repository,
        )

    @provide
    def get_page_service(self, page_repository: PageRepository) -> PageService:
        return PageService(page_repository=page_repository)

    @provide
    def get_like_service(
        self,
        like_repository: LikeRepository,
        page_repository: PageRepository,
        comment_repository: CommentRepository,
    ) -> LikeService:
        return LikeService(
            like_repository=like_repository,
            page_repository=page_repository,
            comment_repository=comment_repository,
        )

    @provide
    def get_site_service(
        self,
        site_repository: SiteRepository,
        page_repository: PageRepository,
        comment_repository: CommentRepository,
        like_repository: LikeRepository,
        domain_verifier: DomainVerifier,
    ) -> SiteService:
        """Provide site management service."""
        return SiteService(
            site_repository=site_repository,
            page_repository=page_repository,
            comment_repository=comment_repository,
            like_repository=like_repository,
            domain_verifier=domain_verifier,
        )
