"""Application layer DI providers."""

from dishka import Scope, provide, provide_all

from commentkit.application.usecase.auth import (
    GetCurrentUserUseCase,
    LoginUseCase,
    UpdateProfileUseCase,
    VerifyMagicLinkUseCase,
)
from commentkit.application.usecase.comment import (
    CreateCommentUseCase,
    EditCommentUseCase,
    GetPageCommentsUseCase,
    UpdateCommentStatusUseCase,
)
from commentkit.application.usecase.like import (
    GetLikesUseCase,
    SetLikeUseCase,
    ToggleLikeUseCase,
)
from commentkit.application.usecase.site import (
    BulkModerateUseCase,
    CreateSiteUseCase,
    DeleteSiteUseCase,
    GetModerationLogUseCase,
    GetSiteActivityUseCase,
    GetSiteStatsUseCase,
    GetSitesOverviewUseCase,
    GetSiteUseCase,
    ListSiteCommentsUseCase,
    ListSitePagesUseCase,
    ListSitesUseCase,
    RegenerateApiKeyUseCase,
    UpdateSiteUseCase,
    VerifySiteUseCase,
)
from commentkit.application.usecase.superadmin import GetGlobalStatsUseCase
from commentkit.application.usecase.widget import VerifyWidgetSiteUseCase
from commentkit.config import VerificationSettings
from commentkit.domain.service import (
    AuthService,
    CommentService,
    IdentityResolver,
    JWTService,
    LikeService,
    PageService,
    SiteService,
    UserService,
)
from commentkit.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Auth use cases
    @provide
    def get_login_use_case(self, auth_service: AuthService) -> LoginUseCase:
        """Provide magic-link login use case."""
        return LoginUseCase(auth_service=auth_service)

    @provide
    def get_verify_magic_link_use_case(
        self, auth_service: AuthService, jwt_service: JWTService
    ) -> VerifyMagicLinkUseCase:
        """Provide magic-link verification use case."""
        return VerifyMagicLinkUseCase(auth_service=auth_service, jwt_service=jwt_service)

    @provide
    def get_current_user_use_case(
        self, user_service: UserService
    ) -> GetCurrentUserUseCase:
        return GetCurrentUserUseCase(user_service=user_service)

    @provide
    def get_update_profile_use_case(
        self, user_service: UserService
    ) -> UpdateProfileUseCase:
        return UpdateProfileUseCase(user_service=user_service)

    # Comment use cases
    @provide
    def get_page_comments_use_case(
        self,
        site_service: SiteService,
        page_service: PageService,
        comment_service: CommentService,
        like_service: LikeService,
    ) -> GetPageCommentsUseCase:
        """Provide widget page bootstrap use case."""
        return GetPageCommentsUseCase(
            site_service=site_service,
            page_service=page_service,
            comment_service=comment_service,
            like_service=like_service,
        )

    @provide
    def get_create_comment_use_case(
        self,
        site_service: SiteService,
        page_service: PageService,
        comment_service: CommentService,
        user_service: UserService,
        identity_resolver: IdentityResolver,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            site_service=site_service,
            page_service=page_service,
            comment_service=comment_service,
            user_service=user_service,
            identity_resolver=identity_resolver,
        )

    @provide
    def get_edit_comment_use_case(
        self, comment_service: CommentService, identity_resolver: IdentityResolver
    ) -> EditCommentUseCase:
        return EditCommentUseCase(
            comment_service=comment_service, identity_resolver=identity_resolver
        )

    update_comment_status = provide(UpdateCommentStatusUseCase)

    # Like use cases
    likes = provide_all(GetLikesUseCase, SetLikeUseCase, ToggleLikeUseCase)

    # Site management use cases; constructors are wired by type
    sites = provide_all(
        ListSitesUseCase,
        GetSitesOverviewUseCase,
        GetSiteUseCase,
        CreateSiteUseCase,
        UpdateSiteUseCase,
        DeleteSiteUseCase,
        RegenerateApiKeyUseCase,
        GetSiteStatsUseCase,
        ListSitePagesUseCase,
        GetSiteActivityUseCase,
        ListSiteCommentsUseCase,
        BulkModerateUseCase,
        GetModerationLogUseCase,
    )

    @provide
    def get_verify_site_use_case(
        self, site_service: SiteService, verification_settings: VerificationSettings
    ) -> VerifySiteUseCase:
        return VerifySiteUseCase(
            site_service=site_service, verification_settings=verification_settings
        )

    # Widget and superadmin use cases
    verify_widget_site = provide(VerifyWidgetSiteUseCase)
    global_stats = provide(GetGlobalStatsUseCase)
