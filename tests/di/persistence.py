"""Mock persistence providers for testing."""

from dishka import Scope, provide

from commentkit.domain.repository import (
    CommentRepository,
    LikeRepository,
    MagicLinkRepository,
    ModerationLogRepository,
    PageRepository,
    SiteRepository,
    UserRepository,
)
from commentkit.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryLikeRepository,
    InMemoryMagicLinkRepository,
    InMemoryModerationLogRepository,
    InMemoryPageRepository,
    InMemorySiteRepository,
    InMemoryStore,
    InMemoryUserRepository,
)
from commentkit.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    The store is APP scoped: every request of one container sees the same
    rows, and each test builds its own container for isolation.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_store(self) -> InMemoryStore:
        return InMemoryStore()

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, store: InMemoryStore) -> UserRepository:
        return InMemoryUserRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_magic_link_repository(self, store: InMemoryStore) -> MagicLinkRepository:
        return InMemoryMagicLinkRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_site_repository(self, store: InMemoryStore) -> SiteRepository:
        return InMemorySiteRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_page_repository(self, store: InMemoryStore) -> PageRepository:
        return InMemoryPageRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, store: InMemoryStore) -> CommentRepository:
        return InMemoryCommentRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_like_repository(self, store: InMemoryStore) -> LikeRepository:
        return InMemoryLikeRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_moderation_log_repository(
        self, store: InMemoryStore
    ) -> ModerationLogRepository:
        return InMemoryModerationLogRepository(store)
