"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from commentkit.config import Settings
from commentkit.domain.repository import (
    CommentRepository,
    LikeRepository,
    MagicLinkRepository,
    ModerationLogRepository,
    PageRepository,
    SiteRepository,
    UserRepository,
)
from commentkit.persistence.database import create_engine, create_session_factory
from commentkit.persistence.repository import (
    PostgresCommentRepository,
    PostgresLikeRepository,
    PostgresMagicLinkRepository,
    PostgresModerationLogRepository,
    PostgresPageRepository,
    PostgresSiteRepository,
    PostgresUserRepository,
)
from commentkit.util.di.base import ProviderBase
from commentkit.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings) -> AsyncEngine:
        """Provide database engine."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        return engine

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        Every mutation in a request shares this session, so a request is one
        transaction: committed when the handler returns, rolled back if it
        raises.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_magic_link_repository(self, session: AsyncSession) -> MagicLinkRepository:
        return PostgresMagicLinkRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_site_repository(self, session: AsyncSession) -> SiteRepository:
        return PostgresSiteRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_page_repository(self, session: AsyncSession) -> PageRepository:
        return PostgresPageRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, session: AsyncSession) -> CommentRepository:
        return PostgresCommentRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_like_repository(self, session: AsyncSession) -> LikeRepository:
        return PostgresLikeRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_moderation_log_repository(
        self, session: AsyncSession
    ) -> ModerationLogRepository:
        return PostgresModerationLogRepository(session)
