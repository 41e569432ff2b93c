"""PostgreSQL implementation of User repository."""

from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from commentkit.domain.model import User
from commentkit.domain.repository import UserRepository
from commentkit.domain.value import Email, UserId
from commentkit.persistence.mappers import row_to_user, user_to_dict
from commentkit.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by normalised e-mail."""
        stmt = select(users_table).where(users_table.c.email == email.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def save(self, user: User) -> User:
        """Insert a new user or update an existing one."""
        values = user_to_dict(user)
        if user.id is None:
            stmt = users_table.insert().values(**values).returning(users_table)
        else:
            stmt = (
                users_table.update()
                .where(users_table.c.id == user.id)
                .values(**values)
                .returning(users_table)
            )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return row_to_user(dict(result.mappings().one()))

    async def count(self) -> int:
        stmt = select(func.count()).select_from(users_table)
        result = await self.session.execute(stmt)
        return result.scalar_one()
