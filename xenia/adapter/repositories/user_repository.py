from typing import Optional
from uuid import UUID

from sqlmodel import select

from xenia.adapter.repositories.base import SqlModelRepository
from xenia.app.repositories.user_repository import IUserRepository
from xenia.domain.entities import User


class UserRepository(SqlModelRepository[User], IUserRepository):
    """Users are global; organization scoping happens through memberships."""

    async def get_by_email(self, email: str) -> Optional[User]:
        return await self._one_or_none(select(User).where(User.email == email))

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        return await self._one_or_none(select(User).where(User.id == user_id))

    async def create(self, user: User) -> User:
        return await self._save(user)

    async def update(self, user: User) -> User:
        return await self._save(user)
