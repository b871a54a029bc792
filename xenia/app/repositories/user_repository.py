from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from xenia.domain.entities import User


class IUserRepository(ABC):
    """
    Users are global accounts keyed by a unique email.

    Organization access is never read from here; see IMembershipRepository.
    """

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """Login and invite acceptance both resolve the account by email"""
        pass

    @abstractmethod
    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        pass

    @abstractmethod
    async def update(self, user: User) -> User:
        """Persist a password reset, reactivation or rename"""
        pass
