from sqlmodel.ext.asyncio.session import AsyncSession

from xenia.adapter.repositories.invitation_repository import InvitationRepository
from xenia.adapter.repositories.membership_repository import MembershipRepository
from xenia.adapter.repositories.organization_repository import OrganizationRepository
from xenia.adapter.repositories.property_owner_repository import PropertyOwnerRepository
from xenia.adapter.repositories.property_repository import PropertyRepository
from xenia.adapter.repositories.reservation_repository import ReservationRepository
from xenia.adapter.repositories.session_repository import SessionRepository
from xenia.adapter.repositories.user_repository import UserRepository
from xenia.app.services.unit_of_work import UnitOfWork

REPOSITORIES = {
    "users": UserRepository,
    "organizations": OrganizationRepository,
    "memberships": MembershipRepository,
    "sessions": SessionRepository,
    "invitations": InvitationRepository,
    "property_owners": PropertyOwnerRepository,
    "properties": PropertyRepository,
    "reservations": ReservationRepository,
}


class SqlAlchemyUnitOfWork(UnitOfWork):
    """One AsyncSession per request; every repository shares its transaction."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        for name, repository_cls in REPOSITORIES.items():
            setattr(self, name, repository_cls(self.session))
        return self

    async def __aexit__(self, *args):
        # Anything not committed inside the block is discarded
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
