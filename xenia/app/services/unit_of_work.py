from abc import ABC, abstractmethod

from xenia.app.repositories.invitation_repository import IInvitationRepository
from xenia.app.repositories.membership_repository import IMembershipRepository
from xenia.app.repositories.organization_repository import IOrganizationRepository
from xenia.app.repositories.property_owner_repository import IPropertyOwnerRepository
from xenia.app.repositories.property_repository import IPropertyRepository
from xenia.app.repositories.reservation_repository import IReservationRepository
from xenia.app.repositories.session_repository import ISessionRepository
from xenia.app.repositories.user_repository import IUserRepository


class UnitOfWork(ABC):
    """
    Transaction boundary for a use case.

    Entering the context exposes the repositories below; leaving it rolls back
    whatever was not committed, so an early ``return Return.err(...)`` never
    persists partial writes.
    """

    # Identity and access
    users: IUserRepository
    organizations: IOrganizationRepository
    memberships: IMembershipRepository
    sessions: ISessionRepository
    invitations: IInvitationRepository

    # Tenant-scoped business data
    property_owners: IPropertyOwnerRepository
    properties: IPropertyRepository
    reservations: IReservationRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
