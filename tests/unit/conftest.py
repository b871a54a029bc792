import pytest
from unittest.mock import AsyncMock, MagicMock


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with all repositories"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = MagicMock()
    uow.users.get_by_email = AsyncMock(return_value=None)
    uow.users.get_by_id = AsyncMock(return_value=None)
    uow.users.create = AsyncMock(side_effect=lambda user: user)
    uow.users.update = AsyncMock(side_effect=lambda user: user)

    uow.organizations = MagicMock()

    uow.memberships = MagicMock()
    uow.memberships.get_by_user_and_org = AsyncMock(return_value=None)
    uow.memberships.get_roles = AsyncMock(return_value=[])
    uow.memberships.get_organizations_for_user = AsyncMock(return_value=[])
    uow.memberships.create = AsyncMock(side_effect=lambda membership: membership)

    uow.sessions = MagicMock()
    uow.sessions.get_by_id = AsyncMock(return_value=None)
    uow.sessions.create = AsyncMock(side_effect=lambda session: session)
    uow.sessions.delete_by_id = AsyncMock(return_value=False)

    uow.invitations = MagicMock()
    uow.invitations.get_by_token = AsyncMock(return_value=None)
    uow.invitations.get_pending_by_org_and_email = AsyncMock(return_value=None)
    uow.invitations.create = AsyncMock(side_effect=lambda invitation: invitation)
    uow.invitations.mark_used = AsyncMock(return_value=True)

    uow.property_owners = MagicMock()
    uow.property_owners.get_in_org = AsyncMock(return_value=None)

    uow.properties = MagicMock()
    uow.properties.list_by_org = AsyncMock(return_value=[])
    uow.properties.get_in_org = AsyncMock(return_value=None)
    uow.properties.create = AsyncMock(side_effect=lambda property_obj: property_obj)
    uow.properties.update = AsyncMock(side_effect=lambda property_obj: property_obj)

    uow.reservations = MagicMock()
    uow.reservations.list_by_org = AsyncMock(return_value=[])
    uow.reservations.list_with_property = AsyncMock(return_value=[])
    uow.reservations.get_in_org = AsyncMock(return_value=None)
    uow.reservations.create = AsyncMock(side_effect=lambda reservation: reservation)
    uow.reservations.update = AsyncMock(side_effect=lambda reservation: reservation)
    uow.reservations.delete = AsyncMock()

    return uow
