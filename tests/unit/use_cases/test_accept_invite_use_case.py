from datetime import timedelta
from unittest.mock import ANY
from uuid import uuid4

import pytest

from xenia.app.services.password_hasher import verify_password
from xenia.app.use_cases.auth import AcceptInviteCommand, AcceptInviteUseCase
from xenia.domain.base import utc_now
from xenia.domain.entities import Invitation, Membership, MembershipRole, User

TOKEN = "a" * 48
PASSWORD = "NewPass1234!"


@pytest.fixture
def invitation():
    return Invitation(
        id=uuid4(),
        org_id=uuid4(),
        email="invitee@acme.com",
        role=MembershipRole.admin,
        token=TOKEN,
        expires_at=utc_now() + timedelta(days=7),
    )


@pytest.mark.asyncio
async def test_new_user_accepts_invitation(mock_uow, invitation):
    mock_uow.invitations.get_by_token.return_value = invitation

    result = await AcceptInviteUseCase(mock_uow).execute(
        AcceptInviteCommand(token=TOKEN, password=PASSWORD, name="Ines")
    )

    assert result.is_ok()
    created_user = mock_uow.users.create.call_args.args[0]
    assert created_user.email == "invitee@acme.com"
    assert created_user.name == "Ines"
    assert created_user.is_active is True
    assert verify_password(PASSWORD, created_user.password_hash)

    membership = mock_uow.memberships.create.call_args.args[0]
    assert membership.user_id == created_user.id
    assert membership.org_id == invitation.org_id
    assert membership.role == MembershipRole.admin

    mock_uow.invitations.mark_used.assert_awaited_once_with(invitation.id, ANY)

    session = mock_uow.sessions.create.call_args.args[0]
    assert session.user_id == created_user.id
    assert session.org_id == invitation.org_id

    accepted = result.value
    assert accepted.response.user_id == created_user.id
    assert accepted.response.org_id == invitation.org_id
    assert accepted.session.session_id == session.id
    mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_existing_user_is_reactivated_with_new_password(mock_uow, invitation):
    user = User(
        id=uuid4(),
        email=invitation.email,
        password_hash="old-hash",
        name="Old Name",
        is_active=False,
    )
    mock_uow.invitations.get_by_token.return_value = invitation
    mock_uow.users.get_by_email.return_value = user

    result = await AcceptInviteUseCase(mock_uow).execute(
        AcceptInviteCommand(token=TOKEN, password=PASSWORD)
    )

    assert result.is_ok()
    mock_uow.users.create.assert_not_called()
    assert user.is_active is True
    assert user.name == "Old Name"
    assert verify_password(PASSWORD, user.password_hash)


@pytest.mark.asyncio
async def test_existing_member_gets_no_duplicate_membership(mock_uow, invitation):
    user = User(id=uuid4(), email=invitation.email, password_hash="old-hash")
    mock_uow.invitations.get_by_token.return_value = invitation
    mock_uow.users.get_by_email.return_value = user
    mock_uow.memberships.get_by_user_and_org.return_value = Membership(
        user_id=user.id, org_id=invitation.org_id, role=MembershipRole.member
    )

    result = await AcceptInviteUseCase(mock_uow).execute(
        AcceptInviteCommand(token=TOKEN, password=PASSWORD)
    )

    assert result.is_ok()
    mock_uow.memberships.create.assert_not_called()
    mock_uow.invitations.mark_used.assert_awaited_once()


@pytest.mark.asyncio
async def test_used_invitation_is_rejected(mock_uow, invitation):
    invitation.used_at = utc_now() - timedelta(hours=1)
    mock_uow.invitations.get_by_token.return_value = invitation

    result = await AcceptInviteUseCase(mock_uow).execute(
        AcceptInviteCommand(token=TOKEN, password=PASSWORD)
    )

    assert result.error.code == "INVALID_INVITE"
    assert result.error.message == "Invalid or expired invite"
    mock_uow.users.create.assert_not_called()
    mock_uow.sessions.create.assert_not_called()
    mock_uow.commit.assert_not_called()
    mock_uow.invitations.mark_used.assert_not_called()


@pytest.mark.asyncio
async def test_expired_invitation_is_rejected(mock_uow, invitation):
    invitation.expires_at = utc_now() - timedelta(seconds=1)
    mock_uow.invitations.get_by_token.return_value = invitation

    result = await AcceptInviteUseCase(mock_uow).execute(
        AcceptInviteCommand(token=TOKEN, password=PASSWORD)
    )

    assert result.error.message == "Invalid or expired invite"


@pytest.mark.asyncio
async def test_unknown_token_is_rejected(mock_uow):
    mock_uow.invitations.get_by_token.return_value = None

    result = await AcceptInviteUseCase(mock_uow).execute(
        AcceptInviteCommand(token=TOKEN, password=PASSWORD)
    )

    assert result.error.message == "Invalid or expired invite"


@pytest.mark.asyncio
async def test_invitation_claimed_by_another_request_is_rejected(mock_uow, invitation):
    """The row looked usable when read, but the conditional claim matched nothing"""
    mock_uow.invitations.get_by_token.return_value = invitation
    mock_uow.invitations.mark_used.return_value = False

    result = await AcceptInviteUseCase(mock_uow).execute(
        AcceptInviteCommand(token=TOKEN, password=PASSWORD)
    )

    assert result.error.code == "INVALID_INVITE"
    assert result.error.message == "Invalid or expired invite"
    mock_uow.users.get_by_email.assert_not_called()
    mock_uow.users.create.assert_not_called()
    mock_uow.memberships.create.assert_not_called()
    mock_uow.sessions.create.assert_not_called()
    mock_uow.commit.assert_not_called()
