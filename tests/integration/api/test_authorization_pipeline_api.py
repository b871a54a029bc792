from uuid import uuid4

import pytest
from httpx import AsyncClient
from sqlalchemy import delete

from xenia.domain.entities import Membership, MembershipRole


@pytest.mark.asyncio
async def test_no_cookie_is_rejected_by_first_gate(client: AsyncClient, make_member):
    _, org = await make_member("owner@acme.com")
    client.cookies.clear()

    response = await client.get(f"/orgs/{org.id}/properties")

    assert response.status_code == 401
    assert response.json() == {"ok": False, "error": "No session"}


@pytest.mark.asyncio
async def test_session_for_org_a_cannot_reach_org_b(
    client: AsyncClient, make_member, make_org, add_membership, login
):
    """Even an owner of both organizations needs a session per organization"""
    user, org_a = await make_member("owner@acme.com")
    org_b = await make_org(name="Beta Stays")
    await add_membership(user, org_b, MembershipRole.owner)
    headers = await login("owner@acme.com", org_id=org_a.id)

    response = await client.get(f"/orgs/{org_b.id}/properties", headers=headers)

    assert response.status_code == 403
    assert response.json() == {"ok": False, "error": "Wrong organization context"}


@pytest.mark.asyncio
async def test_malformed_org_id_is_wrong_organization(
    client: AsyncClient, make_member, login
):
    await make_member("owner@acme.com")
    headers = await login("owner@acme.com")

    response = await client.get("/orgs/not-a-uuid/properties", headers=headers)

    assert response.status_code == 403
    assert response.json()["error"] == "Wrong organization context"


@pytest.mark.asyncio
async def test_member_cannot_write(client: AsyncClient, make_member, login):
    _, org = await make_member("member@acme.com", role=MembershipRole.member)
    headers = await login("member@acme.com")

    response = await client.post(
        f"/orgs/{org.id}/properties", json={"name": "Casa"}, headers=headers
    )

    assert response.status_code == 403
    assert response.json() == {"ok": False, "error": "Insufficient role"}


@pytest.mark.asyncio
async def test_revoked_membership_takes_effect_immediately(
    client: AsyncClient, db_session, make_member, login
):
    user, org = await make_member("owner@acme.com")
    headers = await login("owner@acme.com")
    assert (await client.get(f"/orgs/{org.id}/properties", headers=headers)).status_code == 200

    await db_session.execute(delete(Membership).where(Membership.user_id == user.id))
    await db_session.commit()

    response = await client.get(f"/orgs/{org.id}/properties", headers=headers)

    assert response.status_code == 403
    assert response.json() == {"ok": False, "error": "No membership"}


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "role, expected",
    [
        (MembershipRole.member, 403),
        (MembershipRole.admin, 403),
        (MembershipRole.owner, 404),
    ],
)
async def test_reservation_delete_requires_owner(
    client: AsyncClient, make_member, login, role, expected
):
    _, org = await make_member("user@acme.com", role=role)
    headers = await login("user@acme.com")

    response = await client.delete(
        f"/orgs/{org.id}/reservations/{uuid4()}", headers=headers
    )

    assert response.status_code == expected
