"""
Seed a demo tenant

Creates the tables, then makes sure an owner user, its organization, the
owner membership, a demo property and a pending admin invitation exist.
Safe to run repeatedly.

    python seed.py
"""

import asyncio
import logging
import secrets
from datetime import timedelta

from config import ApplicationConfig
from xenia.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from xenia.app.services.password_hasher import hash_password
from xenia.depends import AsyncSessionLocal, create_tables
from xenia.domain.base import utc_now
from xenia.domain.entities import (
    Invitation,
    Membership,
    MembershipRole,
    Organization,
    Property,
    User,
)

logger = logging.getLogger("xenia.seed")

OWNER_EMAIL = "owner@xenia.local"
OWNER_PASSWORD = "Owner123!"
ORG_NAME = "XenIA Demo Org"
PROPERTY_NAME = "Villa Demo"
INVITE_EMAIL = "admin@xenia.local"
INVITE_ROLE = MembershipRole.admin


async def seed(uow: SqlAlchemyUnitOfWork) -> tuple:
    """Returns the (token, expires_at) of the pending admin invitation"""
    async with uow:
        owner = await uow.users.get_by_email(OWNER_EMAIL)
        if owner is None:
            owner = await uow.users.create(
                User(email=OWNER_EMAIL, password_hash=hash_password(OWNER_PASSWORD))
            )

        org = await uow.organizations.get_by_name(ORG_NAME)
        if org is None:
            org = await uow.organizations.create(
                Organization(name=ORG_NAME, created_by=owner.id)
            )

        if await uow.memberships.get_by_user_and_org(owner.id, org.id) is None:
            await uow.memberships.create(
                Membership(user_id=owner.id, org_id=org.id, role=MembershipRole.owner)
            )

        if await uow.properties.get_by_org_and_name(org.id, PROPERTY_NAME) is None:
            await uow.properties.create(Property(org_id=org.id, name=PROPERTY_NAME))

        now = utc_now()
        invitation = await uow.invitations.get_pending_by_org_and_email(
            org.id, INVITE_EMAIL, now
        )
        if invitation is None:
            invitation = await uow.invitations.create(
                Invitation(
                    org_id=org.id,
                    email=INVITE_EMAIL,
                    role=INVITE_ROLE,
                    token=secrets.token_hex(24),
                    expires_at=now
                    + timedelta(days=ApplicationConfig.INVITATION_TTL_DAYS),
                )
            )

        await uow.commit()
        return invitation.token, invitation.expires_at


async def main():
    logging.basicConfig(level=ApplicationConfig.LOG_LEVEL)
    await create_tables()

    async with AsyncSessionLocal() as session:
        token, expires_at = await seed(SqlAlchemyUnitOfWork(session))

    logger.info("Seed complete")
    print("Owner login:")
    print(f"  email: {OWNER_EMAIL}")
    print(f"  pass : {OWNER_PASSWORD}")
    print()
    print("Admin invitation:")
    print(f"  email  : {INVITE_EMAIL}")
    print(f"  token  : {token}")
    print(f"  expires: {expires_at.isoformat()}Z")


if __name__ == "__main__":
    asyncio.run(main())
