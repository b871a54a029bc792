from datetime import timedelta
from types import SimpleNamespace
from uuid import uuid4

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

import xenia.domain.entities  # noqa: F401
from config import ApplicationConfig
from xenia.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from xenia.app.services.password_hasher import hash_password
from xenia.depends import get_session, get_unit_of_work
from xenia.domain.base import utc_now
from xenia.domain.entities import (
    Invitation,
    Membership,
    MembershipRole,
    Organization,
    Property,
    PropertyOwner,
    Session,
    User,
)

PASSWORD = "SecurePass123!"
COOKIE = ApplicationConfig.COOKIE_NAME


def snapshot(row):
    """Detached copy of a committed row; request rollbacks expire the ORM instance"""
    return SimpleNamespace(**row.model_dump())


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test.db")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
async def app(db_session):
    from xenia.api.app import create_app

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    async def override_get_session():
        yield db_session

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_session] = override_get_session
    return app


@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


# ============================================================================
# Data helpers
# ============================================================================


@pytest.fixture
def make_org(db_session):
    async def _make_org(name="Acme Rentals", created_by=None):
        if created_by is None:
            founder = User(email=f"founder-{uuid4().hex[:8]}@acme.com", password_hash="x")
            db_session.add(founder)
            await db_session.flush()
            created_by = founder.id
        org = Organization(name=name, created_by=created_by)
        db_session.add(org)
        await db_session.commit()
        return snapshot(org)

    return _make_org


@pytest.fixture
def make_user(db_session):
    async def _make_user(email, password=PASSWORD, is_active=True):
        user = User(email=email, password_hash=hash_password(password), is_active=is_active)
        db_session.add(user)
        await db_session.commit()
        return snapshot(user)

    return _make_user


@pytest.fixture
def add_membership(db_session):
    async def _add_membership(user, org, role):
        membership = Membership(user_id=user.id, org_id=org.id, role=role)
        db_session.add(membership)
        await db_session.commit()
        return snapshot(membership)

    return _add_membership


@pytest.fixture
def make_member(make_org, make_user, add_membership):
    """User with a single membership in a fresh organization"""

    async def _make_member(email, role=MembershipRole.owner, org=None):
        user = await make_user(email)
        if org is None:
            org = await make_org(created_by=user.id)
        await add_membership(user, org, role)
        return user, org

    return _make_member


@pytest.fixture
def make_invitation(db_session):
    async def _make_invitation(org, email, role=MembershipRole.member, expires_in=timedelta(days=7)):
        invitation = Invitation(
            org_id=org.id,
            email=email,
            role=role,
            token=uuid4().hex + uuid4().hex[:16],
            expires_at=utc_now() + expires_in,
        )
        db_session.add(invitation)
        await db_session.commit()
        return snapshot(invitation)

    return _make_invitation


@pytest.fixture
def make_session(db_session):
    async def _make_session(user, org, expires_in=timedelta(days=7)):
        session = Session(user_id=user.id, org_id=org.id, expires_at=utc_now() + expires_in)
        db_session.add(session)
        await db_session.commit()
        return snapshot(session)

    return _make_session


@pytest.fixture
def make_owner(db_session):
    async def _make_owner(org, name="Marta Ruiz"):
        owner = PropertyOwner(org_id=org.id, name=name)
        db_session.add(owner)
        await db_session.commit()
        return snapshot(owner)

    return _make_owner


@pytest.fixture
def make_property(db_session):
    async def _make_property(org, name="Villa Demo"):
        property_obj = Property(org_id=org.id, name=name)
        db_session.add(property_obj)
        await db_session.commit()
        return snapshot(property_obj)

    return _make_property


def read_session_cookie(response):
    for header in response.headers.get_list("set-cookie"):
        name, _, rest = header.partition("=")
        if name.strip() == COOKIE:
            return rest.split(";", 1)[0].strip('"')
    return None


@pytest.fixture
def session_cookie():
    """Session id set by a response, None when absent"""
    return read_session_cookie


@pytest.fixture
def auth_headers():
    def _auth_headers(session_id):
        return {"Cookie": f"{COOKIE}={session_id}"}

    return _auth_headers


@pytest.fixture
def login(client, auth_headers):
    """Log in and return request headers carrying the session cookie"""

    async def _login(email, password=PASSWORD, org_id=None):
        payload = {"email": email, "password": password}
        if org_id is not None:
            payload["orgId"] = str(org_id)
        response = await client.post("/auth/login", json=payload)
        assert response.status_code == 200, response.text
        client.cookies.clear()
        return auth_headers(read_session_cookie(response))

    return _login
