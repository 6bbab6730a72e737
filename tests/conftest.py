"""Shared pytest fixtures configured to use SQLite in-memory for tests."""

import logging
import os

# Must be set before tenantnotes.config builds its Settings instance
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("CREATE_TABLES_ON_STARTUP", "false")
os.environ.setdefault("SECRET_KEY", "test-secret-key")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from tenantnotes.core.models import BaseModel, Tenant, User
from tenantnotes.database import get_db_session
from tenantnotes.main import app
from tenantnotes.security.jwt import create_access_token
from tenantnotes.security.password import hash_password

# Silence extremely verbose DEBUG logs from aiosqlite to keep test output readable
logging.getLogger("aiosqlite").setLevel(logging.WARNING)

TEST_DB_URL = "sqlite+aiosqlite:///:memory:"
TEST_PASSWORD = "password"


@pytest.fixture(scope="session")
def password_hash():
    """One bcrypt hash shared by every seeded user; hashing is slow."""
    return hash_password(TEST_PASSWORD)


@pytest.fixture
async def test_engine():
    """Fresh SQLite in-memory engine with the full schema, per test."""
    engine = create_async_engine(
        TEST_DB_URL,
        echo=False,
        poolclass=StaticPool,  # keep the same memory DB across connections
        connect_args={"check_same_thread": False},
    )

    # SQLite only enforces foreign keys when asked to
    @event.listens_for(engine.sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):  # noqa: ANN001
        cursor = dbapi_connection.cursor()
        try:
            cursor.execute("PRAGMA foreign_keys=ON")
        finally:
            cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(BaseModel.metadata.create_all)

    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
async def test_session(test_engine):
    session_maker = async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)
    async with session_maker() as session:
        try:
            yield session
        finally:
            await session.rollback()


@pytest.fixture
def test_app(test_session):
    """App wired to the test session."""

    async def _override_get_db():
        yield test_session

    app.dependency_overrides[get_db_session] = _override_get_db
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def async_client(test_app):
    async with AsyncClient(transport=ASGITransport(app=test_app), base_url="http://test") as ac:
        yield ac


async def _make_tenant(session: AsyncSession, name: str, slug: str) -> Tenant:
    tenant = Tenant(name=name, slug=slug, subscription="free")
    session.add(tenant)
    await session.commit()
    return tenant


async def _make_user(
    session: AsyncSession, tenant: Tenant, email: str, role: str, password_hash: str
) -> User:
    user = User(email=email, password_hash=password_hash, role=role, tenant_id=tenant.id)
    session.add(user)
    await session.commit()
    await session.refresh(user, ["tenant"])
    return user


@pytest.fixture
async def acme(test_session):
    return await _make_tenant(test_session, "Acme Corporation", "acme")


@pytest.fixture
async def globex(test_session):
    return await _make_tenant(test_session, "Globex Corporation", "globex")


@pytest.fixture
async def acme_admin(test_session, acme, password_hash):
    return await _make_user(test_session, acme, "admin@acme.test", "admin", password_hash)


@pytest.fixture
async def acme_member(test_session, acme, password_hash):
    return await _make_user(test_session, acme, "user@acme.test", "member", password_hash)


@pytest.fixture
async def globex_admin(test_session, globex, password_hash):
    return await _make_user(test_session, globex, "admin@globex.test", "admin", password_hash)


@pytest.fixture
async def globex_member(test_session, globex, password_hash):
    return await _make_user(test_session, globex, "user@globex.test", "member", password_hash)


def bearer(user: User) -> dict:
    """Authorization header carrying a fresh access token for ``user``."""
    return {"Authorization": f"Bearer {create_access_token({'sub': str(user.id)})}"}


@pytest.fixture
def acme_admin_headers(acme_admin):
    return bearer(acme_admin)


@pytest.fixture
def acme_member_headers(acme_member):
    return bearer(acme_member)


@pytest.fixture
def globex_admin_headers(globex_admin):
    return bearer(globex_admin)


@pytest.fixture
def globex_member_headers(globex_member):
    return bearer(globex_member)
