"""
Shared fixtures: an in-memory SQLite database, seeded users, and an HTTP
client running the ASGI app against that database.
"""

import os

# Settings are read at import time; keep hashing cheap and the secret fixed.
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-with-at-least-32-bytes!")
os.environ.setdefault("APP_ENV", "test")

from collections.abc import AsyncGenerator
from datetime import date

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from insureclaim.api.deps import get_db
from insureclaim.core.constants import PolicyType, UserRole
from insureclaim.core.permissions import Viewer
from insureclaim.db.models import Base, User
from insureclaim.main import app
from insureclaim.repositories import users as user_repository
from insureclaim.services import policies as policy_service

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"
PASSWORD = "Secret@123"


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False)


@pytest_asyncio.fixture
async def db(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


async def _make_user(db: AsyncSession, email: str, role: UserRole, name: str) -> User:
    return await user_repository.create_user(
        db,
        email=email,
        password=PASSWORD,
        full_name=name,
        phone_number="+27110000000",
        role=role.value,
    )


@pytest_asyncio.fixture
async def customer(db) -> User:
    return await _make_user(db, "thandi@example.com", UserRole.CUSTOMER, "Thandi Nkosi")


@pytest_asyncio.fixture
async def other_customer(db) -> User:
    return await _make_user(db, "pieter@example.com", UserRole.CUSTOMER, "Pieter Botha")


@pytest_asyncio.fixture
async def agent(db) -> User:
    return await _make_user(db, "agent@example.com", UserRole.AGENT, "Sipho Agent")


@pytest_asyncio.fixture
async def admin(db) -> User:
    return await _make_user(db, "admin@example.com", UserRole.ADMIN, "Ada Admin")


@pytest.fixture
def policy_start() -> date:
    return date.today().replace(day=1)


@pytest_asyncio.fixture
async def auto_policy(db, customer, policy_start):
    """Active 12-month Auto policy with 500,000 coverage owned by ``customer``."""
    return await policy_service.create_policy(
        db,
        owner_id=customer.id,
        policy_type=PolicyType.AUTO,
        coverage_amount=500_000,
        start_date=policy_start,
        duration_months=12,
        viewer=Viewer.of(customer),
    )


# ── HTTP ──────────────────────────────────────


@pytest_asyncio.fixture
async def client(session_factory) -> AsyncGenerator[AsyncClient, None]:
    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as http:
        yield http
    app.dependency_overrides.clear()


async def _register(client: AsyncClient, email: str, role: str = "Customer", name: str = "Test User") -> dict:
    response = await client.post(
        "/api/v1/auth/register",
        json={
            "full_name": name,
            "email": email,
            "password": PASSWORD,
            "phone_number": "+27 82 555 0101",
            "role": role,
        },
    )
    assert response.status_code == 201, response.text
    return response.json()


def _bearer(auth: dict) -> dict[str, str]:
    return {"Authorization": f"Bearer {auth['access_token']}"}


@pytest.fixture
def register(client):
    """Register a user through the API and return the AuthResponse body."""

    async def _do(email: str, role: str = "Customer", name: str = "Test User") -> dict:
        return await _register(client, email, role, name)

    return _do


@pytest.fixture
def bearer():
    return _bearer
