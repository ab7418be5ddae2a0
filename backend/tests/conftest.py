"""
Test configuration and fixtures.

Provides:
- A fresh in-memory SQLite database per test
- Settings with a test signing key (and cheap bcrypt rounds)
- HTTPX AsyncClient bound to the app with get_db/get_settings overridden
- Helpers to register users and build Authorization headers
"""
import os
from dataclasses import dataclass
from typing import AsyncGenerator, Dict, Generator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault("DATABASE_URL", "sqlite://")

from campaignhub.core.config import Settings, get_settings
from campaignhub.db.base import create_all
from campaignhub.db.session import build_engine, get_db
from campaignhub.main import app


TEST_SETTINGS = Settings(JWT_SECRET="test-secret", BCRYPT_ROUNDS=4)


# =============================================================================
# Database Fixtures
# =============================================================================

@pytest.fixture(scope="function")
def engine():
    eng = build_engine("sqlite://", poolclass=StaticPool)
    create_all(eng)
    yield eng
    eng.dispose()


@pytest.fixture(scope="function")
def db(engine) -> Generator[Session, None, None]:
    TestingSession = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    session = TestingSession()
    yield session
    session.close()


@pytest.fixture
def settings() -> Settings:
    return TEST_SETTINGS


# =============================================================================
# Client Fixtures
# =============================================================================

@pytest.fixture(scope="function")
async def client(db: Session) -> AsyncGenerator[AsyncClient, None]:
    """Unauthenticated client; add headers per request."""
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_settings] = lambda: TEST_SETTINGS

    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


# =============================================================================
# Auth Helpers
# =============================================================================

@dataclass
class RegisteredUser:
    id: str
    email: str
    token: str

    @property
    def headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"}


async def register_user(
    client: AsyncClient,
    email: str,
    password: str = "secret1",
    first_name: str = "Test",
    last_name: str = "User",
) -> RegisteredUser:
    response = await client.post(
        "/api/auth/register",
        json={"email": email, "password": password, "firstName": first_name, "lastName": last_name},
    )
    assert response.status_code == 201, response.text
    body = response.json()
    return RegisteredUser(id=body["user"]["id"], email=email, token=body["token"])


@pytest.fixture
async def user_a(client: AsyncClient) -> RegisteredUser:
    return await register_user(client, "a@x.com", first_name="Ann", last_name="Able")


@pytest.fixture
async def user_b(client: AsyncClient) -> RegisteredUser:
    return await register_user(client, "b@x.com", first_name="Ben", last_name="Baker")


@pytest.fixture
def register(client: AsyncClient):
    """Async helper: `user = await register("c@x.com")`."""
    async def _register(email: str, **kwargs) -> RegisteredUser:
        return await register_user(client, email, **kwargs)
    return _register
