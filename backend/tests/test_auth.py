"""Tests for registration, login and the bearer-token gate."""

from datetime import timedelta

import pytest
from httpx import AsyncClient
from sqlalchemy import func, select

from campaignhub.core.security import create_access_token
from campaignhub.models.user import User


@pytest.mark.asyncio
async def test_register_returns_token_and_public_user(client: AsyncClient):
    response = await client.post(
        "/api/auth/register",
        json={"email": "a@x.com", "password": "secret1", "firstName": "Ann", "lastName": "Able"},
    )
    assert response.status_code == 201
    body = response.json()
    assert body["token"]
    assert body["user"]["email"] == "a@x.com"
    assert body["user"]["firstName"] == "Ann"
    assert body["user"]["lastName"] == "Able"
    assert "passwordHash" not in body["user"]
    assert "password_hash" not in body["user"]


@pytest.mark.asyncio
async def test_register_aggregates_validation_errors(client: AsyncClient, db):
    response = await client.post("/api/auth/register", json={"email": "bad", "password": "123"})
    assert response.status_code == 400
    fields = {e["field"] for e in response.json()["errors"]}
    assert fields == {"email", "password", "firstName", "lastName"}
    assert db.execute(select(func.count(User.id))).scalar_one() == 0


@pytest.mark.asyncio
async def test_duplicate_registration_conflicts_without_new_row(client: AsyncClient, register, db):
    await register("a@x.com")
    response = await client.post(
        "/api/auth/register",
        json={"email": "a@x.com", "password": "another1", "firstName": "A", "lastName": "B"},
    )
    assert response.status_code == 400
    assert response.json() == {"error": "User already exists with this email"}
    assert db.execute(select(func.count(User.id))).scalar_one() == 1


@pytest.mark.asyncio
async def test_email_comparison_is_exact(client: AsyncClient, register):
    await register("a@x.com")
    response = await client.post("/api/auth/login", json={"email": "A@x.com", "password": "secret1"})
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_login_success_and_wrong_password(client: AsyncClient, register):
    user = await register("a@x.com", password="secret1")

    ok = await client.post("/api/auth/login", json={"email": "a@x.com", "password": "secret1"})
    assert ok.status_code == 200
    assert ok.json()["user"]["id"] == user.id
    assert ok.json()["token"]

    bad = await client.post("/api/auth/login", json={"email": "a@x.com", "password": "wrong!"})
    assert bad.status_code == 401
    assert bad.json() == {"error": "Invalid credentials"}


@pytest.mark.asyncio
async def test_password_beyond_72_bytes_registers_and_logs_in(client: AsyncClient, register):
    long_password = "p" * 80
    user = await register("a@x.com", password=long_password)

    ok = await client.post("/api/auth/login", json={"email": "a@x.com", "password": long_password})
    assert ok.status_code == 200
    assert ok.json()["user"]["id"] == user.id


@pytest.mark.asyncio
async def test_login_unknown_email_is_401(client: AsyncClient):
    response = await client.post("/api/auth/login", json={"email": "nobody@x.com", "password": "secret1"})
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_login_validation(client: AsyncClient):
    response = await client.post("/api/auth/login", json={"email": "nope"})
    assert response.status_code == 400
    assert {e["field"] for e in response.json()["errors"]} == {"email", "password"}


@pytest.mark.asyncio
async def test_me_returns_profile(client: AsyncClient, user_a):
    response = await client.get("/api/auth/me", headers=user_a.headers)
    assert response.status_code == 200
    data = response.json()
    assert data["id"] == user_a.id
    assert data["email"] == "a@x.com"
    assert data["firstName"] == "Ann"
    assert data["createdAt"]
    assert data["updatedAt"]
    assert "passwordHash" not in data


@pytest.mark.asyncio
async def test_me_for_unknown_user_is_404(client: AsyncClient, settings):
    token = create_access_token("missing-user", "ghost@x.com", secret=settings.JWT_SECRET)
    response = await client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 404
    assert response.json() == {"error": "User not found"}


@pytest.mark.asyncio
@pytest.mark.parametrize("headers", [
    {},
    {"Authorization": ""},
    {"Authorization": "Token abc"},
    {"Authorization": "bearer abc"},
    {"Authorization": "Bearer "},
])
async def test_missing_or_malformed_header_is_unauthenticated(client: AsyncClient, headers):
    response = await client.get("/api/contacts", headers=headers)
    assert response.status_code == 401
    assert response.json() == {"error": "No token, authorization denied"}


@pytest.mark.asyncio
async def test_bad_signature_is_invalid_token(client: AsyncClient, user_a):
    forged = create_access_token(user_a.id, user_a.email, secret="someone-else")
    response = await client.get("/api/contacts", headers={"Authorization": f"Bearer {forged}"})
    assert response.status_code == 401
    assert response.json() == {"error": "Token is not valid"}


@pytest.mark.asyncio
async def test_expired_token_is_invalid_token(client: AsyncClient, user_a, settings):
    expired = create_access_token(
        user_a.id,
        user_a.email,
        secret=settings.JWT_SECRET,
        expires_delta=timedelta(seconds=-5),
    )
    response = await client.get("/api/contacts", headers={"Authorization": f"Bearer {expired}"})
    assert response.status_code == 401
    assert response.json() == {"error": "Token is not valid"}
