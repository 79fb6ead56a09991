"""Shared pytest fixtures: SQLite in-memory database, app factory, test client."""

import logging
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from notevault.config import Settings
from notevault.core.repositories.user_repository import UserRepository
from notevault.database import Database
from notevault.main import create_app
from notevault.security.jwt import Identity, TokenService
from notevault.security.password import PasswordHasher

# Silence extremely verbose DEBUG logs from aiosqlite to keep test output readable
logging.getLogger("aiosqlite").setLevel(logging.WARNING)

TEST_SECRET = "test-secret-key"


@pytest.fixture
def test_settings():
    """Settings for tests: in-memory SQLite, no Redis, cheap hashing."""
    return Settings(
        _env_file=None,
        database_url="sqlite+aiosqlite:///:memory:",
        secret_key=TEST_SECRET,
        debug=True,
        rate_limit_enabled=False,
        password_hash_rounds=4,
        log_level="WARNING",
    )


@pytest.fixture
def token_service(test_settings):
    return TokenService.from_settings(test_settings)


@pytest.fixture
def password_hasher(test_settings):
    return PasswordHasher.from_settings(test_settings)


@pytest.fixture
async def database(test_settings):
    """Fresh in-memory database per test."""
    db = Database(test_settings.database_url)
    await db.connect()
    await db.create_tables()
    try:
        yield db
    finally:
        await db.disconnect()


@pytest.fixture
async def session(database):
    async with database.session() as session:
        yield session


@pytest.fixture
def make_user(session, password_hasher):
    """Factory creating users straight through the repository."""

    async def _make_user(username=None, password="pw1"):
        repo = UserRepository(session)
        return await repo.create_user(username or f"user_{uuid4().hex[:8]}", password_hasher.hash(password))

    return _make_user


@pytest.fixture
async def alice(make_user):
    user = await make_user("alice")
    return Identity(id=user.id)


@pytest.fixture
async def bob(make_user):
    user = await make_user("bob")
    return Identity(id=user.id)


@pytest.fixture
def test_app(test_settings):
    return create_app(test_settings)


@pytest.fixture
def client(test_app):
    """Test client with the app lifespan running (tables created on startup)."""
    with TestClient(test_app) as c:
        yield c


def register_and_login(client: TestClient, username: str, password: str = "pw1") -> dict:
    """Sign up + log in through the API, returning auth headers."""
    resp = client.post("/api/auth/signup", json={"username": username, "password": password})
    assert resp.status_code == 201, resp.text
    resp = client.post("/api/auth/login", json={"username": username, "password": password})
    assert resp.status_code == 200, resp.text
    return {"Authorization": f"Bearer {resp.json()['token']}"}


@pytest.fixture
def alice_headers(client):
    return register_and_login(client, "alice")


@pytest.fixture
def bob_headers(client):
    return register_and_login(client, "bob", "pw2")


@pytest.fixture
def register(client):
    """Sign up and log in an arbitrary user, returning auth headers."""

    def _register(username: str, password: str = "pw1") -> dict:
        return register_and_login(client, username, password)

    return _register
