"""Shared pytest fixtures configured to use SQLite in-memory databases."""

import logging
import os
from uuid import uuid4

# Settings are read at import time; configure the test environment first
os.environ["NOTEKEEPER_SKIP_LIFESPAN_DB"] = "1"
os.environ.setdefault("LOG_TO_FILE", "false")
os.environ.setdefault("SECRET_KEY", "test-secret-key")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy import event  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from notekeeper.config import get_settings  # noqa: E402
from notekeeper.core.models import BaseModel, User  # noqa: E402
from notekeeper.core.redis_client import get_redis_client  # noqa: E402
from notekeeper.database import get_db_session  # noqa: E402
from notekeeper.main import app  # noqa: E402
from notekeeper.security.jwt import create_access_token  # noqa: E402
from notekeeper.security.password import hash_password  # noqa: E402

# Silence extremely verbose DEBUG logs from aiosqlite to keep test output readable
logging.getLogger("aiosqlite").setLevel(logging.WARNING)

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def test_engine():
    """Fresh in-memory SQLite database per test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,  # keep the same memory DB across connections
        connect_args={"check_same_thread": False},
    )

    # SQLite only honours ON DELETE CASCADE with foreign keys switched on
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
    """Database session bound to the per-test engine."""
    session_maker = async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)
    async with session_maker() as session:
        try:
            yield session
        finally:
            await session.rollback()


@pytest.fixture(autouse=True)
def upload_dir(tmp_path, monkeypatch):
    """Keep uploaded files inside the test's temporary directory."""
    target = tmp_path / "uploads"
    monkeypatch.setattr(get_settings(), "upload_dir", str(target))
    return target


@pytest.fixture(autouse=True)
def no_redis(monkeypatch):
    """Run without Redis unless a test installs a fake client."""
    monkeypatch.setattr(get_redis_client(), "redis", None)


@pytest.fixture
def test_app(test_session):
    """FastAPI app using the test session."""

    async def _override_get_db():
        yield test_session

    app.dependency_overrides[get_db_session] = _override_get_db
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def async_client(test_app):
    """Async client running the app in the test's event loop."""
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


class FakeRedis:
    """In-memory stand-in for ``redis.asyncio.Redis`` (only what the app calls)."""

    def __init__(self):
        self.storage = {}
        self.ttls = {}

    async def ping(self):
        return True

    async def set(self, key, value):
        self.storage[key] = value
        return True

    async def setex(self, key, expire, value):
        self.storage[key] = value
        self.ttls[key] = expire
        return True

    async def exists(self, key):
        return 1 if key in self.storage else 0

    async def aclose(self):
        pass


@pytest.fixture
def fake_redis(monkeypatch):
    """Install a fake Redis connection on the shared client."""
    fake = FakeRedis()
    monkeypatch.setattr(get_redis_client(), "redis", fake)
    return fake


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def register(async_client):
    """Register through the API; returns (auth headers, user dict).

    The session cookie is dropped so requests authenticate only through
    the returned Bearer headers.
    """

    async def _register(username: str, email=None, password: str = "secret123"):
        response = await async_client.post(
            "/api/auth/register",
            json={
                "username": username,
                "email": email or f"{username}@example.com",
                "password": password,
            },
        )
        assert response.status_code == 201, response.text
        async_client.cookies.clear()
        body = response.json()
        return bearer(body["token"]), body["user"]

    return _register


@pytest.fixture
def test_user_data():
    """Sample user data for testing."""
    suffix = uuid4().hex[:8]
    return {
        "username": f"testuser_{suffix}",
        "email": f"testuser_{suffix}@example.com",
        "password": "TestPassword123!",
    }


@pytest.fixture
async def test_user(test_session, test_user_data):
    """Create a test user in the database."""
    user = User(
        username=test_user_data["username"],
        email=test_user_data["email"],
        password_hash=hash_password(test_user_data["password"]),
    )
    test_session.add(user)
    await test_session.commit()
    await test_session.refresh(user)
    return user


@pytest.fixture
def auth_headers(test_user):
    """Authorization header with a valid session token for ``test_user``."""
    return bearer(create_access_token(test_user.id))
