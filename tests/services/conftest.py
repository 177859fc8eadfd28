"""Service test fixtures — async DB, seeded users, and FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test engine
    - db_manager patched so background notification delivery hits the test DB
    - make_user returns (User row, Actor) pairs; the actor header is X-User-Id
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from threadboard.core.access_policy import Actor
from threadboard.core.domain_types import Role
from threadboard.db.base import Base
from threadboard.infrastructure.database import get_db, DatabaseSessionManager
import threadboard.infrastructure.database as db_module
import threadboard.models  # noqa: F401
from threadboard.models.user import User
from threadboard.main import app


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def make_user(test_db):
    """Factory: insert a user, return (row, actor)."""
    counter = {"n": 0}

    async def _make(role: str = "user", is_banned: bool = False):
        counter["n"] += 1
        n = counter["n"]
        user = User(
            username=f"user{n}", email=f"user{n}@example.com",
            password_hash="not-a-real-hash", role=role, is_banned=is_banned,
        )
        test_db.add(user)
        await test_db.commit()
        await test_db.refresh(user)
        return user, Actor(id=user.id, role=Role(role))

    return _make


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    # Background notification delivery opens its own session via db_manager
    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
def headers_for():
    """Identity header for requests made on behalf of an actor."""
    def _headers(actor: Actor) -> dict:
        return {"X-User-Id": str(actor.id)}
    return _headers
