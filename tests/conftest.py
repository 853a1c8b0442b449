"""Pytest configuration and fixtures for taskshare.

Repository and API tests run against a throwaway SQLite file (aiosqlite) per
test; the app's session dependencies are overridden to use it.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key-not-for-production")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from taskshare.infrastructure.persistence import models
from taskshare.infrastructure.persistence.database import (
    Base,
    get_db,
    get_db_transactional,
)
from taskshare.infrastructure.security.jwt import create_access_token
from taskshare.main import app


@pytest.fixture
async def session_factory(tmp_path) -> async_sessionmaker[AsyncSession]:
    """Session factory bound to a fresh SQLite file with all tables created."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'taskshare.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield async_sessionmaker(
        bind=engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
    )
    await engine.dispose()


@pytest.fixture
async def db_session(session_factory) -> AsyncSession:
    """Session for repository tests. Rolls back after test."""
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
async def users(session_factory) -> dict[str, str]:
    """Insert alice, bob and carol; return name -> user id."""
    ids: dict[str, str] = {}
    async with session_factory() as session:
        async with session.begin():
            for name in ("alice", "bob", "carol"):
                user = models.User(
                    name=name.title(),
                    email=f"{name}@example.com",
                    hashed_password="not-a-real-hash",
                )
                session.add(user)
                await session.flush()
                ids[name] = user.id
    return ids


@pytest.fixture
async def client(session_factory) -> AsyncClient:
    """Async HTTP client against the FastAPI app, sessions bound to the test database."""

    async def _get_db():
        async with session_factory() as session:
            yield session

    async def _get_db_transactional():
        async with session_factory() as session:
            async with session.begin():
                yield session

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_db_transactional] = _get_db_transactional
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def auth_for():
    """Return a function mapping user id -> Bearer header signed with the test key."""

    def _headers(user_id: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {create_access_token(user_id)}"}

    return _headers
