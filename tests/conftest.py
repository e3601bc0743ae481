"""
Shared test fixtures and configuration for entire test suite.

Provides: environment defaults, in-memory SQLite sessions, session cache,
sample domain objects and an end-to-end application client.
Dependencies: pytest, sqlalchemy, fastapi
System role: Test infrastructure and fixture management
"""

import os

# Must be set before chatstore settings are first read
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["SECURITY_API_KEYS"] = "test-key,second-key"
os.environ["SECURITY_API_KEY_HEADER"] = "X-API-KEY"

from datetime import datetime, timezone
import uuid

import pytest
from fastapi.testclient import TestClient

from chatstore.boundary.cache import SessionCache
from chatstore.configs.cache import CacheSettings
from chatstore.models.message import ChatMessage, SenderType
from chatstore.models.session import ChatSession

API_KEY = "test-key"


@pytest.fixture
async def test_async_db():
    """
    Create in-memory SQLite async database for testing.

    Yields:
        AsyncSession: Test database session with cleanup
    """
    from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
    from sqlalchemy.pool import StaticPool
    from chatstore.boundary.db.base import Base

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async_session = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )

    async with async_session() as session:
        yield session
        await session.rollback()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def session_cache() -> SessionCache:
    """Provide an enabled session cache with test-friendly bounds."""
    return SessionCache(CacheSettings(enabled=True, max_size=100, ttl_seconds=60))


@pytest.fixture
def api_headers() -> dict[str, str]:
    """Headers carrying a valid API key."""
    return {"X-API-KEY": API_KEY}


@pytest.fixture
def sample_session() -> ChatSession:
    """Provide a ChatSession domain object."""
    now = datetime.now(timezone.utc)
    return ChatSession(
        id=str(uuid.uuid4()),
        user_id="u1",
        title="Research notes",
        favorite=False,
        created_at=now,
        updated_at=now,
    )


@pytest.fixture
def sample_message(sample_session: ChatSession) -> ChatMessage:
    """Provide a USER ChatMessage belonging to sample_session."""
    return ChatMessage(
        id=str(uuid.uuid4()),
        session_id=sample_session.id,
        sender=SenderType.USER,
        content="hi",
        user_id="u1",
        context=None,
        created_at=datetime.now(timezone.utc),
    )


@pytest.fixture
def app_client():
    """
    Full application against a fresh in-memory database.

    Running inside the TestClient context triggers the lifespan, which
    creates the tables and disposes the engine afterwards.
    """
    from chatstore.api.deps import get_service_cache
    from chatstore.main import create_app

    get_service_cache().clear()
    app = create_app()
    with TestClient(app) as client:
        yield client
    get_service_cache().clear()
