"""Fixtures for SQLAlchemy adapter tests against in-memory SQLite."""

import pytest_asyncio
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from indexsync.infrastructure.persistence.database import create_session_factory, create_tables


@pytest_asyncio.fixture
async def engine():
    """Per-test in-memory engine with all tables created."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session(engine):
    factory = create_session_factory(engine)
    async with factory() as session:
        yield session
        await session.rollback()
