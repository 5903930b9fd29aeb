"""Engine, session factory and schema setup for the record and job stores."""

from pathlib import Path

from sqlalchemy.engine import URL, make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from indexsync.config import DatabaseConfig
from indexsync.infrastructure.persistence.tables import metadata


def resolve_database_url(raw: str) -> URL:
    """Parse a database url, making SQLite file paths absolute.

    ~ is expanded and the directory holding the database file is created.
    In-memory SQLite and server databases are returned unchanged.
    """
    url = make_url(raw)
    if url.get_backend_name() != "sqlite" or url.database in (None, "", ":memory:"):
        return url

    db_file = Path(url.database).expanduser().resolve()
    db_file.parent.mkdir(parents=True, exist_ok=True)
    return url.set(database=str(db_file))


def create_db_engine(config: DatabaseConfig) -> AsyncEngine:
    """Create the async engine for the configured database.

    SQLite shares one connection (StaticPool) so :memory: databases survive
    across units of work; other backends get a pre-pinged connection pool.
    """
    url = resolve_database_url(config.url)

    if url.get_backend_name() == "sqlite":
        return create_async_engine(
            url,
            echo=config.echo,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )
    return create_async_engine(url, echo=config.echo, pool_pre_ping=True)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Sessions used as units of work; objects stay usable after commit."""
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)


async def create_tables(engine: AsyncEngine) -> None:
    """Create the records, records_live and jobs tables if missing."""
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
