from typing import AsyncIterable

from dishka import provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from indexsync.config import Config
from indexsync.domain.record.port.repository import RecordRepository
from indexsync.domain.shared.port.job_repository import JobRepository
from indexsync.infrastructure.persistence.database import (
    create_db_engine,
    create_session_factory,
    create_tables,
)
from indexsync.infrastructure.persistence.repository.job import SQLAlchemyJobRepository
from indexsync.infrastructure.persistence.repository.record import (
    SQLAlchemyRecordRepository,
)
from indexsync.util.di.base import Provider
from indexsync.util.di.scope import Scope


class PersistenceProvider(Provider):
    # APP-scoped factories
    @provide(scope=Scope.APP)
    async def get_engine(self, config: Config) -> AsyncIterable[AsyncEngine]:
        engine = create_db_engine(config.database)
        if config.database.auto_create:
            await create_tables(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(self, engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    # UOW-scoped session (one per unit of work)
    @provide(scope=Scope.UOW)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterable[AsyncSession]:
        async with session_factory() as session:
            yield session
            await session.commit()

    # UOW-scoped repositories
    record_repo = provide(SQLAlchemyRecordRepository, scope=Scope.UOW, provides=RecordRepository)
    job_repo = provide(SQLAlchemyJobRepository, scope=Scope.UOW, provides=JobRepository)
