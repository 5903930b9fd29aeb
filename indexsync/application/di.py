from dishka import AsyncContainer, from_context, make_async_container

from indexsync.config import Config
from indexsync.domain.index.util.di.provider import IndexDomainProvider
from indexsync.infrastructure.index.di import IndexProvider
from indexsync.infrastructure.job.di import JobProvider
from indexsync.infrastructure.persistence.di import PersistenceProvider
from indexsync.util.di.base import Provider
from indexsync.util.di.scope import Scope


class ConfigProvider(Provider):
    config = from_context(provides=Config, scope=Scope.APP)


def create_container(config: Config | None = None) -> AsyncContainer:
    # Pydantic Settings populates from env vars at runtime
    if config is None:
        config = Config()  # type: ignore[call-arg]

    return make_async_container(
        ConfigProvider(),
        PersistenceProvider(),
        IndexProvider(),
        JobProvider(),
        IndexDomainProvider(),
        context={Config: config},
        scopes=Scope,  # type: ignore[arg-type]  # Custom scope class
    )
