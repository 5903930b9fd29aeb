"""Dependency injection provider for the search backend."""

from typing import AsyncIterable, NewType

import httpx
from dishka import provide

from indexsync.config import Config
from indexsync.domain.index.model.index import IndexSet
from indexsync.domain.index.port.search_backend import SearchBackend
from indexsync.domain.index.service.dispatch import DispatchPolicy
from indexsync.domain.index.service.eligibility import EligibilityChecks
from indexsync.infrastructure.index.http.backend import HttpSearchBackend
from indexsync.infrastructure.index.memory import InMemorySearchBackend
from indexsync.util.di.base import Provider
from indexsync.util.di.scope import Scope

SearchHttpClient = NewType("SearchHttpClient", httpx.AsyncClient)


class IndexProvider(Provider):
    """Provides the configured search backend and indexing policy."""

    @provide(scope=Scope.APP)
    def get_indexes(self, config: Config) -> IndexSet:
        return IndexSet(config.search.indexes)

    @provide(scope=Scope.APP)
    async def get_http_client(self, config: Config) -> AsyncIterable[SearchHttpClient]:
        headers = {}
        if config.search.api_key:
            headers["Authorization"] = f"ApiKey {config.search.api_key}"

        client = httpx.AsyncClient(
            base_url=config.search.url,
            headers=headers,
            timeout=config.search.timeout,
        )
        yield SearchHttpClient(client)
        await client.aclose()

    @provide(scope=Scope.APP)
    def get_backend(
        self,
        config: Config,
        indexes: IndexSet,
        client: SearchHttpClient,
    ) -> SearchBackend:
        if config.search.backend == "memory":
            return InMemorySearchBackend(indexes)
        return HttpSearchBackend(client, indexes)

    @provide(scope=Scope.APP)
    def get_dispatch_policy(self, config: Config) -> DispatchPolicy:
        return DispatchPolicy(config=config)

    @provide(scope=Scope.APP)
    def get_eligibility(self) -> EligibilityChecks:
        return EligibilityChecks()
