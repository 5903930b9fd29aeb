"""End-to-end wiring: record lifecycle through the DI container."""

import pytest
import pytest_asyncio

from indexsync.application.di import create_container
from indexsync.config import Config, DatabaseConfig, IndexingConfig, SearchConfig
from indexsync.domain.index.model.index import IndexDefinition
from indexsync.domain.index.port.search_backend import SearchBackend
from indexsync.domain.record.model.record import Record
from indexsync.domain.record.port.repository import RecordRepository
from indexsync.domain.record.service.lifecycle import RecordLifecycle
from indexsync.domain.shared.job import JobStatus
from indexsync.domain.shared.job_queue import JobQueue
from indexsync.infrastructure.job.worker import JobWorker


def make_config(**indexing) -> Config:
    return Config(
        indexing=IndexingConfig(**indexing),
        search=SearchConfig(backend="memory", indexes=[IndexDefinition(name="main")]),
        database=DatabaseConfig(url="sqlite+aiosqlite:///:memory:"),
    )


@pytest_asyncio.fixture
async def make_container():
    containers = []

    def factory(**indexing):
        container = create_container(make_config(**indexing))
        containers.append(container)
        return container

    yield factory

    for container in containers:
        await container.close()


def page(**content) -> Record:
    return Record(id="42", record_type="Page", content=content or {"title": "Hello"}, versioned=True)


class TestImmediateIndexing:
    @pytest.mark.asyncio
    async def test_publish_indexes_and_stamps(self, make_container):
        container = make_container()

        async with container() as scope:
            lifecycle = await scope.get(RecordLifecycle)
            await lifecycle.publish(page())

        backend = await container.get(SearchBackend)
        assert "Page_42" in backend.documents("main")

        async with container() as scope:
            records = await scope.get(RecordRepository)
            draft = await records.get("Page", "42")
            live = await records.get_live("Page", "42")

        assert draft is not None and draft.last_indexed is not None
        assert live is not None and live.last_indexed is not None

    @pytest.mark.asyncio
    async def test_ineligible_record_is_not_indexed(self, make_container):
        container = make_container()

        async with container() as scope:
            lifecycle = await scope.get(RecordLifecycle)
            await lifecycle.publish(page(title="Hidden", show_in_search=False))

        backend = await container.get(SearchBackend)
        assert backend.documents("main") == {}

    @pytest.mark.asyncio
    async def test_delete_removes_document(self, make_container):
        container = make_container()

        async with container() as scope:
            lifecycle = await scope.get(RecordLifecycle)
            await lifecycle.publish(page())
            await lifecycle.delete(page())

        backend = await container.get(SearchBackend)
        assert backend.documents("main") == {}

    @pytest.mark.asyncio
    async def test_excluded_type_is_ignored(self, make_container):
        container = make_container(excluded_types=["Page"])

        async with container() as scope:
            lifecycle = await scope.get(RecordLifecycle)
            await lifecycle.publish(page())

        backend = await container.get(SearchBackend)
        assert backend.documents("main") == {}


class TestQueuedIndexing:
    @pytest.mark.asyncio
    async def test_publish_queues_then_worker_indexes(self, make_container):
        container = make_container(use_queued_indexing=True)

        async with container() as scope:
            lifecycle = await scope.get(RecordLifecycle)
            await lifecycle.publish(page())

        backend = await container.get(SearchBackend)
        assert backend.documents("main") == {}

        async with container() as scope:
            records = await scope.get(RecordRepository)
            draft = await records.get("Page", "42")
            assert draft is not None and draft.last_indexed is None
            assert await (await scope.get(JobQueue)).count(JobStatus.PENDING) == 1

        worker = await container.get(JobWorker)
        worker.set_container(container)
        processed = await worker.run_until_empty()

        assert processed == 1
        assert "Page_42" in backend.documents("main")

        async with container() as scope:
            queue = await scope.get(JobQueue)
            assert await queue.count(JobStatus.COMPLETED) == 1
            records = await scope.get(RecordRepository)
            draft = await records.get("Page", "42")
            assert draft is not None and draft.last_indexed is not None

    @pytest.mark.asyncio
    async def test_worker_indexes_published_content_not_later_draft(self, make_container):
        container = make_container(use_queued_indexing=True)

        async with container() as scope:
            lifecycle = await scope.get(RecordLifecycle)
            await lifecycle.publish(page(title="Published"))
            await lifecycle.save(page(title="Unpublished draft edit"))

        worker = await container.get(JobWorker)
        worker.set_container(container)
        assert await worker.run_until_empty() == 1

        backend = await container.get(SearchBackend)
        assert backend.documents("main")["Page_42"]["title"] == "Published"

    @pytest.mark.asyncio
    async def test_job_for_unpublished_record_indexes_nothing(self, make_container):
        container = make_container(use_queued_indexing=True)

        async with container() as scope:
            lifecycle = await scope.get(RecordLifecycle)
            await lifecycle.publish(page())
            records = await scope.get(RecordRepository)
            await records.unpublish(page())

        worker = await container.get(JobWorker)
        worker.set_container(container)
        assert await worker.run_until_empty() == 1

        backend = await container.get(SearchBackend)
        assert backend.documents("main") == {}

    @pytest.mark.asyncio
    async def test_queued_delete_runs_after_row_is_gone(self, make_container):
        container = make_container(use_queued_indexing=True)
        backend = await container.get(SearchBackend)
        await backend.add_document(page())

        async with container() as scope:
            lifecycle = await scope.get(RecordLifecycle)
            await lifecycle.save(page())
            await lifecycle.delete(page())

        worker = await container.get(JobWorker)
        worker.set_container(container)

        assert await worker.run_until_empty() == 1
        assert backend.documents("main") == {}
