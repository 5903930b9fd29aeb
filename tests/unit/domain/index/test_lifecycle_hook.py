"""Unit tests for IndexLifecycleHook."""

import logging

import pytest

from indexsync.domain.index.job import DeleteItemJob, IndexItemJob
from indexsync.domain.index.listener import IndexLifecycleHook, IndexOutcome
from indexsync.domain.index.service.eligibility import EligibilityChecks
from indexsync.domain.record.model.record import Record
from indexsync.domain.shared.error import SearchBackendError
from tests.unit.domain.index.fakes import FakeBackend, FakeJobQueue, FakeRecords, make_policy


@pytest.fixture
def page() -> Record:
    return Record(id="42", record_type="Page", content={"title": "About us"}, versioned=True)


@pytest.fixture
def hidden_page() -> Record:
    return Record(id="43", record_type="Page", content={"title": "Draft", "show_in_search": False})


def make_hook(
    backend: FakeBackend | None = None,
    records: FakeRecords | None = None,
    jobs: FakeJobQueue | None = None,
    eligibility: EligibilityChecks | None = None,
    **flags,
) -> IndexLifecycleHook:
    return IndexLifecycleHook(
        backend=backend or FakeBackend(),
        records=records or FakeRecords(),
        jobs=jobs or FakeJobQueue(),
        policy=make_policy(**flags),
        eligibility=eligibility or EligibilityChecks(),
    )


class TestIndexDocument:
    """Tests for IndexLifecycleHook.index_document."""

    @pytest.mark.asyncio
    async def test_ineligible_record_is_not_indexed(self, hidden_page: Record):
        """Ineligible records never reach the backend or the queue."""
        backend, records, jobs = FakeBackend(), FakeRecords(), FakeJobQueue()
        hook = make_hook(backend, records, jobs)

        outcome = await hook.index_document(hidden_page)

        assert outcome == IndexOutcome.SKIPPED
        backend.add_document.assert_not_called()
        jobs.queue_job.assert_not_called()
        assert records.touched == []

    @pytest.mark.asyncio
    async def test_ineligible_in_queued_mode_submits_nothing(self, hidden_page: Record):
        jobs = FakeJobQueue()
        hook = make_hook(jobs=jobs, use_queued_indexing=True)

        outcome = await hook.index_document(hidden_page)

        assert outcome == IndexOutcome.SKIPPED
        assert jobs.jobs == []

    @pytest.mark.asyncio
    async def test_immediate_success_stamps_timestamp_once(self, page: Record):
        backend, records = FakeBackend(), FakeRecords()
        hook = make_hook(backend, records)

        outcome = await hook.index_document(page)

        assert outcome == IndexOutcome.COMPLETED
        assert backend.added == [page]
        assert len(records.touched) == 1
        assert records.touched[0][0] == page

    @pytest.mark.asyncio
    async def test_backend_failure_is_logged_and_swallowed(
        self, page: Record, caplog: pytest.LogCaptureFixture
    ):
        """A failing backend never raises and never stamps the timestamp."""
        backend = FakeBackend(error=SearchBackendError("cluster unavailable"))
        records = FakeRecords()
        hook = make_hook(backend, records)

        with caplog.at_level(logging.ERROR):
            outcome = await hook.index_document(page)

        assert outcome == IndexOutcome.FAILED
        assert records.touched == []
        assert "cluster unavailable" in caplog.text

    @pytest.mark.asyncio
    async def test_unexpected_backend_error_is_also_swallowed(self, page: Record):
        backend = FakeBackend(error=RuntimeError("boom"))
        hook = make_hook(backend)

        assert await hook.index_document(page) == IndexOutcome.FAILED

    @pytest.mark.asyncio
    async def test_queued_mode_submits_one_index_job(self, page: Record):
        backend, records, jobs = FakeBackend(), FakeRecords(), FakeJobQueue()
        hook = make_hook(backend, records, jobs, use_queued_indexing=True)

        outcome = await hook.index_document(page)

        assert outcome == IndexOutcome.QUEUED
        backend.add_document.assert_not_called()
        assert records.touched == []
        assert len(jobs.jobs) == 1
        job = jobs.jobs[0]
        assert isinstance(job, IndexItemJob)
        assert (job.record_type, job.record_id) == ("Page", "42")

    @pytest.mark.asyncio
    async def test_extra_eligibility_check_is_combined_with_and(self, page: Record):
        eligibility = EligibilityChecks()
        eligibility.register(lambda record: record.content.get("title") != "About us")
        backend = FakeBackend()
        hook = make_hook(backend, eligibility=eligibility)

        assert await hook.index_document(page) == IndexOutcome.SKIPPED
        backend.add_document.assert_not_called()


class TestRemoveDocument:
    """Tests for IndexLifecycleHook.remove_document."""

    @pytest.mark.asyncio
    async def test_immediate_remove_ignores_eligibility(self, hidden_page: Record):
        backend, records = FakeBackend(), FakeRecords()
        hook = make_hook(backend, records)

        outcome = await hook.remove_document(hidden_page)

        assert outcome == IndexOutcome.COMPLETED
        assert backend.removed == [hidden_page]
        assert len(records.touched) == 1

    @pytest.mark.asyncio
    async def test_remove_failure_is_swallowed(self, page: Record):
        backend = FakeBackend(error=SearchBackendError("timeout"))
        records = FakeRecords()
        hook = make_hook(backend, records)

        outcome = await hook.remove_document(page)

        assert outcome == IndexOutcome.FAILED
        assert records.touched == []

    @pytest.mark.asyncio
    async def test_queued_mode_submits_one_delete_job(self, page: Record):
        backend, jobs = FakeBackend(), FakeJobQueue()
        hook = make_hook(backend, jobs=jobs, use_queued_indexing=True)

        outcome = await hook.remove_document(page)

        assert outcome == IndexOutcome.QUEUED
        backend.remove_document.assert_not_called()
        assert len(jobs.jobs) == 1
        job = jobs.jobs[0]
        assert isinstance(job, DeleteItemJob)
        assert (job.record_type, job.record_id, job.versioned) == ("Page", "42", True)


class TestLifecycleEvents:
    """Tests for the lifecycle event entry points."""

    @pytest.mark.asyncio
    async def test_publish_indexes(self, page: Record):
        backend = FakeBackend()
        hook = make_hook(backend)

        await hook.on_after_publish(page)

        assert backend.added == [page]

    @pytest.mark.asyncio
    async def test_unpublish_and_delete_remove_regardless_of_eligibility(
        self, hidden_page: Record
    ):
        backend = FakeBackend()
        hook = make_hook(backend)

        await hook.on_after_unpublish(hidden_page)
        await hook.on_before_delete(hidden_page)

        assert backend.removed == [hidden_page, hidden_page]

    @pytest.mark.asyncio
    async def test_disabled_indexer_ignores_events(self, page: Record):
        backend, jobs = FakeBackend(), FakeJobQueue()
        hook = make_hook(backend, jobs=jobs, enable_indexer=False)

        await hook.on_after_publish(page)
        await hook.on_after_unpublish(page)
        await hook.on_before_delete(page)

        backend.add_document.assert_not_called()
        backend.remove_document.assert_not_called()
        jobs.queue_job.assert_not_called()

    @pytest.mark.asyncio
    async def test_excluded_type_ignores_events(self, page: Record):
        backend = FakeBackend()
        hook = make_hook(backend, excluded_types=["Page"])

        await hook.on_after_publish(page)

        backend.add_document.assert_not_called()

    @pytest.mark.asyncio
    async def test_on_build_configures_backend(self):
        backend = FakeBackend()
        hook = make_hook(backend)

        await hook.on_build()

        backend.configure.assert_awaited_once()
