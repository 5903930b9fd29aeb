"""IndexLifecycleHook - keeps the search index in step with record lifecycle events."""

import logging
from datetime import UTC, datetime
from enum import StrEnum

from indexsync.domain.index.job import DeleteItemJob, IndexItemJob
from indexsync.domain.index.port.search_backend import SearchBackend
from indexsync.domain.index.service.dispatch import DispatchPolicy
from indexsync.domain.index.service.eligibility import EligibilityChecks
from indexsync.domain.record.model.record import Record
from indexsync.domain.record.port.repository import RecordRepository
from indexsync.domain.shared.job_queue import JobQueue
from indexsync.domain.shared.service import Service

logger = logging.getLogger(__name__)


class IndexOutcome(StrEnum):
    """Result of an index or remove request."""

    SKIPPED = "skipped"  # Record not eligible for search
    QUEUED = "queued"  # Job submitted; runs later in the worker
    COMPLETED = "completed"  # Backend call succeeded, timestamp stamped
    FAILED = "failed"  # Backend call failed; error logged


class IndexLifecycleHook(Service):
    """Lifecycle listener that indexes records on publish and removes them on
    unpublish or delete.

    Each operation either calls the search backend directly (immediate mode)
    or submits a job to the queue (queued mode), as decided by the
    DispatchPolicy at call time. Backend failures in immediate mode are logged
    and reported as IndexOutcome.FAILED, never raised.
    """

    backend: SearchBackend
    records: RecordRepository
    jobs: JobQueue
    policy: DispatchPolicy
    eligibility: EligibilityChecks

    # --- Lifecycle events ---

    async def on_after_publish(self, record: Record) -> None:
        if self.policy.index_enabled(record.record_type):
            await self.index_document(record)

    async def on_after_unpublish(self, record: Record) -> None:
        if self.policy.index_enabled(record.record_type):
            await self.remove_document(record)

    async def on_before_delete(self, record: Record) -> None:
        if self.policy.index_enabled(record.record_type):
            await self.remove_document(record)

    async def on_build(self) -> None:
        """Bring the backend's index settings up to date."""
        await self.backend.configure()

    # --- Operations ---

    async def index_document(self, record: Record) -> IndexOutcome:
        """Index a record into search, or queue it when configured to do so."""
        if not self.eligibility(record):
            logger.debug(f"{record} is not eligible for search, not indexing")
            return IndexOutcome.SKIPPED

        if self.policy.should_queue_indexing():
            job = IndexItemJob(record_type=record.record_type, record_id=record.id)
            await self.jobs.queue_job(job)
            return IndexOutcome.QUEUED

        try:
            await self.backend.add_document(record)
            await self.touch_last_indexed(record)
        except Exception as e:
            logger.error(f"Failed to index {record}: {e}")
            return IndexOutcome.FAILED

        logger.debug(f"Indexed {record}")
        return IndexOutcome.COMPLETED

    async def remove_document(self, record: Record) -> IndexOutcome:
        """Remove a record from search, or queue the removal.

        Eligibility is not checked: a record that became ineligible still has
        to leave a stale index.
        """
        if self.policy.should_queue_indexing():
            job = DeleteItemJob(
                record_type=record.record_type,
                record_id=record.id,
                versioned=record.versioned,
            )
            await self.jobs.queue_job(job)
            return IndexOutcome.QUEUED

        try:
            await self.backend.remove_document(record)
            await self.touch_last_indexed(record)
        except Exception as e:
            logger.error(f"Failed to remove {record} from search: {e}")
            return IndexOutcome.FAILED

        logger.debug(f"Removed {record} from search")
        return IndexOutcome.COMPLETED

    async def touch_last_indexed(self, record: Record) -> None:
        await self.records.touch_last_indexed(record, datetime.now(UTC))
