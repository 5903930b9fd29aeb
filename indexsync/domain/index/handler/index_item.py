"""IndexItemJobHandler - executes a queued index request."""

import logging
from datetime import UTC, datetime

import logfire

from indexsync.domain.index.job import IndexItemJob
from indexsync.domain.index.port.search_backend import SearchBackend
from indexsync.domain.record.port.repository import RecordRepository
from indexsync.domain.shared.job import JobHandler

logger = logging.getLogger(__name__)


class IndexItemJobHandler(JobHandler[IndexItemJob]):
    """Loads the published copy of the record and pushes it to the search backend.

    Unpublished draft edits are never indexed. A record with no live copy has
    been unpublished or deleted since the job was queued and is skipped.

    Backend errors propagate so the worker can retry the job. The record's
    last-indexed time is stamped only after the backend call succeeds.
    """

    backend: SearchBackend
    records: RecordRepository

    async def handle(self, job: IndexItemJob) -> None:
        with logfire.span(
            "IndexItemJobHandler", record_type=job.record_type, record_id=job.record_id
        ):
            record = await self.records.get_live(job.record_type, job.record_id)
            if record is None:
                logger.warning(
                    f"{job.record_type}#{job.record_id} is not published, "
                    f"skipping index job {job.id}"
                )
                return

            await self.backend.add_document(record)
            await self.records.touch_last_indexed(record, datetime.now(UTC))
            logfire.info("Record indexed", record=str(record))
