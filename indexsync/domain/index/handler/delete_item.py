"""DeleteItemJobHandler - executes a queued removal request."""

from datetime import UTC, datetime

import logfire

from indexsync.domain.index.job import DeleteItemJob
from indexsync.domain.index.port.search_backend import SearchBackend
from indexsync.domain.record.model.record import RecordRef
from indexsync.domain.record.port.repository import RecordRepository
from indexsync.domain.shared.job import JobHandler


class DeleteItemJobHandler(JobHandler[DeleteItemJob]):
    backend: SearchBackend
    records: RecordRepository

    async def handle(self, job: DeleteItemJob) -> None:
        ref = RecordRef(record_type=job.record_type, id=job.record_id, versioned=job.versioned)

        with logfire.span("DeleteItemJobHandler", record=str(ref)):
            await self.backend.remove_document(ref)
            # No-op when the record row is already gone
            await self.records.touch_last_indexed(ref, datetime.now(UTC))
            logfire.info("Record removed from index", record=str(ref))
