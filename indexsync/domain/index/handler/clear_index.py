"""ClearIndexJobHandler - empties one search index."""

import logfire

from indexsync.domain.index.job import ClearIndexJob
from indexsync.domain.index.port.search_backend import SearchBackend
from indexsync.domain.shared.job import JobHandler


class ClearIndexJobHandler(JobHandler[ClearIndexJob]):
    backend: SearchBackend

    async def handle(self, job: ClearIndexJob) -> None:
        with logfire.span("ClearIndexJobHandler", index=job.index_name):
            await self.backend.clear_index(job.index_name)
            logfire.info("Search index cleared", index=job.index_name)
