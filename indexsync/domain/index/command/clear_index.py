"""ClearIndex command - empty a search index through the job system."""

import logfire

from indexsync.domain.index.job import ClearIndexJob
from indexsync.domain.index.service.dispatch import DispatchPolicy
from indexsync.domain.shared.command import Command, CommandHandler, Result
from indexsync.domain.shared.error import ValidationError
from indexsync.domain.shared.job import JobId
from indexsync.domain.shared.job_queue import JobQueue
from indexsync.domain.shared.port.job_runner import JobRunner


class ClearIndex(Command):
    index: str | None = None


class IndexCleared(Result):
    index: str
    job_id: JobId
    queued: bool


class ClearIndexHandler(CommandHandler[ClearIndex, IndexCleared]):
    """Builds a ClearIndexJob and hands it to the sync runner or the queue.

    Synchronous runs go through the job runner, never straight to the backend.
    """

    policy: DispatchPolicy
    runner: JobRunner
    jobs: JobQueue

    async def run(self, cmd: ClearIndex) -> IndexCleared:
        index = (cmd.index or "").strip()
        if not index:
            raise ValidationError("Must specify an index in the 'index' parameter.", field="index")

        with logfire.span("ClearIndex"):
            job = ClearIndexJob(index_name=index)

            if self.policy.should_run_synchronously():
                await self.runner.run_job(job, persist=False)
                logfire.info("Index cleared synchronously", index=index, job_id=str(job.id))
                return IndexCleared(index=index, job_id=job.id, queued=False)

            await self.jobs.queue_job(job)
            logfire.info("Clear index job queued", index=index, job_id=str(job.id))
            return IndexCleared(index=index, job_id=job.id, queued=True)
