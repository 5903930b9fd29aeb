"""SyncJobRunner - executes jobs in-process without queueing them."""

import logging

from indexsync.domain.shared.job import Job, JobHandlerRegistry
from indexsync.domain.shared.job_queue import JobQueue
from indexsync.domain.shared.port.job_runner import JobRunner

logger = logging.getLogger(__name__)


class SyncJobRunner(JobRunner):
    """Runs a job immediately through its registered handler.

    With persist=True the run is written to the job store as completed or
    failed, so it shows up alongside queued jobs. Handler errors are logged
    and re-raised to the caller.
    """

    def __init__(self, handlers: JobHandlerRegistry, jobs: JobQueue) -> None:
        self._handlers = handlers
        self._jobs = jobs

    async def run_job(self, job: Job, persist: bool = True) -> None:
        handler = self._handlers.for_job(job)
        job_name = type(job).__name__

        logger.info(f"Running {job_name} {job.id} synchronously")
        try:
            await handler.handle(job)
        except Exception as e:
            logger.error(f"{job_name} {job.id} failed: {e}")
            if persist:
                await self._jobs.record_run(job, error=str(e))
            raise

        if persist:
            await self._jobs.record_run(job)
        logger.info(f"{job_name} {job.id} completed")
