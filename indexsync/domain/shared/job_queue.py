"""JobQueue - domain service for deferred job execution."""

import logging

from indexsync.domain.shared.job import Job, JobId, JobStatus
from indexsync.domain.shared.port.job_repository import JobRepository
from indexsync.domain.shared.service import Service

logger = logging.getLogger(__name__)


class JobQueue(Service):
    """Queue of jobs awaiting asynchronous execution.

    Wraps JobRepository with queue semantics. Business code uses queue_job()
    to submit work; the JobWorker claims jobs and marks them completed or
    failed. Submission is persisted within the caller's unit of work.
    """

    _repo: JobRepository

    async def queue_job(self, job: Job) -> None:
        """Submit a job for asynchronous execution."""
        await self._repo.save(job, status=JobStatus.PENDING)
        logger.debug(f"Queued {type(job).__name__} {job.id}")

    async def claim(self, limit: int = 20) -> list[Job]:
        """Claim the oldest pending jobs for execution (FIFO)."""
        return await self._repo.claim_pending(limit)

    async def mark_completed(self, job_id: JobId) -> None:
        """Mark a job as successfully executed."""
        await self._repo.update_status(job_id, JobStatus.COMPLETED)

    async def mark_failed_with_retry(
        self,
        job_id: JobId,
        error: str,
        max_retries: int = 3,
    ) -> bool:
        """Record a failed attempt, returning the job to the queue if retries remain.

        Returns:
            True if the job will be retried, False if it is now failed.
        """
        attempts = await self._repo.increment_attempts(job_id)
        if attempts < max_retries:
            await self._repo.update_status(job_id, JobStatus.PENDING, error=error)
            return True
        await self._repo.update_status(job_id, JobStatus.FAILED, error=error)
        return False

    async def record_run(self, job: Job, error: str | None = None) -> None:
        """Record a job that was executed synchronously outside the queue."""
        status = JobStatus.FAILED if error else JobStatus.COMPLETED
        await self._repo.save(job, status=status, error=error)

    async def list_jobs(
        self,
        status: JobStatus | None = None,
        limit: int = 50,
    ) -> list[tuple[Job, JobStatus, int, str | None]]:
        return await self._repo.list_jobs(status=status, limit=limit)

    async def count(self, status: JobStatus | None = None) -> int:
        return await self._repo.count(status=status)
