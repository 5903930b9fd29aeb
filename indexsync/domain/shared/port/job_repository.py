"""JobRepository port - persistence for queued and executed jobs."""

from typing import Protocol

from indexsync.domain.shared.job import Job, JobId, JobStatus


class JobRepository(Protocol):
    """Repository for jobs - pure data access.

    Queue semantics (claiming, retries) are handled by the JobQueue service.
    """

    async def save(self, job: Job, status: JobStatus, error: str | None = None) -> None:
        """Persist a job with the given status."""
        ...

    async def claim_pending(self, limit: int) -> list[Job]:
        """Move up to `limit` oldest pending jobs to running and return them."""
        ...

    async def update_status(
        self,
        job_id: JobId,
        status: JobStatus,
        error: str | None = None,
    ) -> None:
        """Update a job's status."""
        ...

    async def increment_attempts(self, job_id: JobId) -> int:
        """Record a failed attempt and return the new attempt count."""
        ...

    async def list_jobs(
        self,
        status: JobStatus | None = None,
        limit: int = 50,
    ) -> list[tuple[Job, JobStatus, int, str | None]]:
        """List jobs newest first as (job, status, attempts, error) tuples."""
        ...

    async def count(self, status: JobStatus | None = None) -> int:
        """Count jobs, optionally filtered by status."""
        ...
