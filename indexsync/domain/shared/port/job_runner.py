from typing import Protocol

from indexsync.domain.shared.job import Job


class JobRunner(Protocol):
    """Executes a job in the current process, bypassing the queue."""

    async def run_job(self, job: Job, persist: bool = True) -> None:
        """Run a job now.

        Args:
            job: The job to execute.
            persist: Record the run in the job store.
        """
        ...
