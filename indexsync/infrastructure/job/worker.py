"""JobWorker - polls the job queue and executes claimed jobs."""

import asyncio
import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from enum import Enum

from dishka import AsyncContainer

from indexsync.config import JobsConfig
from indexsync.domain.shared.job import JobHandlerRegistry
from indexsync.domain.shared.job_queue import JobQueue
from indexsync.util.di.scope import Scope

logger = logging.getLogger(__name__)


class WorkerStatus(Enum):
    """Status of a running worker."""

    IDLE = "idle"
    CLAIMING = "claiming"
    PROCESSING = "processing"
    STOPPING = "stopping"


@dataclass
class WorkerState:
    """Runtime state for a worker (not persisted).

    Attributes:
        status: Current worker status.
        last_claim_at: When jobs were last claimed.
        processed_count: Total jobs completed.
        failed_count: Total failed attempts.
        error: Last error if any.
    """

    status: WorkerStatus = WorkerStatus.IDLE
    last_claim_at: datetime | None = None
    processed_count: int = 0
    failed_count: int = 0
    error: Exception | None = None


class JobWorker:
    """Pull-based worker that executes queued jobs.

    Each poll opens a UOW scope, claims up to batch_size pending jobs (oldest
    first) and runs each through its handler. A failing job is returned to
    the queue until max_retries attempts have failed, then marked failed;
    other jobs in the batch are unaffected.
    """

    def __init__(self, config: JobsConfig) -> None:
        self._config = config
        self._state = WorkerState()
        self._shutdown = False
        self._task: asyncio.Task | None = None
        self._container: AsyncContainer | None = None

    @property
    def state(self) -> WorkerState:
        """Current worker state."""
        return self._state

    def set_container(self, container: AsyncContainer) -> None:
        """Set the DI container for scoped dependency resolution."""
        self._container = container

    def start(self) -> asyncio.Task:
        """Start the worker in a background task."""
        if self._container is None:
            raise RuntimeError("Container not set. Call set_container() first.")

        self._shutdown = False
        self._task = asyncio.create_task(self._run(), name="job-worker")
        logger.info("Job worker started")
        return self._task

    def stop(self) -> None:
        """Signal the worker to stop after its current batch."""
        self._shutdown = True
        self._state.status = WorkerStatus.STOPPING
        logger.info("Job worker stopping...")

    async def run_until_empty(self) -> int:
        """Process jobs until a poll finds none. Returns the number of jobs completed."""
        before = self._state.processed_count
        while await self._poll_once():
            pass
        return self._state.processed_count - before

    async def _run(self) -> None:
        try:
            while not self._shutdown:
                had_jobs = await self._poll_once()
                if not had_jobs:
                    await asyncio.sleep(self._config.poll_interval)
        except asyncio.CancelledError:
            logger.info("Job worker cancelled")
            raise
        except Exception as e:
            logger.exception(f"Job worker crashed: {e}")
            self._state.error = e
            raise
        finally:
            logger.info("Job worker stopped")

    async def _poll_once(self) -> bool:
        """Claim and execute one batch of jobs.

        Returns:
            True if jobs were claimed, False if the queue was empty.
        """
        if self._container is None:
            raise RuntimeError("Container not set")

        self._state.status = WorkerStatus.CLAIMING

        async with self._container(scope=Scope.UOW) as scope:
            queue = await scope.get(JobQueue)
            jobs = await queue.claim(limit=self._config.batch_size)

            if not jobs:
                self._state.status = WorkerStatus.IDLE
                return False

            self._state.status = WorkerStatus.PROCESSING
            self._state.last_claim_at = datetime.now(UTC)
            handlers = await scope.get(JobHandlerRegistry)

            try:
                for job in jobs:
                    job_name = type(job).__name__
                    try:
                        await handlers.for_job(job).handle(job)
                    except Exception as e:
                        self._state.failed_count += 1
                        self._state.error = e
                        will_retry = await queue.mark_failed_with_retry(
                            job.id,
                            str(e),
                            max_retries=self._config.max_retries,
                        )
                        outcome = "will retry" if will_retry else "giving up"
                        logger.error(f"{job_name} {job.id} failed ({outcome}): {e}")
                        continue

                    await queue.mark_completed(job.id)
                    self._state.processed_count += 1
                    logger.debug(f"{job_name} {job.id} completed")
            finally:
                self._state.status = WorkerStatus.IDLE

        return True
