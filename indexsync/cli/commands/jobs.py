"""Job queue commands."""

import asyncio

import cyclopts

from indexsync.cli.console import get_console
from indexsync.cli.util.runtime import open_container
from indexsync.domain.shared.job import JobStatus
from indexsync.domain.shared.job_queue import JobQueue
from indexsync.infrastructure.job.worker import JobWorker

app = cyclopts.App(name="jobs", help="Inspect and process queued jobs")


@app.command
def run(forever: bool = False) -> None:
    """Process queued jobs.

    Args:
        forever: Keep polling for new jobs instead of exiting when the queue is empty.
    """
    console = get_console()

    try:
        processed = asyncio.run(_run_worker(forever))
    except KeyboardInterrupt:
        console.warning("Interrupted")
        return

    console.success(f"Processed {processed} job{'s' if processed != 1 else ''}")


@app.command(name="list")
def list_jobs(status: JobStatus | None = None, limit: int = 20) -> None:
    """List recent jobs, newest first.

    Args:
        status: Only show jobs with this status.
        limit: Maximum number of jobs to show.
    """
    console = get_console()
    rows = asyncio.run(_list_jobs(status, limit))

    if not rows:
        console.info("No jobs")
        return

    console.table(
        rows,
        [
            ("id", "ID"),
            ("type", "Type"),
            ("status", "Status"),
            ("attempts", "Attempts"),
            ("error", "Error"),
        ],
        title="Jobs",
    )


async def _run_worker(forever: bool) -> int:
    container = open_container()
    try:
        worker = await container.get(JobWorker)
        worker.set_container(container)
        if forever:
            await worker.start()
            return worker.state.processed_count
        return await worker.run_until_empty()
    finally:
        await container.close()


async def _list_jobs(status: JobStatus | None, limit: int) -> list[dict]:
    container = open_container()
    try:
        async with container() as scope:
            queue = await scope.get(JobQueue)
            jobs = await queue.list_jobs(status=status, limit=limit)
    finally:
        await container.close()

    return [
        {
            "id": str(job.id),
            "type": type(job).__name__,
            "status": job_status.value,
            "attempts": attempts,
            "error": error or "",
        }
        for job, job_status, attempts, error in jobs
    ]
