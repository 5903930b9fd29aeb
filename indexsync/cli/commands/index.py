"""Search index commands."""

import asyncio
import sys

import cyclopts

from indexsync.cli.console import get_console
from indexsync.cli.util.runtime import open_container
from indexsync.domain.index.command.clear_index import ClearIndex, ClearIndexHandler, IndexCleared
from indexsync.domain.index.listener import IndexLifecycleHook
from indexsync.domain.shared.error import IndexSyncError, ValidationError
from indexsync.util.limits import raise_resource_limits

app = cyclopts.App(name="index", help="Search index commands")


@app.command
def clear(index: str | None = None) -> None:
    """Remove every document from a search index.

    Runs through the sync job runner or the job queue depending on
    indexing.use_sync_jobs.

    Args:
        index: Name of the index to clear.
    """
    console = get_console()
    raise_resource_limits()

    try:
        result = asyncio.run(_clear(index))
    except ValidationError as e:
        console.error(e.message, hint="Usage: indexsync index clear --index NAME")
        sys.exit(1)
    except IndexSyncError as e:
        console.error(e.message)
        sys.exit(1)

    if result.queued:
        console.success(f"Queued clear of index '{result.index}' (job {result.job_id})")
        console.info("Run 'indexsync jobs run' to process queued jobs")
    else:
        console.success(f"Cleared index '{result.index}'")


@app.command
def configure() -> None:
    """Create any configured index that does not exist in the search backend yet."""
    console = get_console()

    try:
        asyncio.run(_configure())
    except IndexSyncError as e:
        console.error(e.message)
        sys.exit(1)

    console.success("Search indexes configured")


async def _clear(index: str | None) -> IndexCleared:
    container = open_container()
    try:
        async with container() as scope:
            handler = await scope.get(ClearIndexHandler)
            return await handler.run(ClearIndex(index=index))
    finally:
        await container.close()


async def _configure() -> None:
    container = open_container()
    try:
        async with container() as scope:
            hook = await scope.get(IndexLifecycleHook)
            await hook.on_build()
    finally:
        await container.close()
