"""Dependency injection provider for the job system."""

from dishka import provide

from indexsync.config import Config
from indexsync.domain.index.handler import (
    ClearIndexJobHandler,
    DeleteItemJobHandler,
    IndexItemJobHandler,
)
from indexsync.domain.shared.job import JobHandlerRegistry
from indexsync.domain.shared.job_queue import JobQueue
from indexsync.domain.shared.port.job_repository import JobRepository
from indexsync.domain.shared.port.job_runner import JobRunner
from indexsync.infrastructure.job.runner import SyncJobRunner
from indexsync.infrastructure.job.worker import JobWorker
from indexsync.util.di.base import Provider
from indexsync.util.di.scope import Scope


class JobProvider(Provider):
    """Provides the job queue, handlers, sync runner and worker.

    Queue, handlers and runner are UOW-scoped (they share the UOW session).
    JobWorker is APP-scoped.
    """

    @provide(scope=Scope.UOW)
    def get_job_queue(self, repo: JobRepository) -> JobQueue:
        return JobQueue(repo)

    clear_index_handler = provide(ClearIndexJobHandler, scope=Scope.UOW)
    index_item_handler = provide(IndexItemJobHandler, scope=Scope.UOW)
    delete_item_handler = provide(DeleteItemJobHandler, scope=Scope.UOW)

    @provide(scope=Scope.UOW)
    def get_handler_registry(
        self,
        clear_index: ClearIndexJobHandler,
        index_item: IndexItemJobHandler,
        delete_item: DeleteItemJobHandler,
    ) -> JobHandlerRegistry:
        return JobHandlerRegistry((clear_index, index_item, delete_item))

    @provide(scope=Scope.UOW)
    def get_job_runner(self, handlers: JobHandlerRegistry, jobs: JobQueue) -> JobRunner:
        return SyncJobRunner(handlers, jobs)

    @provide(scope=Scope.APP)
    def get_worker(self, config: Config) -> JobWorker:
        return JobWorker(config.jobs)
