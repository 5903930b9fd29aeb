from dishka import provide

from indexsync.domain.index.command.clear_index import ClearIndexHandler
from indexsync.domain.index.listener import IndexLifecycleHook
from indexsync.domain.record.port.repository import RecordRepository
from indexsync.domain.record.service.lifecycle import RecordLifecycle
from indexsync.util.di.base import Provider
from indexsync.util.di.scope import Scope


class IndexDomainProvider(Provider):
    """Provides the lifecycle hook, the record lifecycle and command handlers."""

    lifecycle_hook = provide(IndexLifecycleHook, scope=Scope.UOW)
    clear_index_handler = provide(ClearIndexHandler, scope=Scope.UOW)

    @provide(scope=Scope.UOW)
    def get_record_lifecycle(
        self,
        records: RecordRepository,
        hook: IndexLifecycleHook,
    ) -> RecordLifecycle:
        return RecordLifecycle(records, [hook])
