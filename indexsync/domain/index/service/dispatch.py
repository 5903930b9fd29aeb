"""DispatchPolicy - decides between in-process and queued execution."""

from indexsync.config import Config, IndexingConfig
from indexsync.domain.shared.service import Service


class DispatchPolicy(Service):
    """Reads the indexing flags from Config at call time.

    Nothing is cached: replacing config.indexing, or changing a field on it,
    takes effect on the next call. The two flags are independent.
    use_sync_jobs governs bulk jobs such as clearing an index (sync job runner
    vs. queue), while use_queued_indexing governs per-record hooks (direct
    backend call vs. queue).
    """

    config: Config

    @property
    def settings(self) -> IndexingConfig:
        return self.config.indexing

    def should_run_synchronously(self) -> bool:
        """Whether bulk jobs run in-process via the job runner."""
        return self.settings.use_sync_jobs

    def should_queue_indexing(self) -> bool:
        """Whether per-record index/remove operations are queued as jobs."""
        return self.settings.use_queued_indexing

    def index_enabled(self, record_type: str) -> bool:
        """Whether lifecycle events for this record type touch the index at all."""
        if not self.settings.enable_indexer:
            return False
        return record_type not in self.settings.excluded_types
