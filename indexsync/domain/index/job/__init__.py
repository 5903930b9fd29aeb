"""Index jobs - deferred search index operations."""

from indexsync.domain.index.job.clear_index import ClearIndexJob
from indexsync.domain.index.job.delete_item import DeleteItemJob
from indexsync.domain.index.job.index_item import IndexItemJob

__all__ = [
    "ClearIndexJob",
    "DeleteItemJob",
    "IndexItemJob",
]
