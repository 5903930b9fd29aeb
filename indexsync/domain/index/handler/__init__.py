"""Index job handlers."""

from indexsync.domain.index.handler.clear_index import ClearIndexJobHandler
from indexsync.domain.index.handler.delete_item import DeleteItemJobHandler
from indexsync.domain.index.handler.index_item import IndexItemJobHandler

__all__ = ["ClearIndexJobHandler", "DeleteItemJobHandler", "IndexItemJobHandler"]
