"""InMemorySearchBackend - process-local search index for development and tests."""

import logging
from collections import defaultdict
from typing import Any

from indexsync.domain.index.model.document import document_id, to_document
from indexsync.domain.index.model.index import IndexSet
from indexsync.domain.record.model.record import IndexableRecord, Record
from indexsync.domain.shared.error import NotFoundError

logger = logging.getLogger(__name__)


class InMemorySearchBackend:
    def __init__(self, indexes: IndexSet) -> None:
        self._indexes = indexes
        self._documents: dict[str, dict[str, dict[str, Any]]] = defaultdict(dict)

    def documents(self, index_name: str) -> dict[str, dict[str, Any]]:
        """Documents currently held by an index, keyed by document id."""
        return dict(self._documents.get(index_name, {}))

    async def add_document(self, record: Record) -> None:
        for index_name in self._indexes.for_record_type(record.record_type):
            self._documents[index_name][document_id(record)] = to_document(record)

    async def remove_document(self, record: IndexableRecord) -> None:
        for index_name in self._indexes.for_record_type(record.record_type):
            self._documents[index_name].pop(document_id(record), None)

    async def configure(self) -> None:
        for index_name in self._indexes:
            self._documents.setdefault(index_name, {})

    async def clear_index(self, index_name: str) -> None:
        if index_name not in self._indexes:
            raise NotFoundError(f"Index '{index_name}' is not configured")
        self._documents[index_name] = {}
        logger.debug(f"Cleared in-memory index '{index_name}'")
