"""SearchBackend protocol - the search service client."""

from typing import Protocol

from indexsync.domain.record.model.record import IndexableRecord, Record


class SearchBackend(Protocol):
    """Client for the external search service.

    Implementations raise SearchBackendError when the service fails.
    """

    async def add_document(self, record: Record) -> None:
        """Add or replace the record's document in every index accepting its type."""
        ...

    async def remove_document(self, record: IndexableRecord) -> None:
        """Remove the record's document from every index accepting its type.

        Removing a document that is not indexed is not an error.
        """
        ...

    async def configure(self) -> None:
        """Create any configured index that does not exist yet."""
        ...

    async def clear_index(self, index_name: str) -> None:
        """Remove every document from the named index.

        Raises:
            NotFoundError: If the index is not configured.
        """
        ...
