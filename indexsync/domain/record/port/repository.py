from datetime import datetime
from typing import Protocol

from indexsync.domain.record.model.record import IndexableRecord, Record


class RecordRepository(Protocol):
    """Storage for records with a draft stage and a live (published) stage."""

    async def get(self, record_type: str, record_id: str) -> Record | None:
        """Get the draft copy of a record."""
        ...

    async def get_live(self, record_type: str, record_id: str) -> Record | None:
        """Get the published copy of a record."""
        ...

    async def save(self, record: Record) -> None:
        """Insert or update the draft copy."""
        ...

    async def publish(self, record: Record) -> None:
        """Copy the record into the live stage."""
        ...

    async def unpublish(self, record: IndexableRecord) -> None:
        """Remove the record from the live stage."""
        ...

    async def delete(self, record: IndexableRecord) -> None:
        """Remove the record from both stages."""
        ...

    async def touch_last_indexed(self, record: IndexableRecord, at: datetime) -> None:
        """Stamp the last-indexed time on the draft row, and the live row if versioned."""
        ...
