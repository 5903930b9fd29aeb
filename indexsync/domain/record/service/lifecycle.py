"""RecordLifecycle - drives record state transitions and notifies listeners."""

import logging
from typing import Protocol

from indexsync.domain.record.model.record import Record
from indexsync.domain.record.port.repository import RecordRepository

logger = logging.getLogger(__name__)


class LifecycleListener(Protocol):
    """Observer of record lifecycle transitions."""

    async def on_after_publish(self, record: Record) -> None: ...

    async def on_after_unpublish(self, record: Record) -> None: ...

    async def on_before_delete(self, record: Record) -> None: ...


class RecordLifecycle:
    """Performs publish/unpublish/delete and notifies subscribed listeners in order.

    Listener errors propagate to the caller; listeners that must never block
    a transition (such as the search index hook) handle their own failures.
    """

    def __init__(
        self,
        records: RecordRepository,
        listeners: list[LifecycleListener] | None = None,
    ) -> None:
        self._records = records
        self._listeners: list[LifecycleListener] = list(listeners or [])

    def subscribe(self, listener: LifecycleListener) -> None:
        self._listeners.append(listener)

    @property
    def listeners(self) -> list[LifecycleListener]:
        return list(self._listeners)

    async def save(self, record: Record) -> None:
        """Write the draft copy. Saving is not a lifecycle event."""
        await self._records.save(record)

    async def publish(self, record: Record) -> None:
        await self._records.save(record)
        await self._records.publish(record)
        logger.debug(f"Published {record}")

        for listener in self._listeners:
            await listener.on_after_publish(record)

    async def unpublish(self, record: Record) -> None:
        await self._records.unpublish(record)
        logger.debug(f"Unpublished {record}")

        for listener in self._listeners:
            await listener.on_after_unpublish(record)

    async def delete(self, record: Record) -> None:
        for listener in self._listeners:
            await listener.on_before_delete(record)

        await self._records.delete(record)
        logger.debug(f"Deleted {record}")
