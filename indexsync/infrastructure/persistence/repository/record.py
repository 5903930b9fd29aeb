"""SQLAlchemy adapter implementing RecordRepository."""

from datetime import datetime
from typing import Any

from sqlalchemy import Table, delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from indexsync.domain.record.model.record import IndexableRecord, Record
from indexsync.domain.record.port.repository import RecordRepository
from indexsync.infrastructure.persistence.tables import records_live_table, records_table


class SQLAlchemyRecordRepository(RecordRepository):
    """Records stored in a draft table and a live table of the same shape."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, record_type: str, record_id: str) -> Record | None:
        return await self._get(records_table, record_type, record_id)

    async def get_live(self, record_type: str, record_id: str) -> Record | None:
        return await self._get(records_live_table, record_type, record_id)

    async def save(self, record: Record) -> None:
        await self._upsert(records_table, record)

    async def publish(self, record: Record) -> None:
        await self._upsert(records_live_table, record)

    async def unpublish(self, record: IndexableRecord) -> None:
        await self._session.execute(self._delete(records_live_table, record))

    async def delete(self, record: IndexableRecord) -> None:
        await self._session.execute(self._delete(records_live_table, record))
        await self._session.execute(self._delete(records_table, record))

    async def touch_last_indexed(self, record: IndexableRecord, at: datetime) -> None:
        tables = [records_table]
        if record.versioned:
            tables.append(records_live_table)

        for table in tables:
            stmt = (
                update(table)
                .where(table.c.record_type == record.record_type, table.c.id == record.id)
                .values(last_indexed=at)
            )
            await self._session.execute(stmt)

    async def _get(self, table: Table, record_type: str, record_id: str) -> Record | None:
        stmt = select(table).where(table.c.record_type == record_type, table.c.id == record_id)
        result = await self._session.execute(stmt)
        row = result.mappings().first()
        if row is None:
            return None
        return Record(
            id=row["id"],
            record_type=row["record_type"],
            content=row["content"],
            versioned=row["versioned"],
            last_indexed=row["last_indexed"],
        )

    async def _upsert(self, table: Table, record: Record) -> None:
        values: dict[str, Any] = {
            "content": record.content,
            "versioned": record.versioned,
            "last_indexed": record.last_indexed,
        }
        existing = await self._get(table, record.record_type, record.id)
        if existing is None:
            await self._session.execute(
                table.insert().values(record_type=record.record_type, id=record.id, **values)
            )
        else:
            await self._session.execute(
                update(table)
                .where(table.c.record_type == record.record_type, table.c.id == record.id)
                .values(**values)
            )

    @staticmethod
    def _delete(table: Table, record: IndexableRecord):
        return delete(table).where(
            table.c.record_type == record.record_type, table.c.id == record.id
        )
