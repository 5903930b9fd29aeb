"""SQLAlchemy adapter implementing JobRepository."""

from datetime import UTC, datetime

from sqlalchemy import func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from indexsync.domain.shared.job import Job, JobId, JobStatus
from indexsync.domain.shared.port.job_repository import JobRepository
from indexsync.infrastructure.persistence.tables import jobs_table


class SQLAlchemyJobRepository(JobRepository):
    """SQLAlchemy-backed job store.

    Claiming uses FOR UPDATE SKIP LOCKED on PostgreSQL so several workers can
    poll concurrently; SQLite ignores the lock clause.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def save(self, job: Job, status: JobStatus, error: str | None = None) -> None:
        now = datetime.now(UTC)
        stmt = insert(jobs_table).values(
            id=str(job.id),
            job_type=type(job).__name__,
            payload=job.model_dump(mode="json"),
            status=status.value,
            attempts=0,
            error=error,
            created_at=job.created_at,
            updated_at=now,
        )
        await self._session.execute(stmt)

    async def claim_pending(self, limit: int) -> list[Job]:
        stmt = (
            select(jobs_table.c.id, jobs_table.c.job_type, jobs_table.c.payload)
            .where(jobs_table.c.status == JobStatus.PENDING.value)
            .order_by(jobs_table.c.created_at.asc())
            .limit(limit)
            .with_for_update(skip_locked=True)
        )
        result = await self._session.execute(stmt)
        rows = result.all()
        if not rows:
            return []

        claimed_ids = [row.id for row in rows]
        await self._session.execute(
            update(jobs_table)
            .where(jobs_table.c.id.in_(claimed_ids))
            .values(status=JobStatus.RUNNING.value, updated_at=datetime.now(UTC))
        )

        return [Job.from_payload(row.job_type, row.payload) for row in rows]

    async def update_status(
        self,
        job_id: JobId,
        status: JobStatus,
        error: str | None = None,
    ) -> None:
        stmt = (
            update(jobs_table)
            .where(jobs_table.c.id == str(job_id))
            .values(status=status.value, error=error, updated_at=datetime.now(UTC))
        )
        await self._session.execute(stmt)

    async def increment_attempts(self, job_id: JobId) -> int:
        await self._session.execute(
            update(jobs_table)
            .where(jobs_table.c.id == str(job_id))
            .values(attempts=jobs_table.c.attempts + 1)
        )
        result = await self._session.execute(
            select(jobs_table.c.attempts).where(jobs_table.c.id == str(job_id))
        )
        return result.scalar_one()

    async def list_jobs(
        self,
        status: JobStatus | None = None,
        limit: int = 50,
    ) -> list[tuple[Job, JobStatus, int, str | None]]:
        stmt = select(
            jobs_table.c.job_type,
            jobs_table.c.payload,
            jobs_table.c.status,
            jobs_table.c.attempts,
            jobs_table.c.error,
        )
        if status is not None:
            stmt = stmt.where(jobs_table.c.status == status.value)
        stmt = stmt.order_by(jobs_table.c.created_at.desc()).limit(limit)

        result = await self._session.execute(stmt)
        return [
            (
                Job.from_payload(row.job_type, row.payload),
                JobStatus(row.status),
                row.attempts,
                row.error,
            )
            for row in result.all()
        ]

    async def count(self, status: JobStatus | None = None) -> int:
        stmt = select(func.count()).select_from(jobs_table)
        if status is not None:
            stmt = stmt.where(jobs_table.c.status == status.value)
        result = await self._session.execute(stmt)
        return result.scalar_one()
