"""SQLAlchemy table definitions - dialect-agnostic (works with SQLite and PostgreSQL)."""

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    text,
)
from sqlalchemy.types import JSON

metadata = MetaData()


def _record_columns() -> list[Column]:
    return [
        Column("record_type", String(128), primary_key=True),
        Column("id", String, primary_key=True),
        Column("content", JSON, nullable=False),
        Column("versioned", Boolean, nullable=False, server_default=text("false")),
        Column("last_indexed", DateTime(timezone=True), nullable=True),
    ]


# ============================================================================
# RECORDS TABLES (draft stage and live stage share one shape)
# ============================================================================
records_table = Table("records", metadata, *_record_columns())

records_live_table = Table("records_live", metadata, *_record_columns())


# ============================================================================
# JOBS TABLE (queued and synchronously-recorded jobs)
# ============================================================================
jobs_table = Table(
    "jobs",
    metadata,
    Column("id", String, primary_key=True),
    Column("job_type", String(128), nullable=False),
    Column("payload", JSON, nullable=False),
    Column("status", String(32), nullable=False, server_default=text("'pending'")),
    Column("attempts", Integer, nullable=False, server_default=text("0")),
    Column("error", Text, nullable=True),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=False),
)

# Worker polling index
Index("idx_jobs_status_created", jobs_table.c.status, jobs_table.c.created_at)
