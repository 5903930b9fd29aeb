"""Mapping from records to search documents."""

from typing import Any

from indexsync.domain.record.model.record import IndexableRecord, Record


def document_id(record: IndexableRecord) -> str:
    """Backend document id, unique across record types."""
    return f"{record.record_type}_{record.id}"


def to_document(record: Record) -> dict[str, Any]:
    """Build the document body sent to the search backend."""
    return {
        **record.content,
        "record_type": record.record_type,
        "record_id": record.id,
    }
