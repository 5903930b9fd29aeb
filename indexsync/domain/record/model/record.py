"""Record models - the persisted entities that appear in the search index."""

from datetime import datetime
from typing import Any, Protocol

from pydantic import BaseModel

from indexsync.domain.shared.model.value import ValueObject


class IndexableRecord(Protocol):
    """Anything the search backend can address: a full record or a reference."""

    @property
    def id(self) -> str: ...

    @property
    def record_type(self) -> str: ...

    @property
    def versioned(self) -> bool: ...


class RecordRef(ValueObject):
    """Identity of a record that may no longer exist in storage."""

    record_type: str
    id: str
    versioned: bool = False

    def __str__(self) -> str:
        return f"{self.record_type}#{self.id}"


class Record(BaseModel):
    """A persisted record.

    Attributes:
        id: Stable identifier, unique within record_type.
        record_type: Type discriminator (e.g. "Page", "Product").
        content: Field values sent to the search backend.
        versioned: Whether the record has a separate live (published) copy.
        last_indexed: When the record was last pushed to or removed from search.
    """

    id: str
    record_type: str
    content: dict[str, Any] = {}
    versioned: bool = False
    last_indexed: datetime | None = None

    @property
    def ref(self) -> RecordRef:
        return RecordRef(record_type=self.record_type, id=self.id, versioned=self.versioned)

    def __str__(self) -> str:
        return f"{self.record_type}#{self.id}"
