"""Index definitions and the registry that routes record types to indexes."""

from collections.abc import Iterator

from pydantic import BaseModel


class IndexDefinition(BaseModel):
    """A named search index and the record types it accepts.

    An empty record_types list accepts every record type.
    """

    name: str
    record_types: list[str] = []

    def accepts(self, record_type: str) -> bool:
        return not self.record_types or record_type in self.record_types


class IndexSet:
    """Registry of configured search indexes."""

    def __init__(self, definitions: list[IndexDefinition]) -> None:
        self._definitions = {d.name: d for d in definitions}

    def __contains__(self, name: str) -> bool:
        return name in self._definitions

    def __iter__(self) -> Iterator[str]:
        return iter(self._definitions)

    def for_record_type(self, record_type: str) -> list[str]:
        """Names of the indexes a record of this type belongs in."""
        return [name for name, d in self._definitions.items() if d.accepts(record_type)]
