"""Tests for InMemorySearchBackend."""

import pytest

from indexsync.domain.index.model.index import IndexDefinition, IndexSet
from indexsync.domain.record.model.record import Record, RecordRef
from indexsync.domain.shared.error import NotFoundError
from indexsync.infrastructure.index.memory import InMemorySearchBackend


@pytest.fixture
def backend() -> InMemorySearchBackend:
    return InMemorySearchBackend(
        IndexSet(
            [
                IndexDefinition(name="pages", record_types=["Page"]),
                IndexDefinition(name="all"),
            ]
        )
    )


class TestInMemorySearchBackend:
    @pytest.mark.asyncio
    async def test_add_routes_by_record_type(self, backend):
        await backend.add_document(Record(id="1", record_type="File", content={"name": "a.pdf"}))

        assert backend.documents("pages") == {}
        assert backend.documents("all") == {
            "File_1": {"name": "a.pdf", "record_type": "File", "record_id": "1"}
        }

    @pytest.mark.asyncio
    async def test_remove_by_reference(self, backend):
        await backend.add_document(Record(id="1", record_type="Page"))

        await backend.remove_document(RecordRef(record_type="Page", id="1"))
        await backend.remove_document(RecordRef(record_type="Page", id="1"))

        assert backend.documents("pages") == {}
        assert backend.documents("all") == {}

    @pytest.mark.asyncio
    async def test_clear_index_only_touches_named_index(self, backend):
        await backend.add_document(Record(id="1", record_type="Page"))

        await backend.clear_index("pages")

        assert backend.documents("pages") == {}
        assert "Page_1" in backend.documents("all")

    @pytest.mark.asyncio
    async def test_clear_unknown_index(self, backend):
        with pytest.raises(NotFoundError):
            await backend.clear_index("missing")
