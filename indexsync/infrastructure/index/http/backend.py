"""HttpSearchBackend - Elasticsearch-compatible REST client."""

import logging
from typing import Any

import httpx

from indexsync.domain.index.model.document import document_id, to_document
from indexsync.domain.index.model.index import IndexSet
from indexsync.domain.record.model.record import IndexableRecord, Record
from indexsync.domain.shared.error import NotFoundError, SearchBackendError

logger = logging.getLogger(__name__)


class HttpSearchBackend:
    """Search backend speaking the Elasticsearch/OpenSearch document API.

    The client's base_url points at the cluster; one request is made per
    index that accepts the record's type.
    """

    def __init__(self, client: httpx.AsyncClient, indexes: IndexSet) -> None:
        self._client = client
        self._indexes = indexes

    async def add_document(self, record: Record) -> None:
        doc_id = document_id(record)
        body = to_document(record)
        for index_name in self._indexes.for_record_type(record.record_type):
            await self._request("PUT", f"/{index_name}/_doc/{doc_id}", json=body)
            logger.debug(f"Added {doc_id} to '{index_name}'")

    async def remove_document(self, record: IndexableRecord) -> None:
        doc_id = document_id(record)
        for index_name in self._indexes.for_record_type(record.record_type):
            await self._request("DELETE", f"/{index_name}/_doc/{doc_id}", allow_missing=True)
            logger.debug(f"Removed {doc_id} from '{index_name}'")

    async def configure(self) -> None:
        for index_name in self._indexes:
            response = await self._request("HEAD", f"/{index_name}", allow_missing=True)
            if response.status_code == 404:
                await self._request("PUT", f"/{index_name}")
                logger.info(f"Created search index '{index_name}'")

    async def clear_index(self, index_name: str) -> None:
        if index_name not in self._indexes:
            raise NotFoundError(f"Index '{index_name}' is not configured")

        await self._request(
            "POST",
            f"/{index_name}/_delete_by_query",
            json={"query": {"match_all": {}}},
        )

    async def _request(
        self,
        method: str,
        path: str,
        *,
        json: dict[str, Any] | None = None,
        allow_missing: bool = False,
    ) -> httpx.Response:
        try:
            response = await self._client.request(method, path, json=json)
        except httpx.HTTPError as e:
            raise SearchBackendError(f"{method} {path} failed: {e}") from e

        if response.status_code == 404 and allow_missing:
            return response
        if response.is_error:
            raise SearchBackendError(
                f"{method} {path} returned {response.status_code}: {response.text}",
                status_code=response.status_code,
            )
        return response
