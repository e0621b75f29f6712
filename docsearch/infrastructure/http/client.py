"""Async client and index handles for the search server.

Client owns the connection settings and the httpx.AsyncClient; Index is a
lightweight handle bound to one index uid. Index.search is the executor
behind Query.execute.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, TypeVar
from urllib.parse import quote

import httpx
from pydantic_core import to_jsonable_python

from docsearch.core.config import Settings, get_settings
from docsearch.domain.exceptions import (
    IndexAlreadyExistsException,
    IndexNotFoundException,
)
from docsearch.domain.query import Query, SearchRequest
from docsearch.infrastructure.http._rest_client import _request_async
from docsearch.schemas.decoding import decode_as
from docsearch.schemas.indexes import IndexInfo, UpdateReceipt
from docsearch.schemas.search import SearchResults, decode_search_results

T = TypeVar("T")


class Index:
    """Handle to a single index; matches the server's /indexes/{uid} resource."""

    def __init__(self, client: Client, uid: str, primary_key: str | None = None):
        self._client = client
        self.uid = uid
        self.primary_key = primary_key

    def __repr__(self) -> str:
        return f"Index(uid={self.uid!r})"

    @property
    def _path(self) -> str:
        return f"/indexes/{quote(self.uid, safe='')}"

    async def search(
        self, query: Query | SearchRequest, document_type: type[T]
    ) -> SearchResults[T]:
        """Run a search and decode each hit as ``document_type``.

        A Query is built first, so the caller's builder is left untouched.
        """
        request = query.build() if isinstance(query, Query) else query
        raw = await self._client._request(
            f"{self._path}/search", method="POST", body=request.to_payload()
        )
        return decode_search_results(raw, document_type)

    async def get_document(self, document_id: str | int, document_type: type[T]) -> T:
        """Fetch one document by primary key value."""
        raw = await self._client._request(
            f"{self._path}/documents/{quote(str(document_id), safe='')}"
        )
        return decode_as(raw, document_type)

    async def add_documents(
        self, documents: Sequence[Any], primary_key: str | None = None
    ) -> UpdateReceipt:
        """Add or replace documents (dicts, dataclasses or pydantic models)."""
        params = {"primaryKey": primary_key} if primary_key else None
        raw = await self._client._request(
            f"{self._path}/documents",
            method="POST",
            body=to_jsonable_python(list(documents), by_alias=True),
            params=params,
        )
        return decode_as(raw, UpdateReceipt)

    async def info(self) -> IndexInfo:
        raw = await self._client._request(self._path)
        info = decode_as(raw, IndexInfo)
        self.primary_key = info.primary_key
        return info

    async def delete(self) -> None:
        await self._client._request(self._path, method="DELETE")


class Client:
    """Search server client (httpx.AsyncClient based).

    Use as an async context manager, or call aclose() when done.
    """

    def __init__(
        self,
        host: str,
        api_key: str | None = None,
        *,
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._host = host.rstrip("/")
        self._api_key = api_key
        self._http = (
            http_client if http_client is not None else httpx.AsyncClient(timeout=timeout)
        )
        self._owns_http = http_client is None

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> Client:
        """Build a client from Settings (defaults to get_settings())."""
        settings = settings or get_settings()
        api_key = settings.api_key.get_secret_value() if settings.api_key else None
        return cls(
            settings.host,
            api_key,
            timeout=settings.timeout_seconds,
            http_client=http_client,
        )

    async def __aenter__(self) -> Client:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the HTTP client only if we created it (do not close injected client)."""
        if self._owns_http:
            await self._http.aclose()

    async def _request(
        self,
        path: str,
        method: str = "GET",
        body: Any = None,
        params: dict[str, str] | None = None,
    ) -> bytes:
        return await _request_async(
            self._http,
            f"{self._host}{path}",
            method=method,
            body=body,
            params=params,
            api_key=self._api_key,
        )

    def index(self, uid: str) -> Index:
        """Return a handle for ``uid`` without checking that it exists."""
        return Index(self, uid)

    async def get_index(self, uid: str) -> Index:
        """Return a handle for an existing index; raises IndexNotFoundException."""
        index = Index(self, uid)
        await index.info()
        return index

    async def create_index(self, uid: str, primary_key: str | None = None) -> Index:
        """Create an index; raises IndexAlreadyExistsException if it exists."""
        body: dict[str, str] = {"uid": uid}
        if primary_key is not None:
            body["primaryKey"] = primary_key
        raw = await self._request("/indexes", method="POST", body=body)
        info = decode_as(raw, IndexInfo)
        return Index(self, info.uid, info.primary_key)

    async def get_or_create_index(self, uid: str) -> Index:
        """Return the index, creating it when it does not exist yet."""
        try:
            return await self.get_index(uid)
        except IndexNotFoundException:
            pass
        try:
            return await self.create_index(uid)
        except IndexAlreadyExistsException:
            # Created concurrently between the two calls
            return await self.get_index(uid)

    async def delete_index(self, uid: str) -> None:
        await Index(self, uid).delete()

    async def list_indexes(self) -> list[IndexInfo]:
        raw = await self._request("/indexes")
        return decode_as(raw, list[IndexInfo])
