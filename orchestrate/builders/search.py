"""Fluent builder for collection search queries."""

from __future__ import annotations

from typing import Awaitable

from orchestrate.builders.base import Builder, require, require_number
from orchestrate.response import Response


class SearchBuilder(Builder):
    """Accumulate collection, paging, and query text for one search request.

    Example:
        >>> await client.new_search_builder().collection("users").limit(10).query("New York")
    """

    def __init__(self, delegate, write: bool = False) -> None:
        super().__init__(delegate, write)
        self._collection = None
        self._limit = None
        self._offset = None

    def collection(self, collection: str) -> SearchBuilder:
        self._ensure_active()
        require(collection, "Collection required.")
        self._collection = collection
        return self

    def limit(self, limit: int) -> SearchBuilder:
        self._ensure_active()
        require_number(limit, "Limit")
        self._limit = limit
        return self

    def offset(self, offset: int) -> SearchBuilder:
        self._ensure_active()
        require_number(offset, "Offset")
        self._offset = offset
        return self

    def query(self, query: str) -> Awaitable[Response]:
        """Run the search: GET `/{collection}?query=...&limit=...&offset=...`."""
        self._ensure_active()
        self._ensure_mode(False, "query")
        require(self._collection and query, "Collection and query required.")
        self._seal()

        client = self._delegate
        return client.dispatcher.do_get(
            client.compose_url(
                [self._collection],
                {"query": query, "limit": self._limit, "offset": self._offset},
            )
        )
