"""Fluent builder for graph relations between key-value items.

Paths:
    - read:   GET    /{collection}/{key}/relations/{relation}[/{relation}...]
    - create: PUT    /{collection}/{key}/relation/{relation}/{to_collection}/{to_key}
    - remove: DELETE /{collection}/{key}/relation/{relation}/{to_collection}/{to_key}?purge=true

Read builders walk one or more relation hops from the `from_` node. Write
builders connect exactly one relation between the `from_` and `to` nodes.
"""

from __future__ import annotations

from typing import Awaitable

from orchestrate.builders.base import Builder, require
from orchestrate.response import Response


class GraphBuilder(Builder):
    """Accumulate graph endpoints and relation names for one request."""

    def __init__(self, delegate, write: bool = False) -> None:
        super().__init__(delegate, write)
        self._from = None
        self._to = None
        self._relations = []

    def from_(self, collection: str, key: str) -> GraphBuilder:
        """Set the source node. Named with a trailing underscore since `from` is reserved."""
        self._ensure_active()
        require(collection and key, "Collection and key required.")
        self._from = (collection, key)
        return self

    def related(self, *relations: str) -> GraphBuilder:
        self._ensure_active()
        require(relations and all(relations), "Relation names required.")
        self._relations.extend(relations)
        return self

    def to(self, collection: str, key: str) -> GraphBuilder:
        self._ensure_active()
        require(collection and key, "Collection and key required.")
        self._to = (collection, key)
        return self

    def get(self) -> Awaitable[Response]:
        """Fetch items reachable from the source node through the relation path."""
        self._ensure_active()
        self._ensure_mode(False, "get")
        require(self._from, "Source node required: call from_() first.")
        require(self._relations, "At least one relation required.")
        self._seal()

        client = self._delegate
        collection, key = self._from
        return client.dispatcher.do_get(
            client.compose_url([collection, key, "relations", *self._relations])
        )

    def create(self) -> Awaitable[Response]:
        """Store the relation between the source and target nodes."""
        path = self._edge_path("create")
        client = self._delegate
        return client.dispatcher.do_put(client.compose_url(path))

    def remove(self) -> Awaitable[Response]:
        """Delete the relation between the source and target nodes."""
        path = self._edge_path("remove")
        client = self._delegate
        return client.dispatcher.do_delete(client.compose_url(path), "?purge=true")

    def _edge_path(self, action: str) -> list[str]:
        self._ensure_active()
        self._ensure_mode(True, action)
        require(self._from and self._to, "Source and target nodes required.")
        require(len(self._relations) == 1, "Exactly one relation required.")
        self._seal()

        collection, key = self._from
        to_collection, to_key = self._to
        return [collection, key, "relation", self._relations[0], to_collection, to_key]
